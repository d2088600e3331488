# owtorg_logger/logger/log_backends/stream_backend.py
"""Stream backend: plain lines on stdout (or any text stream)."""

import sys
from typing import Any, Optional, TextIO

from owtorg_logger.config.config_types import EnvStream
from owtorg_logger.config.stack_config import StackConfig
from ..base import Logger
from ..callbacks import Initializable
from ..levels import format_line


class StreamLogger(Initializable["StreamLogger"], Logger):
    """
    Writes ``<level> [<values>]`` lines to a text stream.

    The stream defaults to whatever sys.stdout is at write time. Init
    callbacks may point it elsewhere by setting ``stream``.
    """

    def __init__(self) -> None:
        super().__init__()
        self.stream: Optional[TextIO] = None

    @classmethod
    def from_config(cls, config: StackConfig) -> "StreamLogger":
        target = config.stream

        def select_stream(s: StreamLogger) -> None:
            s.stream = sys.stderr if target == EnvStream.STDERR else sys.stdout

        logger = cls()
        logger.register_init_callbacks(select_stream)
        return logger

    def init(self) -> None:
        self._apply_init_callbacks()

    def log(self, level: str, *values: Any) -> None:
        line = format_line(level, values)
        with self._lock:
            print(line, file=self.stream or sys.stdout)


__all__ = ["StreamLogger"]
