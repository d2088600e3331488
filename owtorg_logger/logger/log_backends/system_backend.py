# owtorg_logger/logger/log_backends/system_backend.py
"""System backend: lines handed to the stdlib logging facility."""

import logging
import sys
import threading
from typing import Any, TextIO

from owtorg_logger.config.stack_config import DEFAULT_SYSTEM_LOGGER_NAME, StackConfig
from ..base import Logger
from ..callbacks import Initializable
from ..levels import format_line, stdlib_level

_setup_lock = threading.Lock()


class _StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever sys.stderr is at emit time."""

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: TextIO) -> None:
        pass


def get_system_logger(name: str = DEFAULT_SYSTEM_LOGGER_NAME) -> logging.Logger:
    """
    Get the stdlib logger for ``name``.

    Only the package's own default logger is set up here: it gets a bare
    ``%(message)s`` handler on stderr and stops propagating. Any other name
    belongs to the application and is returned as configured, so its
    records follow its own handlers, level and propagation.
    """
    logger = logging.getLogger(name)
    if name != DEFAULT_SYSTEM_LOGGER_NAME:
        return logger
    with _setup_lock:
        if not logger.handlers:
            handler = _StderrHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            logger.addHandler(handler)
            logger.setLevel(logging.DEBUG)
            logger.propagate = False
    return logger


class SystemLogger(Initializable["SystemLogger"], Logger):
    """
    Writes ``<level> [<values>]`` through a stdlib ``logging.Logger``.

    Records carry the numeric level matching the severity, so handlers and
    filters attached to the logger can act on it. Labels outside the eight
    severities are recorded at INFO.
    """

    def __init__(self) -> None:
        super().__init__()
        self.logger: logging.Logger = get_system_logger()

    @classmethod
    def from_config(cls, config: StackConfig) -> "SystemLogger":
        name = config.system_logger_name

        def select_logger(s: SystemLogger) -> None:
            s.logger = get_system_logger(name)

        logger = cls()
        logger.register_init_callbacks(select_logger)
        return logger

    def init(self) -> None:
        self._apply_init_callbacks()

    def log(self, level: str, *values: Any) -> None:
        self.logger.log(stdlib_level(level), format_line(level, values))


__all__ = ["SystemLogger", "get_system_logger"]
