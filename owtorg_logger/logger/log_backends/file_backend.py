# owtorg_logger/logger/log_backends/file_backend.py
"""File backend: one open/append/close cycle per line."""

from pathlib import Path
from typing import Any, Union

from owtorg_logger.api_error import FileOpenError
from owtorg_logger.config.stack_config import DEFAULT_LOG_PATH, StackConfig
from owtorg_logger.diagnostics import get_diagnostic_logger
from ..base import Logger
from ..callbacks import Initializable
from ..levels import format_line

_log = get_diagnostic_logger(__name__)


class FileLogger(Initializable["FileLogger"], Logger):
    """
    File-based logger that appends one line per call.

    No handle is held between calls: each write opens the target for
    append (creating it if absent), writes the line and closes it again.
    init() resets the target to ``./owtorg-logger`` before applying the init
    callbacks, which may point it elsewhere:

        def to_tmp(fl: FileLogger) -> None:
            fl.log_path = "/tmp/app.log"
    """

    def __init__(self) -> None:
        super().__init__()
        self._log_path = Path(DEFAULT_LOG_PATH)

    @property
    def log_path(self) -> Path:
        """Target file, relative paths resolve against the working directory."""
        with self._lock:
            return self._log_path

    @log_path.setter
    def log_path(self, path: Union[str, Path]) -> None:
        with self._lock:
            self._log_path = Path(path)

    @classmethod
    def from_config(cls, config: StackConfig) -> "FileLogger":
        path = config.file_path

        def select_path(fl: FileLogger) -> None:
            fl.log_path = path

        logger = cls()
        logger.register_init_callbacks(select_path)
        return logger

    def init(self) -> None:
        with self._lock:
            self._log_path = Path(DEFAULT_LOG_PATH)
            self._apply_init_callbacks()

    def log(self, level: str, *values: Any) -> None:
        """
        Append one line to the target file.

        Raises:
            FileOpenError: If the file cannot be opened for append
        """
        line = format_line(level, values)
        with self._lock:
            file_path = self._log_path
            try:
                f = file_path.open(mode="a", encoding="utf-8")
            except OSError as e:
                _log.debug("file_open_failed", path=str(file_path), error=str(e))
                raise FileOpenError(file_path, str(e)) from e

            with f:
                f.write(line)
                f.write("\n")


__all__ = ["FileLogger"]
