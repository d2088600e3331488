# owtorg_logger/api_error/logger_error.py
from pathlib import Path
from typing import Any, Union


class LoggerError(Exception):
    """Base error for all logger-specific issues."""

    def __init__(self, message: str, code: str = "LOGGER_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidCallbackSignatureError(LoggerError):
    """An init callback does not accept the logger it was registered on."""

    def __init__(self, callback: Any, expected: str, reason: str):
        self.callback = callback
        self.expected = expected
        name = getattr(callback, "__qualname__", None) or repr(callback)
        super().__init__(
            f"Init callbacks must have signature func(s: {expected}); "
            f"{name} {reason}",
            code="INVALID_CALLBACK_SIGNATURE",
        )


class FileOpenError(LoggerError):
    """The file backend could not open its target for append."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        super().__init__(
            f"Failed to open log file {self.path}: {reason}",
            code="FILE_OPEN_FAILURE",
        )


__all__ = ["LoggerError", "InvalidCallbackSignatureError", "FileOpenError"]
