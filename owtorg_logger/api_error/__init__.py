# owtorg_logger/api_error/__init__.py
from .config_error import ConfigurationError
from .logger_error import FileOpenError, InvalidCallbackSignatureError, LoggerError

__all__ = [
    "ConfigurationError",
    "LoggerError",
    "InvalidCallbackSignatureError",
    "FileOpenError",
]
