# owtorg_logger/__init__.py
"""
A logging facade over stream, system-log and file backends.

Usage:
    from owtorg_logger import FileLogger, Stack, StreamLogger

    stack = Stack()
    stack.add(StreamLogger(), FileLogger())
    stack.warning("low disk", 512)
"""

from owtorg_logger.api_error import (
    ConfigurationError,
    FileOpenError,
    InvalidCallbackSignatureError,
    LoggerError,
)
from owtorg_logger.logger import Logger, Severity, Stack
from owtorg_logger.logger.log_backends import (
    FileLogger,
    StreamLogger,
    SystemLogger,
    build_stack,
    register_backend,
    stack_from_env,
)

__all__ = [
    "ConfigurationError",
    "FileOpenError",
    "InvalidCallbackSignatureError",
    "LoggerError",
    "Logger",
    "Severity",
    "Stack",
    "FileLogger",
    "StreamLogger",
    "SystemLogger",
    "build_stack",
    "register_backend",
    "stack_from_env",
]
