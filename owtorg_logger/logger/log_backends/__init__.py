# owtorg_logger/logger/log_backends/__init__.py
"""
Logger backends.

Ships stream, system and file backends; more can be registered by name.
Select backends via the OWTORG_LOG_BACKENDS environment variable
(comma-separated).

Example:
    OWTORG_LOG_BACKENDS=stream,file
"""

from .file_backend import FileLogger
from .stream_backend import StreamLogger
from .system_backend import SystemLogger, get_system_logger
from .registry import (
    build_stack,
    create_backend,
    get_registered_backends,
    register_backend,
    stack_from_env,
)

__all__ = [
    "FileLogger",
    "StreamLogger",
    "SystemLogger",
    "get_system_logger",
    "build_stack",
    "create_backend",
    "get_registered_backends",
    "register_backend",
    "stack_from_env",
]
