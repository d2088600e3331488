# owtorg_logger/logger/log_backends/registry.py
"""
Backend registry for assembling stacks from configuration.

Configure via the OWTORG_LOG_BACKENDS environment variable:
    OWTORG_LOG_BACKENDS=stream              # Stream only (default)
    OWTORG_LOG_BACKENDS=stream,file         # Multiple backends, in order
    OWTORG_LOG_BACKENDS=system
"""

from typing import Dict, List, Optional, Type
from dotenv import find_dotenv, load_dotenv

from owtorg_logger.api_error import ConfigurationError
from owtorg_logger.config.config_types import EnvLogBackends
from owtorg_logger.config.stack_config import StackConfig, load_stack_config
from owtorg_logger.diagnostics import get_diagnostic_logger
from ..base import Logger
from ..stack import Stack
from .file_backend import FileLogger
from .stream_backend import StreamLogger
from .system_backend import SystemLogger

_log = get_diagnostic_logger(__name__)


# Registry of available backend classes
_BACKEND_REGISTRY: Dict[str, Type[Logger]] = {
    EnvLogBackends.STREAM.value: StreamLogger,
    EnvLogBackends.SYSTEM.value: SystemLogger,
    EnvLogBackends.FILE.value: FileLogger,
}


def register_backend(name: str, backend_class: Type[Logger]) -> None:
    """
    Register a custom backend class.

    Args:
        name: Backend identifier, matched case-insensitively
        backend_class: Logger subclass; its from_config() builds instances

    Example:
        >>> register_backend("null", NullLogger)
    """
    if not (isinstance(backend_class, type) and issubclass(backend_class, Logger)):
        raise TypeError(f"{backend_class!r} is not a Logger subclass")
    _BACKEND_REGISTRY[name.strip().lower()] = backend_class


def get_registered_backends() -> List[str]:
    """Names that build_stack() understands."""
    return list(_BACKEND_REGISTRY)


def create_backend(name: str, config: Optional[StackConfig] = None) -> Logger:
    """
    Build one uninitialized backend.

    Args:
        name: Registered backend name
        config: Backend settings; defaults to StackConfig()

    Raises:
        ConfigurationError: If the name is not registered
    """
    key = name.strip().lower()
    if key not in _BACKEND_REGISTRY:
        raise ConfigurationError(
            f"Unknown backend '{name}'. "
            f"Available: {', '.join(_BACKEND_REGISTRY.keys())}"
        )
    return _BACKEND_REGISTRY[key].from_config(config or StackConfig())


def build_stack(config: Optional[StackConfig] = None) -> Stack:
    """
    Build an initialized stack with one member per configured backend.

    Unknown backend names are reported and skipped. If none remain, the
    stack falls back to a single StreamLogger.

    Args:
        config: Stack settings; defaults to StackConfig()

    Returns:
        Initialized Stack

    Raises:
        InvalidCallbackSignatureError: If a backend's init callbacks are
            misshapen
    """
    config = config or StackConfig()

    members: List[Logger] = []
    for backend_name in config.backends:
        try:
            members.append(create_backend(backend_name, config))
        except ConfigurationError as e:
            _log.warning("unknown_backend_skipped", backend=backend_name, error=str(e))

    if not members:
        _log.warning("no_backends_configured", fallback=EnvLogBackends.STREAM.value)
        members.append(StreamLogger.from_config(config))

    def populate(stack: Logger) -> None:
        if not isinstance(stack, Stack):
            raise TypeError(f"expected a Stack, got {type(stack).__name__}")
        stack.add(*members)

    stack = Stack()
    stack.register_init_callbacks(populate)
    stack.init()
    _log.debug(
        "stack_built",
        backends=[type(member).__name__ for member in stack.loggers],
    )
    return stack


def stack_from_env(env_file: Optional[str] = None) -> Stack:
    """
    Build a stack from environment variables.

    Variables from env_file (or a .env found from the working directory)
    are loaded first; variables already set in the process win.

    Raises:
        ConfigurationError: If the environment holds invalid settings
    """
    load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True), override=False)
    return build_stack(load_stack_config())


__all__ = [
    "register_backend",
    "get_registered_backends",
    "create_backend",
    "build_stack",
    "stack_from_env",
]
