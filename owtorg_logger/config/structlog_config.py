# owtorg_logger/config/structlog_config.py
"""
Structlog configuration for the library's own diagnostics.

Applications may call configure_structlog() once at startup. If they never
do, the first diagnostic event configures structlog implicitly from
OWTORG_LOG_LEVEL, and a later explicit call may still replace that default.
"""
import sys
import os
import threading
from typing import Optional
import structlog
from rich.traceback import install as install_rich_traceback

from owtorg_logger.api_error import ConfigurationError
from .logging_config import _default_log_level, load_logging_config


class _StructlogState:
    """
    Thread-safe, process-safe singleton for structlog configuration state.

    This prevents race conditions during initialization and handles
    forked worker processes.
    """

    _instance: Optional["_StructlogState"] = None
    _lock = threading.Lock()

    # Declare instance attributes with their types
    _initialized: bool
    _implicit: bool
    _log_level: Optional[int]
    _process_id: Optional[int]

    def __new__(cls) -> "_StructlogState":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:  # Double-check locking
                    instance = super().__new__(cls)
                    instance._initialized = False
                    instance._implicit = False
                    instance._log_level = None
                    instance._process_id = None  # Track which process configured
                    cls._instance = instance
        return cls._instance

    @property
    def is_configured(self) -> bool:
        """Check if configured in the CURRENT process."""
        current_pid = os.getpid()
        return self._initialized and self._process_id == current_pid

    @property
    def is_implicit(self) -> bool:
        """Configured from defaults rather than by the application."""
        return self.is_configured and self._implicit

    @property
    def log_level(self) -> Optional[int]:
        return self._log_level

    def mark_configured(self, log_level: int, implicit: bool = False) -> None:
        """Mark structlog as configured with given level in this process."""
        with self._lock:
            self._log_level = log_level
            self._process_id = os.getpid()
            self._implicit = implicit
            self._initialized = True

    def reset(self) -> None:
        """Reset state. FOR TESTING ONLY."""
        with self._lock:
            self._initialized = False
            self._implicit = False
            self._log_level = None
            self._process_id = None


_state = _StructlogState()


def _apply(log_level: int) -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,  # type: ignore[list-item]
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False),
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.RichTracebackFormatter(
                    show_locals=False,
                    width=None,
                ),
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def configure_structlog(log_level: int, rich_tracebacks: bool = False) -> None:
    """
    Configure structlog with the specified log level.

    Safe to call in forked worker processes; each process configures
    structlog independently.

    Args:
        log_level: Numeric logging level (e.g., logging.INFO)
        rich_tracebacks: Also install Rich as the process excepthook

    Raises:
        RuntimeError: If already configured explicitly in the same process
            with a different level
    """
    if _state.is_configured and not _state.is_implicit:
        # Idempotent - allow reconfiguration with same level
        if _state.log_level == log_level:
            return
        raise RuntimeError(
            f"structlog already configured in this process. "
            f"Current level: {_state.log_level}, attempted: {log_level}"
        )

    if rich_tracebacks:
        install_rich_traceback(show_locals=True, width=None, extra_lines=3)

    _apply(log_level)
    _state.mark_configured(log_level)


def get_logger(name: str = "owtorg_logger") -> structlog.typing.FilteringBoundLogger:
    """
    Get a structlog logger instance.

    Configures structlog from the environment first if nothing has
    configured it in this process yet. An invalid OWTORG_LOG_LEVEL falls
    back to the default level here; diagnostics never raise into the
    operation that emits them.

    Args:
        name: Logger name

    Returns:
        Configured structlog logger
    """
    if not _state.is_configured:
        try:
            level = load_logging_config().level_int
        except ConfigurationError:
            level = _default_log_level.level
        _apply(level)
        _state.mark_configured(level, implicit=True)
    return structlog.get_logger(name)


def is_configured() -> bool:
    """Check if structlog has been configured in this process."""
    return _state.is_configured


def reset_structlog_state() -> None:
    """Forget any configuration. FOR TESTING ONLY."""
    _state.reset()
    structlog.reset_defaults()


__all__ = [
    "configure_structlog",
    "get_logger",
    "is_configured",
    "reset_structlog_state",
]
