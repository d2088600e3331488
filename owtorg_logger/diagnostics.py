# owtorg_logger/diagnostics.py
"""
Diagnostics for the facade itself.

Usage:
    from owtorg_logger.diagnostics import get_diagnostic_logger

    _log = get_diagnostic_logger(__name__)
    _log.debug("logger_added", logger="FileLogger")

These events describe what the facade is doing (members added, files that
could not be opened) and never reach the facade's own sinks.
"""
from typing import Any, Optional
import structlog

from owtorg_logger.config.structlog_config import (
    get_logger as _get_structlog_logger,
    is_configured,
)


class DiagnosticLogger:
    """
    Lazy structlog wrapper.

    Nothing is configured until the first event, so importing the package
    has no logging side effects.
    """

    def __init__(self, name: str = "owtorg_logger"):
        self._name = name
        self._logger_instance: Optional[structlog.typing.FilteringBoundLogger] = None

    @property
    def _logger(self) -> structlog.typing.FilteringBoundLogger:
        """
        Lazy-load logger instance.

        This ensures structlog is configured before first use, and again
        after its state has been reset.
        """
        if self._logger_instance is None or not is_configured():
            self._logger_instance = _get_structlog_logger(self._name)
        return self._logger_instance

    def debug(self, msg: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._logger.debug(msg, **kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        """Log info message."""
        self._logger.info(msg, **kwargs)

    def warning(self, msg: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._logger.warning(msg, **kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        """Log error message."""
        self._logger.error(msg, **kwargs)


def get_diagnostic_logger(name: str = "owtorg_logger") -> DiagnosticLogger:
    """
    Get diagnostic logger instance.

    Args:
        name: Logger name

    Returns:
        DiagnosticLogger instance
    """
    return DiagnosticLogger(name)


__all__ = ["DiagnosticLogger", "get_diagnostic_logger"]
