# owtorg_logger/logger/levels.py
"""Severity labels and the single-line output format shared by all backends."""

import logging
from enum import Enum
from typing import Any, Iterable


class Severity(str, Enum):
    """
    The eight RFC 5424 severities, valued by their output label.

    Examples:
        >>> str(Severity.EMERGENCY)
        'Emergency'
        >>> Severity.NOTICE.level == logging.INFO
        True
    """

    EMERGENCY = "Emergency"
    ALERT = "Alert"
    CRITICAL = "Critical"
    ERROR = "Error"
    WARNING = "Warning"
    NOTICE = "Notice"
    INFO = "Info"
    DEBUG = "Debug"

    @property
    def level(self) -> int:
        """Get numeric logging level for stdlib logging module."""
        return _STDLIB_LEVELS[self]

    def __str__(self) -> str:
        """Return the label for easy printing."""
        return self.value


_STDLIB_LEVELS = {
    Severity.EMERGENCY: logging.CRITICAL,
    Severity.ALERT: logging.CRITICAL,
    Severity.CRITICAL: logging.CRITICAL,
    Severity.ERROR: logging.ERROR,
    Severity.WARNING: logging.WARNING,
    Severity.NOTICE: logging.INFO,
    Severity.INFO: logging.INFO,
    Severity.DEBUG: logging.DEBUG,
}


def stdlib_level(level: str) -> int:
    """
    Numeric stdlib level for a label.

    Labels outside the eight severities are passed through by every backend
    and are recorded at INFO.
    """
    try:
        return Severity(str(level)).level
    except ValueError:
        return logging.INFO


def format_values(values: Iterable[Any]) -> str:
    """Render values as ``[a, b, c]`` using ``str()`` of each value."""
    return "[" + ", ".join(str(value) for value in values) + "]"


def format_line(level: str, values: Iterable[Any]) -> str:
    """
    Build one output line, without the terminator.

    Example:
        >>> format_line("Emergency", ("msg",))
        'Emergency [msg]'
    """
    return f"{str(level)} {format_values(values)}"


__all__ = ["Severity", "stdlib_level", "format_values", "format_line"]
