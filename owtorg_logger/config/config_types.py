# owtorg_logger/config/config_types.py
"""Configuration type definitions."""

from enum import Enum
import logging


class EnvLogLevel(str, Enum):
    """
    Supported levels for the library's own diagnostics.

    Inherits from str so enum values serialize naturally to JSON/strings
    without custom serialization logic.

    Examples:
        >>> EnvLogLevel.INFO
        <EnvLogLevel.INFO: 'INFO'>
        >>> str(EnvLogLevel.INFO)
        'INFO'
    """

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def level(self) -> int:
        """Get numeric logging level for stdlib logging module."""
        return getattr(logging, self.value)

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


class EnvLogBackends(str, Enum):
    """Backends shipped with the package, by registry name."""

    STREAM = "stream"
    SYSTEM = "system"
    FILE = "file"

    def __str__(self) -> str:
        """Return string value for easy printing."""
        return self.value


class EnvStream(str, Enum):
    """Standard streams the stream backend can target."""

    STDOUT = "stdout"
    STDERR = "stderr"

    def __str__(self) -> str:
        return self.value


__all__ = [
    "EnvLogLevel",
    "EnvLogBackends",
    "EnvStream",
]
