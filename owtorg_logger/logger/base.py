# owtorg_logger/logger/base.py
"""The logger contract shared by every backend and by the stack."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .levels import Severity

if TYPE_CHECKING:
    from owtorg_logger.config.stack_config import StackConfig


class Logger(ABC):
    """
    Abstract base class for loggers.

    Exposes one method per RFC 5424 severity plus a generic log() that takes
    the level label as a string. Arbitrary labels are written verbatim.

    init() must run before the logger is used. A stack runs it for every
    member at add()/set() time; a logger used on its own is initialized by
    its owner.
    """

    @abstractmethod
    def init(self) -> None:
        """
        Apply the registered init callbacks, in registration order.

        Raises:
            InvalidCallbackSignatureError: If a callback has the wrong shape
        """
        pass

    @abstractmethod
    def register_init_callbacks(self, *callbacks: Any) -> None:
        """Replace the callbacks that init() will apply."""
        pass

    @abstractmethod
    def log(self, level: str, *values: Any) -> None:
        """
        Write values tagged with level.

        Args:
            level: Any label; the eight severities are not enforced
            *values: Opaque values, rendered with str()
        """
        pass

    @classmethod
    def from_config(cls, config: "StackConfig") -> "Logger":
        """Build an instance for the backend registry."""
        return cls()

    def emergency(self, *values: Any) -> None:
        """System is unusable."""
        self.log(Severity.EMERGENCY, *values)

    def alert(self, *values: Any) -> None:
        """Action must be taken immediately."""
        self.log(Severity.ALERT, *values)

    def critical(self, *values: Any) -> None:
        """Critical conditions."""
        self.log(Severity.CRITICAL, *values)

    def error(self, *values: Any) -> None:
        """Runtime errors that do not require immediate action."""
        self.log(Severity.ERROR, *values)

    def warning(self, *values: Any) -> None:
        """Exceptional occurrences that are not errors."""
        self.log(Severity.WARNING, *values)

    def notice(self, *values: Any) -> None:
        """Normal but significant events."""
        self.log(Severity.NOTICE, *values)

    def info(self, *values: Any) -> None:
        """Interesting events."""
        self.log(Severity.INFO, *values)

    def debug(self, *values: Any) -> None:
        """Detailed debug information."""
        self.log(Severity.DEBUG, *values)


__all__ = ["Logger"]
