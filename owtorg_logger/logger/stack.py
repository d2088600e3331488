# owtorg_logger/logger/stack.py
"""
Stack: a group of loggers that is itself a logger.

Usage:
    stack = Stack()
    stack.add(StreamLogger(), FileLogger())
    stack.error("disk full", "/var")   # one write per member, in order

Members are initialized when they join the stack. Stacks nest and fan out
depth-first. Joining re-initializes a nested stack, so populate it through
its own init callbacks rather than add().
"""

import threading
from typing import Any, Iterable, Iterator, List, Tuple

from owtorg_logger.diagnostics import get_diagnostic_logger
from .base import Logger
from .callbacks import Initializable

_log = get_diagnostic_logger(__name__)


class Stack(Initializable[Logger], Logger):
    """
    Fan-out logger.

    Every call is forwarded to each member in insertion order. The stack's
    own init callbacks receive the stack and typically populate it:

        def populate(stack: Logger) -> None:
            stack.add(StreamLogger(), SystemLogger())

        stack = Stack()
        stack.register_init_callbacks(populate)
        stack.init()
    """

    # Held around every membership change of every stack, before any
    # instance lock, so cross-adds between stacks serialize and the cycle
    # check sees a consistent nesting.
    _membership_lock = threading.RLock()

    def __init__(self) -> None:
        super().__init__()
        self._loggers: List[Logger] = []

    @classmethod
    def callback_type(cls) -> type:
        return Logger

    @property
    def loggers(self) -> Tuple[Logger, ...]:
        """Snapshot of the members, in dispatch order."""
        with self._lock:
            return tuple(self._loggers)

    def __len__(self) -> int:
        return len(self.loggers)

    def __iter__(self) -> Iterator[Logger]:
        return iter(self.loggers)

    def _reaches(self, target: "Stack") -> bool:
        """Whether target is this stack or nested anywhere inside it."""
        if self is target:
            return True
        return any(
            isinstance(member, Stack) and member._reaches(target)
            for member in self.loggers
        )

    def _prepare(self, loggers: Iterable[Any]) -> List[Logger]:
        """Validate and initialize prospective members, in order."""
        prepared = list(loggers)
        for lg in prepared:
            if not isinstance(lg, Logger):
                raise TypeError(f"Stack members must be Logger instances, got {lg!r}")
            if isinstance(lg, Stack) and lg._reaches(self):
                raise ValueError("A stack cannot contain itself")

        for lg in prepared:
            try:
                lg.init()
            except Exception as exc:
                _log.debug(
                    "logger_init_failed",
                    logger=type(lg).__name__,
                    error=str(exc),
                )
                raise
        return prepared

    def add(self, *loggers: Logger) -> None:
        """
        Initialize loggers and append them to the stack.

        The call is atomic: if any logger fails to initialize, the error
        propagates and none of the loggers from this call are added.

        Raises:
            InvalidCallbackSignatureError: If a member's init callbacks are
                misshapen
            TypeError: If a member is not a Logger
            ValueError: If a member would make the stack contain itself
        """
        with self._membership_lock, self._lock:
            prepared = self._prepare(loggers)
            self._loggers.extend(prepared)
            _log.debug(
                "loggers_added",
                added=[type(lg).__name__ for lg in prepared],
                size=len(self._loggers),
            )

    def set(self, loggers: Iterable[Logger]) -> None:
        """
        Replace every member, initializing the new ones in order.

        On failure the previous members are kept and the error propagates.
        Loggers that were already members are initialized again; an instance
        listed twice is initialized twice and dispatched to twice.
        """
        with self._membership_lock, self._lock:
            prepared = self._prepare(loggers)
            self._loggers = prepared
            _log.debug(
                "loggers_set",
                loggers=[type(lg).__name__ for lg in prepared],
            )

    def init(self) -> None:
        """
        Empty the stack, then apply its own init callbacks.

        Callbacks must accept a Logger; they usually call add() or set().
        """
        with self._membership_lock, self._lock:
            self._loggers = []
            _log.debug("stack_reset", callbacks=len(self._initializers))
            self._apply_init_callbacks()

    def _fan_out(self, method: str, *args: Any) -> None:
        for lg in self.loggers:
            getattr(lg, method)(*args)

    def log(self, level: str, *values: Any) -> None:
        self._fan_out("log", level, *values)

    def emergency(self, *values: Any) -> None:
        self._fan_out("emergency", *values)

    def alert(self, *values: Any) -> None:
        self._fan_out("alert", *values)

    def critical(self, *values: Any) -> None:
        self._fan_out("critical", *values)

    def error(self, *values: Any) -> None:
        self._fan_out("error", *values)

    def warning(self, *values: Any) -> None:
        self._fan_out("warning", *values)

    def notice(self, *values: Any) -> None:
        self._fan_out("notice", *values)

    def info(self, *values: Any) -> None:
        self._fan_out("info", *values)

    def debug(self, *values: Any) -> None:
        self._fan_out("debug", *values)


__all__ = ["Stack"]
