# owtorg_logger/logger/callbacks.py
"""
Init callbacks: deferred configuration applied to a logger at init time.

A callback takes exactly one argument, the logger being initialized, and
mutates its configuration:

    def log_to_tmp(fl: FileLogger) -> None:
        fl.log_path = Path("/tmp/app.log")

    fl = FileLogger()
    fl.register_init_callbacks(log_to_tmp)
    fl.init()

Shapes are checked when init() runs, not when callbacks are registered.
"""

import functools
import inspect
import threading
import types
import typing
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar, Union

from owtorg_logger.api_error import InvalidCallbackSignatureError

L = TypeVar("L")

InitCallback = Callable[[L], Any]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def _hint_target(callback: Any) -> Any:
    if inspect.isclass(callback):
        return callback.__init__
    if inspect.isroutine(callback) or isinstance(callback, functools.partial):
        return callback
    return getattr(type(callback), "__call__", callback)


def _first_parameter(signature: inspect.Signature) -> Optional[inspect.Parameter]:
    for param in signature.parameters.values():
        if param.kind in _POSITIONAL:
            return param
    return None


def _accepts(annotation: Any, expected: type) -> bool:
    """Whether a parameter annotated ``annotation`` can receive ``expected``."""
    if annotation is inspect.Parameter.empty or annotation is Any:
        return True

    origin = typing.get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        return any(_accepts(arg, expected) for arg in typing.get_args(annotation))

    if isinstance(annotation, str):
        # Unresolved forward reference: match by class name
        name = annotation.strip("'\"").rsplit(".", 1)[-1]
        return name in {klass.__name__ for klass in expected.__mro__}

    if isinstance(annotation, type):
        try:
            return issubclass(expected, annotation)
        except TypeError:
            # Non runtime-checkable protocols cannot be judged
            return True

    return True


def check_callback(callback: Any, expected: type) -> None:
    """
    Verify a callback can be applied to an instance of ``expected``.

    Args:
        callback: The registered callback
        expected: The type the callback will be called with

    Raises:
        InvalidCallbackSignatureError: If the callback is not callable, cannot
            be called with a single positional argument, or annotates that
            argument with an incompatible type
    """
    expected_name = expected.__name__

    if not callable(callback):
        raise InvalidCallbackSignatureError(callback, expected_name, "is not callable")

    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        # Builtins without introspectable signatures are taken on trust
        return

    try:
        signature.bind(object())
    except TypeError:
        raise InvalidCallbackSignatureError(
            callback, expected_name, f"has signature {signature}"
        ) from None

    param = _first_parameter(signature)
    if param is None:
        return

    try:
        hints = typing.get_type_hints(_hint_target(callback))
    except (NameError, TypeError, AttributeError):
        hints = {}
    annotation = hints.get(param.name, param.annotation)

    if not _accepts(annotation, expected):
        raise InvalidCallbackSignatureError(
            callback,
            expected_name,
            f"expects {getattr(annotation, '__name__', annotation)}",
        )


class Initializable(Generic[L]):
    """
    Pending init callbacks plus the lock guarding an instance's configuration.

    Loggers inherit this to get callback registration for free; they call
    _apply_init_callbacks() from their own init().
    """

    def __init__(self) -> None:
        self._initializers: List[InitCallback[L]] = []
        self._lock = threading.RLock()

    @classmethod
    def callback_type(cls) -> type:
        """The type callbacks registered on this class must accept."""
        return cls

    @property
    def init_callbacks(self) -> Tuple[InitCallback[L], ...]:
        """Callbacks that the next init() will apply."""
        with self._lock:
            return tuple(self._initializers)

    def register_init_callbacks(self, *callbacks: InitCallback[L]) -> None:
        """
        Replace the pending callbacks.

        Registering again discards the previous set. Nothing is applied until
        init() runs.
        """
        with self._lock:
            self._initializers = list(callbacks)

    def _apply_init_callbacks(self) -> None:
        """Check every callback, then apply them in registration order."""
        with self._lock:
            callbacks = list(self._initializers)
            expected = self.callback_type()
            for callback in callbacks:
                check_callback(callback, expected)
            for callback in callbacks:
                callback(self)


__all__ = ["InitCallback", "Initializable", "check_callback"]
