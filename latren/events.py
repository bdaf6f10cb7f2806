"""Callback registries keyed by subscription id and, optionally, event kind."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any

from .idfactory import IDFactory

Callback = Callable[..., Any]

_CO_VARARGS = 0x04
_CO_VARKEYWORDS = 0x08


class SingleEventHandler(IDFactory):
    """A single event that any number of callbacks can subscribe to."""

    def __init__(self) -> None:
        super().__init__()
        self._callbacks: dict[int, Callback] = {}

    def subscribe(self, fn: Callback) -> int:
        """Register ``fn`` and return the id needed to unsubscribe it."""
        event_id = self.next_id()
        self._callbacks[event_id] = fn
        return event_id

    def unsubscribe(self, event_id: int) -> None:
        """Remove a callback; unknown ids are ignored."""
        self._callbacks.pop(event_id, None)

    def dispatch(self, *args: Any) -> None:
        """Call every subscribed callback with ``args``."""
        for fn in list(self._callbacks.values()):
            fn(*args)

    def clear_events(self) -> None:
        self._callbacks.clear()


class EventHandler(IDFactory):
    """Callbacks grouped by event kind; dispatching one kind calls only its callbacks."""

    def __init__(self) -> None:
        super().__init__()
        self._events: dict[Hashable, dict[int, Callback]] = {}

    def subscribe(self, event: Hashable, fn: Callback) -> int:
        """Register ``fn`` for ``event`` and return its subscription id."""
        event_id = self.next_id()
        self._events.setdefault(event, {})[event_id] = fn
        return event_id

    def unsubscribe(self, event: Hashable, event_id: int) -> None:
        """Remove a callback from ``event``; unknown ids are ignored."""
        self._events.setdefault(event, {}).pop(event_id, None)

    def dispatch(self, event: Hashable, *args: Any) -> None:
        """Call every callback registered for ``event`` with ``args``."""
        for fn in list(self._events.get(event, {}).values()):
            fn(*args)

    def clear_events(self) -> None:
        self._events.clear()


def _takes_no_arguments(fn: Callback) -> bool:
    """True if ``fn`` can be called without positional arguments and accepts none extra."""
    func = getattr(fn, "__func__", fn)
    code = getattr(func, "__code__", None)
    if code is None:
        return False
    if code.co_flags & (_CO_VARARGS | _CO_VARKEYWORDS):
        return False
    required = code.co_argcount - len(getattr(func, "__defaults__", None) or ())
    if func is not fn and getattr(fn, "__self__", None) is not None:
        required -= 1
    return required <= 0


class VariantEventHandler(EventHandler):
    """An event handler whose callbacks may ignore the dispatched arguments.

    Callbacks that take no parameters are called without arguments; all
    others receive the dispatched arguments.
    """

    def dispatch(self, event: Hashable, *args: Any) -> None:
        for fn in list(self._events.get(event, {}).values()):
            if _takes_no_arguments(fn):
                fn()
            else:
                fn(*args)