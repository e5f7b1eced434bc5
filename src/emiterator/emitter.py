"""Minimal synchronous event emitter.

``Emitter`` satisfies the ``Source`` protocol and is the simplest way to
feed a bridge by hand::

    emitter = Emitter()
    events = bridge(emitter, ["data"], ["end"])
    emitter.emit("data", b"chunk")
    emitter.emit("end")

Listeners run synchronously, in subscription order, on the caller's
thread. The listener list is snapshotted before each emit, so a listener
that unsubscribes (itself or others) does not change who is notified
for that emit.
"""

from collections.abc import Hashable
from typing import Any

from emiterator.sources import Listener


class Emitter:
    """Synchronous emitter keyed by event kind."""

    __slots__ = ("_listeners",)

    def __init__(self) -> None:
        # kind -> listeners in subscription order
        self._listeners: dict[Hashable, list[Listener]] = {}

    def subscribe(self, kind: Hashable, listener: Listener) -> None:
        """Register *listener* for *kind*. The same listener may be added twice."""
        self._listeners.setdefault(kind, []).append(listener)

    def unsubscribe(self, kind: Hashable, listener: Listener) -> None:
        """Remove one registration of *listener* for *kind*, if present."""
        listeners = self._listeners.get(kind)
        if not listeners:
            return
        try:
            listeners.remove(listener)
        except ValueError:
            return
        if not listeners:
            del self._listeners[kind]

    def emit(self, kind: Hashable, *args: Any, **kwargs: Any) -> bool:
        """Call every listener for *kind*. Returns True if there were any."""
        listeners = list(self._listeners.get(kind, ()))
        for listener in listeners:
            listener(*args, **kwargs)
        return bool(listeners)

    def listener_count(self, kind: Hashable) -> int:
        return len(self._listeners.get(kind, ()))

    def kinds(self) -> list[Hashable]:
        """Kinds that currently have at least one listener."""
        return list(self._listeners)
