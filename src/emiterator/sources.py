"""Source protocol and adapters.

A *source* is anything that calls back into registered listeners when a
named event happens — a stream reader, a socket wrapper, a timer, a
signal hub. The bridge needs exactly two operations from it:

- **subscribe**: ``source.subscribe(kind, listener)``
- **unsubscribe**: ``source.unsubscribe(kind, listener)``, a no-op when
  the listener is not registered

Firing is synchronous: every listener for a kind runs before the
source's emit call returns.

Python emitters spell these operations differently. ``as_source()``
adapts the common spellings so callers can hand the bridge whatever
emitter they already have.
"""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias, runtime_checkable

# A listener callback, invoked with whatever arguments the source passes
Listener: TypeAlias = Callable[..., Any]


@runtime_checkable
class Source(Protocol):
    """An event source the bridge can subscribe to."""

    def subscribe(self, kind: Hashable, listener: Listener) -> Any: ...

    def unsubscribe(self, kind: Hashable, listener: Listener) -> Any: ...


# (subscribe, unsubscribe) method names, tried in order
_METHOD_PAIRS: tuple[tuple[str, str], ...] = (
    ("subscribe", "unsubscribe"),
    ("on", "off"),  # Node-style emitters
    ("on", "remove_listener"),  # pyee
    ("add_listener", "remove_listener"),
    ("add_event_listener", "remove_event_listener"),
)


@dataclass(frozen=True, slots=True)
class MethodSource:
    """Adapts an emitter whose methods use other names to ``Source``."""

    target: Any
    subscribe_name: str
    unsubscribe_name: str

    def subscribe(self, kind: Hashable, listener: Listener) -> Any:
        return getattr(self.target, self.subscribe_name)(kind, listener)

    def unsubscribe(self, kind: Hashable, listener: Listener) -> Any:
        return getattr(self.target, self.unsubscribe_name)(kind, listener)


def as_source(obj: Any) -> Source:
    """Return *obj* as a ``Source``, wrapping it if its methods are named differently.

    Raises:
        TypeError: *obj* has no recognised subscribe/unsubscribe pair.
    """
    for subscribe_name, unsubscribe_name in _METHOD_PAIRS:
        if callable(getattr(obj, subscribe_name, None)) and callable(
            getattr(obj, unsubscribe_name, None)
        ):
            if subscribe_name == "subscribe":
                return obj
            return MethodSource(obj, subscribe_name, unsubscribe_name)

    tried = ", ".join(f"{s}/{u}" for s, u in _METHOD_PAIRS)
    msg = f"{type(obj).__name__!r} is not an event source (expected one of: {tried})"
    raise TypeError(msg)
