"""Ownership list of listener registrations.

Every callback a bridge installs on its source is recorded here as a
``(kind, callback)`` pair. ``clear()`` removes them all from the source
exactly once; calling it again is a no-op.
"""

from collections.abc import Hashable, Iterator

from emiterator.sources import Listener, Source


class Subscriptions:
    """Listener registrations owned by a single bridge."""

    __slots__ = ("_entries", "_source")

    def __init__(self, source: Source) -> None:
        self._source = source
        self._entries: list[tuple[Hashable, Listener]] = []

    def add(self, kind: Hashable, listener: Listener) -> None:
        """Register *listener* for *kind* on the source and record it."""
        self._source.subscribe(kind, listener)
        self._entries.append((kind, listener))

    def clear(self) -> int:
        """Unsubscribe every recorded listener. Returns how many were removed.

        The list is detached before any ``unsubscribe`` call, so a source
        that raises, or that fires another event from inside
        ``unsubscribe``, cannot cause a second removal pass.
        """
        entries, self._entries = self._entries, []
        for kind, listener in entries:
            self._source.unsubscribe(kind, listener)
        return len(entries)

    @property
    def active(self) -> bool:
        return bool(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Hashable, Listener]]:
        return iter(list(self._entries))
