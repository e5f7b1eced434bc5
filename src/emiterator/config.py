"""Event role configuration.

EventRoles is a frozen dataclass: the three kind tuples a bridge
subscribes to, immutable after creation.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass

from emiterator.errors import ConfigurationError


def _unique(kinds: Iterable[Hashable]) -> tuple[Hashable, ...]:
    return tuple(dict.fromkeys(kinds))


@dataclass(frozen=True, slots=True)
class EventRoles:
    """Which event kinds a bridge treats as data, completion or failure.

    Build with ``EventRoles.of()`` to accept any iterables::

        roles = EventRoles.of(["data"], ["end", "close"], ["error"])

    Kinds are expected to occupy a single role. That is not checked
    unless ``validate()`` is called (``bridge(..., strict=True)`` does).
    """

    data: tuple[Hashable, ...] = ()
    completion: tuple[Hashable, ...] = ()
    failure: tuple[Hashable, ...] = ()

    @classmethod
    def of(
        cls,
        data: Iterable[Hashable],
        completion: Iterable[Hashable],
        failure: Iterable[Hashable] = (),
    ) -> EventRoles:
        """Normalize iterables into tuples, dropping repeated kinds."""
        if isinstance(data, str) or isinstance(completion, str) or isinstance(failure, str):
            msg = "event kinds must be given as a collection, not a bare string"
            raise TypeError(msg)
        return cls(
            data=_unique(data),
            completion=_unique(completion),
            failure=_unique(failure),
        )

    def overlap(self) -> frozenset[Hashable]:
        """Kinds listed under more than one role."""
        data = set(self.data)
        completion = set(self.completion)
        failure = set(self.failure)
        return frozenset((data & completion) | (data & failure) | (completion & failure))

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if any kind has more than one role."""
        overlap = self.overlap()
        if overlap:
            names = ", ".join(sorted(repr(kind) for kind in overlap))
            msg = f"event kinds assigned to more than one role: {names}"
            raise ConfigurationError(msg)
