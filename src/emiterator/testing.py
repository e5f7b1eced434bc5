"""Test helpers for code that consumes bridges.

Usage::

    from emiterator.testing import collect, fire_soon

    async def test_lines():
        emitter = Emitter()
        events = bridge(emitter, ["line"], ["eof"])
        fire_soon(emitter, ("line", "a"), ("line", "b"), ("eof",))
        assert [e.args for e in await collect(events)] == [("a",), ("b",)]
"""

import asyncio
from collections.abc import AsyncIterable, Hashable
from typing import Any, TypeAlias, TypeVar

from emiterator.element import Element

# (kind, *args) — one event to fire
Firing: TypeAlias = tuple[Any, ...]

K = TypeVar("K")


async def collect(
    events: AsyncIterable[Element[K]],
    *,
    limit: int | None = None,
) -> list[Element[K]]:
    """Gather elements from *events* until it ends or *limit* are received.

    Exceptions raised by the iterator propagate. Stopping at *limit*
    does not close the iterator.
    """
    collected: list[Element[K]] = []
    if limit is not None and limit <= 0:
        return collected
    async for element in events:
        collected.append(element)
        if limit is not None and len(collected) >= limit:
            break
    return collected


def fire(source: Any, *firings: Firing) -> None:
    """Fire each ``(kind, *args)`` on *source* now, in order."""
    for kind, *args in firings:
        source.emit(kind, *args)


def fire_soon(source: Any, *firings: Firing) -> asyncio.Handle:
    """Fire ``(kind, *args)`` tuples on *source* in one batch on the next loop turn.

    All firings run back to back inside a single callback, so the
    consumer cannot observe any of them before all have fired. Requires
    a running asyncio loop.
    """
    return asyncio.get_running_loop().call_soon(fire, source, *firings)


def kinds(elements: list[Element[Hashable]]) -> list[Hashable]:
    """The ``kind`` of each element, in order."""
    return [element.kind for element in elements]
