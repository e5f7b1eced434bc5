"""Tests for emiterator.testing — collect() and fire helpers."""

import asyncio

import pytest

from emiterator.bridging import bridge
from emiterator.element import Element
from emiterator.emitter import Emitter
from emiterator.testing import collect, fire, fire_soon, kinds


async def _elements(*kinds_: str):
    for kind in kinds_:
        yield Element(kind)


class TestCollect:
    @pytest.mark.asyncio
    async def test_collects_all(self) -> None:
        assert kinds(await collect(_elements("a", "b"))) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_limit(self) -> None:
        assert kinds(await collect(_elements("a", "b", "c"), limit=2)) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_zero_limit(self) -> None:
        assert await collect(_elements("a"), limit=0) == []

    @pytest.mark.asyncio
    async def test_limit_leaves_bridge_open(self) -> None:
        emitter = Emitter()
        events = bridge(emitter, ["x"], ["end"])
        fire(emitter, ("x", 1), ("x", 2))

        assert kinds(await collect(events, limit=1)) == ["x"]
        assert not events.closed

        emitter.emit("end")
        assert await collect(events) == [Element("x", (2,))]


class TestFire:
    def test_fire_in_order(self) -> None:
        emitter = Emitter()
        seen: list[tuple[object, ...]] = []
        emitter.subscribe("x", lambda *a: seen.append(a))

        fire(emitter, ("x", 1), ("x",), ("x", 2, 3))

        assert seen == [(1,), (), (2, 3)]

    @pytest.mark.asyncio
    async def test_fire_soon_runs_next_turn(self) -> None:
        emitter = Emitter()
        seen: list[object] = []
        emitter.subscribe("x", seen.append)

        fire_soon(emitter, ("x", 1), ("x", 2))
        assert seen == []

        await asyncio.sleep(0)
        assert seen == [1, 2]
