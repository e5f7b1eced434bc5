"""Tests for emiterator._internal.subscriptions — owned listener registrations."""

from emiterator._internal.subscriptions import Subscriptions
from emiterator.emitter import Emitter


def _listener(*args: object) -> None:
    pass


def _other(*args: object) -> None:
    pass


class TestSubscriptions:
    def test_add_subscribes_on_source(self) -> None:
        emitter = Emitter()
        subs = Subscriptions(emitter)

        subs.add("a", _listener)
        subs.add("b", _other)

        assert len(subs) == 2
        assert subs.active
        assert list(subs) == [("a", _listener), ("b", _other)]
        assert emitter.listener_count("a") == 1

    def test_clear_removes_once(self) -> None:
        emitter = Emitter()
        subs = Subscriptions(emitter)
        subs.add("a", _listener)
        subs.add("a", _other)

        assert subs.clear() == 2
        assert subs.clear() == 0
        assert not subs.active
        assert emitter.kinds() == []

    def test_clear_leaves_foreign_listeners(self) -> None:
        emitter = Emitter()
        emitter.subscribe("a", _other)
        subs = Subscriptions(emitter)
        subs.add("a", _listener)

        subs.clear()

        assert emitter.listener_count("a") == 1
