"""Tests for emiterator.element — Element dataclass."""

import pytest

from emiterator.element import Element


class TestElement:
    def test_defaults(self) -> None:
        element = Element("end")
        assert element.args == ()
        assert element.kwargs == {}

    def test_equality(self) -> None:
        assert Element("x", ("foo",)) == Element("x", ("foo",), {})
        assert Element("x", ("foo",)) != Element("y", ("foo",))

    def test_frozen(self) -> None:
        element = Element("x", (1,))
        with pytest.raises(AttributeError):
            element.kind = "y"  # type: ignore[misc]
