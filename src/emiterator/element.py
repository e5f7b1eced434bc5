"""Element type yielded by the bridge."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

K = TypeVar("K")


@dataclass(frozen=True, slots=True)
class Element(Generic[K]):
    """One data event, tagged with the kind that produced it.

    ``args`` holds the positional arguments the source passed to its
    listener, ``kwargs`` any keyword arguments::

        async for element in bridge(stream, ["data"], ["end"]):
            if element.kind == "data":
                chunk, = element.args
    """

    kind: K
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)
