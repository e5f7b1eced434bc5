"""Bridge — turn callback events into an async iterator.

A source calls listeners when events happen; a consumer wants to
``async for`` over them. The bridge sits in between:

- Data events are appended to an unbounded FIFO and wake the consumer.
- A completion event tears down every listener and ends iteration.
- A failure event tears down every listener and raises to the consumer.

Example::

    emitter = Emitter()
    events = bridge(emitter, ["line"], ["eof"], ["error"])

    async for element in events:
        print(element.kind, element.args)

Scheduling model:
    Single-threaded and cooperative. Listeners run synchronously inside
    the source's emit call, on the event loop thread. The only place the
    bridge suspends is the wake slot wait in ``_iterate()``. Every event
    fired in one synchronous batch is queued before the consumer resumes
    and is delivered in firing order, before any completion or failure
    fired later in the same batch.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import AsyncGenerator, Hashable, Iterable
from typing import Any, Generic, TypeVar

from emiterator._internal.subscriptions import Subscriptions
from emiterator._internal.wake import Wake, WakeSlot
from emiterator.config import EventRoles
from emiterator.element import Element
from emiterator.errors import failure_from
from emiterator.sources import Listener, as_source

logger = logging.getLogger("emiterator.bridging")

K = TypeVar("K")


class Bridge(Generic[K]):
    """Single-pass async iterator over the data events of a source.

    Listeners are installed when the bridge is constructed, so events
    fired before the first ``__anext__`` are buffered, not lost. To read
    the same source again, build a new bridge.

    Stopping early leaves the listeners installed until a completion or
    failure event fires. Use ``aclose()`` or ``async with`` to remove
    them sooner::

        async with bridge(sock, ["message"], ["close"]) as messages:
            async for message in messages:
                if message.args[0] == "bye":
                    break
    """

    __slots__ = (
        "_closed",
        "_iterator",
        "_pending",
        "_roles",
        "_subscriptions",
        "_waiting",
        "_wake",
    )

    def __init__(self, source: Any, roles: EventRoles) -> None:
        self._roles = roles
        self._pending: deque[Element[K]] = deque()
        self._wake = WakeSlot()
        self._closed = False
        self._waiting = False
        self._subscriptions = Subscriptions(as_source(source))
        self._iterator = self._iterate()

        try:
            for kind in roles.data:
                self._subscriptions.add(kind, self._data_listener(kind))
            for kind in roles.completion:
                self._subscriptions.add(kind, self._completion_listener(kind))
            for kind in roles.failure:
                self._subscriptions.add(kind, self._failure_listener(kind))
        except Exception:
            # Source rejected a subscription: undo the ones already made
            self._subscriptions.clear()
            raise

        logger.debug(
            "bridge subscribed: data=%r completion=%r failure=%r",
            roles.data,
            roles.completion,
            roles.failure,
        )

    # -- Listeners --

    def _data_listener(self, kind: K) -> Listener:
        def on_data(*args: Any, **kwargs: Any) -> None:
            if self._closed:
                return
            self._pending.append(Element(kind, args, kwargs))
            self._wake.resolve_more()
            self._wake = WakeSlot()

        return on_data

    def _completion_listener(self, kind: Hashable) -> Listener:
        def on_completion(*args: Any, **kwargs: Any) -> None:
            self._terminate(kind)

        return on_completion

    def _failure_listener(self, kind: Hashable) -> Listener:
        def on_failure(*args: Any, **kwargs: Any) -> None:
            if self._closed:
                return
            self._terminate(kind, failure_from(kind, args))

        return on_failure

    def _terminate(self, reason: Any, failure: BaseException | None = None) -> None:
        """Remove every listener once, then resolve the current wake slot.

        No new wake slot is installed: the stream is ending. Later calls
        are no-ops, so a completion and a failure fired back to back
        produce exactly one outcome.
        """
        if self._closed:
            return
        self._closed = True
        wake = self._wake
        try:
            removed = self._subscriptions.clear()
            logger.debug("bridge torn down by %r, %d listeners removed", reason, removed)
        finally:
            if failure is None:
                wake.resolve_complete()
            else:
                wake.resolve_failed(failure)

    # -- Consumer side --

    async def _iterate(self) -> AsyncGenerator[Element[K], None]:
        # The installed wake slot is unresolved until the stream ends: a
        # data listener resolves it and installs a fresh one in the same
        # call. Anything queued is therefore drained before the slot is
        # inspected, including a batch that fired before the first pull.
        try:
            while True:
                # Deque is read live: events fired while the consumer is
                # suspended at a yield are delivered in this same pass.
                while self._pending:
                    yield self._pending.popleft()

                wake = self._wake
                if wake.outcome is Wake.COMPLETE:
                    return
                if wake.outcome is Wake.FAILED:
                    assert wake.failure is not None
                    raise wake.failure

                self._waiting = True
                try:
                    await wake.wait()
                finally:
                    self._waiting = False
        finally:
            self._pending.clear()
            self._terminate("close")

    def __aiter__(self) -> Bridge[K]:
        return self

    async def __anext__(self) -> Element[K]:
        return await self._iterator.__anext__()

    async def aclose(self) -> None:
        """Remove all listeners and end iteration. Safe to call repeatedly.

        Elements still buffered are discarded. A consumer currently
        waiting for the next element sees the end of the stream.
        """
        if not self._closed:
            logger.debug("bridge closed early with %d elements pending", len(self._pending))
        self._pending.clear()
        self._terminate("close")
        if not self._waiting:
            await self._iterator.aclose()

    async def __aenter__(self) -> Bridge[K]:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # -- Introspection --

    @property
    def roles(self) -> EventRoles:
        return self._roles

    @property
    def closed(self) -> bool:
        """True once the listeners have been removed."""
        return self._closed

    @property
    def pending(self) -> int:
        """Number of buffered elements not yet delivered."""
        return len(self._pending)

    @property
    def subscriptions(self) -> Subscriptions:
        return self._subscriptions

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<Bridge {state} pending={len(self._pending)} data={self._roles.data!r}>"


def bridge(
    source: Any,
    data_kinds: Iterable[K],
    completion_kinds: Iterable[Hashable],
    failure_kinds: Iterable[Hashable] = (),
    *,
    strict: bool = False,
) -> Bridge[K]:
    """Subscribe to *source* and return an async iterator of its data events.

    Args:
        source: Any object with ``subscribe``/``unsubscribe`` methods, or
            one of the spellings ``as_source()`` understands.
        data_kinds: Events yielded as ``Element`` values.
        completion_kinds: Events that end iteration normally.
        failure_kinds: Events that end iteration by raising. The first
            argument is raised if it is an exception; otherwise a
            ``SourceFailure`` naming the event is raised. To receive
            these events as data instead, list them in *data_kinds*.
        strict: Raise ``ConfigurationError`` if a kind is listed under
            more than one role. Off by default.

    Example::

        async for element in bridge(reader, ["data"], ["end"], ["error"]):
            handle(element.args[0])
    """
    roles = EventRoles.of(data_kinds, completion_kinds, failure_kinds)
    if strict:
        roles.validate()
    return Bridge(source, roles)
