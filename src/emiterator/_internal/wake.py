"""Wake slot — the single suspension point of a bridge.

A ``WakeSlot`` is a one-shot continuation with three possible outcomes:
more data is pending, the stream completed, or the stream failed. The
consumer awaits it; event callbacks resolve it. The first resolution
wins and later ones are ignored, so a completion and a failure fired
back to back can never both reach the consumer.

Usage::

    slot = WakeSlot()
    slot.resolve_more()          # from a listener callback
    outcome = await slot.wait()  # from the consumer -> Wake.MORE
"""

from enum import Enum

import anyio


class Wake(Enum):
    """Outcome a wake slot resolves to."""

    MORE = "more"
    COMPLETE = "complete"
    FAILED = "failed"


class WakeSlot:
    """One-shot, three-way continuation backed by an ``anyio.Event``."""

    __slots__ = ("_event", "_failure", "_outcome")

    def __init__(self) -> None:
        self._event = anyio.Event()
        self._outcome: Wake | None = None
        self._failure: BaseException | None = None

    @property
    def resolved(self) -> bool:
        return self._outcome is not None

    @property
    def outcome(self) -> Wake | None:
        return self._outcome

    @property
    def failure(self) -> BaseException | None:
        return self._failure

    def resolve_more(self) -> bool:
        """Signal that data was queued. Returns False if already resolved."""
        return self._resolve(Wake.MORE)

    def resolve_complete(self) -> bool:
        """Signal normal end of stream. Returns False if already resolved."""
        return self._resolve(Wake.COMPLETE)

    def resolve_failed(self, failure: BaseException) -> bool:
        """Signal failure carrying *failure*. Returns False if already resolved."""
        if self._outcome is not None:
            return False
        self._failure = failure
        return self._resolve(Wake.FAILED)

    def _resolve(self, outcome: Wake) -> bool:
        if self._outcome is not None:
            return False
        self._outcome = outcome
        self._event.set()
        return True

    async def wait(self) -> Wake:
        """Suspend until resolved and return the outcome."""
        await self._event.wait()
        assert self._outcome is not None
        return self._outcome

    def __repr__(self) -> str:
        state = self._outcome.value if self._outcome is not None else "pending"
        return f"<WakeSlot {state}>"
