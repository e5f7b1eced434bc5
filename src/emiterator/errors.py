"""Emiterator exception hierarchy.

Shared by the bridge, the role configuration and the source adapters so
every module raises and catches the same types.
"""

from typing import Any


class EmiteratorError(Exception):
    """Base for all emiterator-specific errors."""


class ConfigurationError(EmiteratorError):
    """Raised when event roles are invalid.

    Only raised when the caller opts into strict role checking with
    ``bridge(..., strict=True)``.
    """


class SourceFailure(EmiteratorError):
    """A failure event fired without an exception to raise.

    Raised to the consumer when a failure event carried no argument (or
    ``None``), or carried a value that is not an exception. The exception
    always names the event kind that fired.
    """

    def __init__(self, kind: Any, payload: Any = None) -> None:
        self.kind = kind
        self.payload = payload
        if payload is None:
            message = f"source fired failure event {kind!r}"
        else:
            message = f"source fired failure event {kind!r}: {payload!r}"
        super().__init__(message)


def failure_from(kind: Any, args: tuple[Any, ...]) -> BaseException:
    """Map the arguments of a failure event to the exception to raise.

    An exception passed as the first argument is raised as-is. A missing
    or ``None`` first argument becomes a ``SourceFailure`` naming *kind*,
    so a missing error value never looks like success to the consumer.
    ``StopIteration`` and ``StopAsyncIteration`` are wrapped too: raised
    from the iterator they would read as a normal end, or be turned into
    ``RuntimeError`` by the generator machinery.
    """
    payload = args[0] if args else None
    if isinstance(payload, (StopIteration, StopAsyncIteration)):
        return SourceFailure(kind, payload)
    if isinstance(payload, BaseException):
        return payload
    return SourceFailure(kind, payload)
