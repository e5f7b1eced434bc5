"""Emiterator — async iteration over callback-based event sources.

Turns an object that calls listeners when named events happen into an
async iterator that yields those events one at a time, in firing order.

Basic usage::

    from emiterator import Emitter, bridge

    emitter = Emitter()
    events = bridge(emitter, ["data"], ["end"], ["error"])

    async for element in events:
        # element.kind == "data", element.args == the listener arguments
        ...

Any source with ``subscribe``/``unsubscribe`` works, as do emitters
spelling them ``on``/``off``, ``on``/``remove_listener`` or
``add_listener``/``remove_listener``.
"""

__version__ = "0.1.0"
__all__ = [
    "Bridge",
    "ConfigurationError",
    "Element",
    "EmiteratorError",
    "Emitter",
    "EventRoles",
    "Source",
    "SourceFailure",
    "as_source",
    "bridge",
]

# name -> module it lives in
_LAZY_IMPORTS: dict[str, str] = {
    "Bridge": "emiterator.bridging",
    "bridge": "emiterator.bridging",
    "Element": "emiterator.element",
    "Emitter": "emiterator.emitter",
    "EventRoles": "emiterator.config",
    "Source": "emiterator.sources",
    "as_source": "emiterator.sources",
    "EmiteratorError": "emiterator.errors",
    "ConfigurationError": "emiterator.errors",
    "SourceFailure": "emiterator.errors",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import emiterator`` cheap while providing a flat top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
