"""Application dispatch – HandlerChain and its resolver.

A chain lists the candidate handler objects for one dispatch, highest
priority first::

    explicit override  →  controller (or router)  →  global handlers

Any object exposing the hook attributes can be a handler: a module, a class
or an instance.
"""
from __future__ import annotations

import dataclasses
import types
from typing import Any, Iterable, Iterator

from warden.kernel.context import RequestContext


def describe_handler(handler: Any) -> str:
    """Return the display name used in logs and :class:`DispatchError`."""
    if isinstance(handler, types.ModuleType):
        return handler.__name__
    if isinstance(handler, type):
        return f"{handler.__module__}.{handler.__qualname__}"
    cls = type(handler)
    return f"<{cls.__module__}.{cls.__qualname__} instance>"


@dataclasses.dataclass(frozen=True)
class HandlerChain:
    """Ordered, de-duplicated candidate handlers for one dispatch."""

    handlers: tuple[Any, ...] = ()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.handlers)

    def __len__(self) -> int:
        return len(self.handlers)

    def __bool__(self) -> bool:
        return bool(self.handlers)

    def names(self) -> list[str]:
        return [describe_handler(h) for h in self.handlers]


def _flatten(slot: Any) -> Iterable[Any]:
    if slot is None:
        return ()
    if isinstance(slot, (list, tuple)):
        return slot
    return (slot,)


def resolve_chain(
    explicit: Any = None,
    context_handler: Any = None,
    global_handlers: Iterable[Any] | Any = (),
) -> HandlerChain:
    """Build a :class:`HandlerChain` from the three priority slots.

    Each slot may be ``None``, a single handler or a list of handlers.
    ``None`` entries are dropped and a handler seen earlier in the chain is
    not repeated, so no handler is ever invoked twice for one dispatch.
    """
    ordered: list[Any] = []
    seen: set[int] = set()
    for slot in (explicit, context_handler, global_handlers):
        for handler in _flatten(slot):
            if handler is None or id(handler) in seen:
                continue
            seen.add(id(handler))
            ordered.append(handler)
    return HandlerChain(tuple(ordered))


def context_handler_for(context: RequestContext) -> Any:
    """The request-scoped candidate: the controller, or the router when there is none."""
    return context.controller if context.controller is not None else context.router


__all__ = ["HandlerChain", "context_handler_for", "describe_handler", "resolve_chain"]
