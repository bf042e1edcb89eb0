"""Application pipeline – Middleware base."""
from __future__ import annotations

import abc
from typing import Any, Awaitable, Callable

from warden.kernel.context import RequestContext

Endpoint = Callable[[RequestContext], Awaitable[Any]]
Next = Callable[[RequestContext], Awaitable[Any]]


class Middleware(abc.ABC):
    """Single node in the step chain."""

    @abc.abstractmethod
    async def __call__(self, context: RequestContext, next_: Next) -> Any: ...


__all__ = ["Endpoint", "Middleware", "Next"]
