"""Application pipeline – Pipeline class."""
from __future__ import annotations

from typing import Any

from warden.application.pipeline.middleware import Endpoint, Middleware
from warden.kernel.context import RequestContext


class Pipeline:
    """Builds and executes an ordered chain of steps around an endpoint.

    A step that halts the context returns it instead of calling the next
    node, so the endpoint only runs when every step let the request through.
    """

    def __init__(self, steps: list[Middleware] | None = None) -> None:
        self._middlewares: list[Middleware] = list(steps or [])

    def add(self, middleware: Middleware) -> "Pipeline":
        """Append a step (fluent API)."""
        self._middlewares.append(middleware)
        return self

    def __len__(self) -> int:
        return len(self._middlewares)

    async def execute(self, context: RequestContext, endpoint: Endpoint) -> Any:
        """Execute the full chain, ending with *endpoint*."""
        if context.halted:
            return context
        chain = endpoint
        for mw in reversed(self._middlewares):
            _next = chain
            _mw = mw

            async def _wrap(ctx: RequestContext, *, _n: Endpoint = _next, _m: Middleware = _mw) -> Any:
                return await _m(ctx, _n)

            chain = _wrap
        return await chain(context)


__all__ = ["Pipeline"]
