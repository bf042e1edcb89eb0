"""FastAPI adapter – Enforce / Load steps as route dependencies.

Usage::

    @app.get(
        "/posts/{post}",
        dependencies=[
            Depends(enforce_dependency("logged_in")),
            Depends(load_dependency("post", handler=PostLoaders)),
        ],
    )
    async def show_post(request: Request):
        return request.state.assigns["post"]
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable

from warden.adapters.fastapi._compat import _require_fastapi
from warden.adapters.fastapi.context import context_from_request, store_assigns
from warden.application.pipeline import Enforce, Load, Step
from warden.kernel.context import RequestContext
from warden.observability.logging import get_logger

_require_fastapi()

from fastapi import HTTPException, Request  # noqa: E402

if TYPE_CHECKING:
    from warden.application.engine import Warden

_log = get_logger(__name__)

Dependency = Callable[[Request], Awaitable[RequestContext]]


def _as_dependency(step: Step, default_status: int) -> Dependency:
    async def dependency(request: Request) -> RequestContext:
        context = await step.apply(context_from_request(request))
        store_assigns(request, context)
        if context.halted:
            status = context.status or default_status
            _log.info("fastapi.request_halted", step=repr(step), status=status, path=request.url.path)
            raise HTTPException(status_code=status)
        return context

    return dependency


def enforce_dependency(
    policies: Any,
    *,
    handler: Any = None,
    warden: "Warden | None" = None,
    status_code: int = 403,
) -> Dependency:
    """Dependency running an :class:`~warden.application.pipeline.Enforce` step.

    A halted context becomes ``HTTPException(context.status or status_code)``.
    """
    return _as_dependency(Enforce(policies, handler=handler, warden=warden), status_code)


def load_dependency(
    resources: Any,
    *,
    handler: Any = None,
    async_: bool | None = None,
    warden: "Warden | None" = None,
    status_code: int = 404,
) -> Dependency:
    """Dependency running a :class:`~warden.application.pipeline.Load` step."""
    return _as_dependency(
        Load(resources, handler=handler, async_=async_, warden=warden), status_code
    )


__all__ = ["enforce_dependency", "load_dependency"]
