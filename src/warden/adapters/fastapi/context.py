"""FastAPI adapter – RequestContext from a Starlette request."""
from __future__ import annotations

from typing import Any

from warden.adapters.fastapi._compat import _require_fastapi
from warden.kernel.context import RequestContext

_require_fastapi()

ASSIGNS_STATE_KEY = "assigns"


def context_from_request(request: Any) -> RequestContext:
    """Build the context warden steps run against.

    * ``params`` – query parameters overlaid with path parameters
    * ``controller`` – the matched endpoint
    * ``router`` – the application
    * ``action`` – the route name (FastAPI defaults it to the endpoint name)
    * ``assigns`` – whatever earlier steps stored on ``request.state``
    """
    scope = request.scope
    route = scope.get("route")
    endpoint = scope.get("endpoint") or getattr(route, "endpoint", None)
    action = getattr(route, "name", None) or getattr(endpoint, "__name__", None)
    params: dict[str, Any] = {**request.query_params, **request.path_params}
    assigns = getattr(request.state, ASSIGNS_STATE_KEY, None) or {}
    return RequestContext(
        assigns=assigns,
        params=params,
        controller=endpoint,
        router=scope.get("app"),
        action=action,
    )


def store_assigns(request: Any, context: RequestContext) -> None:
    """Persist *context*'s assigns for later dependencies and the endpoint."""
    setattr(request.state, ASSIGNS_STATE_KEY, dict(context.assigns))


__all__ = ["ASSIGNS_STATE_KEY", "context_from_request", "store_assigns"]
