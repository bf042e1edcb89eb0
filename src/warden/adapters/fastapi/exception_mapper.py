"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from warden.adapters.fastapi._compat import _require_fastapi


class FastAPIExceptionMapper:
    """Register warden error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "policy_failed", "message": "...", "detail": {...}}

    Mappings
    --------
    ``PolicyFailedError``  → 403
    ``LoadFailedError``    → 404
    ``WardenError``        → 500
    """

    def __init__(self) -> None:
        _require_fastapi()
        from warden.kernel.errors import LoadFailedError, PolicyFailedError, WardenError

        # ORDER MATTERS: more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (PolicyFailedError, 403),
            (LoadFailedError, 404),
            (WardenError, 500),
        ]

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

        for exc_type, status in self._map:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                    return JSONResponse(status_code=code, content=exc.to_dict(include_cause=False))

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper"]
