"""Kernel context – RequestContext.

The host framework builds one of these per request; pipeline steps and the
application's error hooks thread it through by returning updated copies.
"""
from __future__ import annotations

import dataclasses
from types import MappingProxyType
from typing import Any, Mapping

_MAPPING_FIELDS = ("assigns", "params", "private")


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Immutable view of the in-flight request.

    ``assigns`` is the accumulated key/value state that policies inspect and
    loaders bind into. ``controller`` and ``router`` are the request-scoped
    handler candidates; ``action`` names the controller action being served.
    """

    assigns: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    params: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    controller: Any = None
    router: Any = None
    action: str | None = None
    halted: bool = False
    status: int | None = None
    private: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in _MAPPING_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(value)))

    def assign(self, key: str, value: Any) -> "RequestContext":
        """Return a copy with ``assigns[key] = value``."""
        return dataclasses.replace(self, assigns={**self.assigns, key: value})

    def merge_assigns(self, values: Mapping[str, Any]) -> "RequestContext":
        """Return a copy with every pair of *values* added to ``assigns``."""
        return dataclasses.replace(self, assigns={**self.assigns, **values})

    def put_private(self, key: str, value: Any) -> "RequestContext":
        return dataclasses.replace(self, private={**self.private, key: value})

    def put_status(self, status: int) -> "RequestContext":
        return dataclasses.replace(self, status=status)

    def halt(self) -> "RequestContext":
        """Return a copy flagged as terminal; later pipeline steps are skipped."""
        return dataclasses.replace(self, halted=True)

    def with_handlers(
        self,
        *,
        controller: Any = None,
        router: Any = None,
        action: str | None = None,
    ) -> "RequestContext":
        changes: dict[str, Any] = {}
        if controller is not None:
            changes["controller"] = controller
        if router is not None:
            changes["router"] = router
        if action is not None:
            changes["action"] = action
        return dataclasses.replace(self, **changes)


__all__ = ["RequestContext"]
