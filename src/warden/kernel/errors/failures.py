"""Business failures raised by the ``*_or_raise`` entry points.

Inside a pipeline step a failure is routed to the application's error hook
instead; these are only raised when the caller asked for an exception.
"""

from __future__ import annotations

from typing import Any

from warden.kernel.errors.base import WardenError


class PolicyFailedError(WardenError):
    """A policy returned ``Error(data)``."""

    default_code = "policy_failed"

    def __init__(self, policy: Any, data: Any, *, handler: str | None = None) -> None:
        self.policy = policy
        self.data = data
        self.handler = handler
        super().__init__(
            f"Policy {policy!r} failed: {data!r}",
            detail={"policy": repr(policy), "data": repr(data), "handler": handler},
        )


class LoadFailedError(WardenError):
    """A resource loader returned ``Error(data)``."""

    default_code = "load_failed"

    def __init__(self, resource: Any, data: Any, *, handler: str | None = None) -> None:
        self.resource = resource
        self.data = data
        self.handler = handler
        super().__init__(
            f"Resource {resource!r} failed to load: {data!r}",
            detail={"resource": repr(resource), "data": repr(data), "handler": handler},
        )


__all__ = ["LoadFailedError", "PolicyFailedError"]
