"""Application pipeline – Enforce, Load and EnforceAction steps.

Steps are middleware over :class:`~warden.kernel.context.RequestContext`::

    pipeline = Pipeline([
        Enforce("logged_in"),
        Load(["post", "comments"], async_=True),
        Enforce(policies=[("edit", "post")], handler=PostPolicies),
    ])
    result = await pipeline.execute(context, endpoint)

Option errors (an empty list) surface when the step is built, not when a
request hits it.
"""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

from warden.application.pipeline.middleware import Middleware, Next
from warden.application.pipeline.specs import as_spec_list
from warden.kernel.context import RequestContext
from warden.observability.logging import get_logger

if TYPE_CHECKING:
    from warden.application.engine import Warden

_log = get_logger(__name__)


class Step(Middleware):
    """A pipeline step that rewrites the context and stops on halt."""

    def __init__(self, *, handler: Any = None, warden: "Warden | None" = None) -> None:
        self.handler = handler
        self._warden = warden

    @property
    def warden(self) -> "Warden":
        if self._warden is not None:
            return self._warden
        from warden.application.engine import default_warden

        return default_warden()

    @abc.abstractmethod
    async def apply(self, context: RequestContext) -> RequestContext:
        """Run the step and return the updated context."""

    async def __call__(self, context: RequestContext, next_: Next) -> Any:
        context = await self.apply(context)
        if context.halted:
            _log.info("pipeline.halted", step=repr(self), status=context.status)
            return context
        return await next_(context)


class Enforce(Step):
    """Enforce one or more policies."""

    def __init__(
        self,
        policies: Any,
        *,
        handler: Any = None,
        warden: "Warden | None" = None,
    ) -> None:
        super().__init__(handler=handler, warden=warden)
        self.policies = as_spec_list(policies, "policies")

    async def apply(self, context: RequestContext) -> RequestContext:
        return await self.warden.enforce(context, self.policies, handler=self.handler)

    def __repr__(self) -> str:
        return f"Enforce({self.policies!r})"


class Load(Step):
    """Load one or more resources into ``assigns``.

    ``async_=None`` defers to the engine's global ``load_async`` default.
    """

    def __init__(
        self,
        resources: Any,
        *,
        handler: Any = None,
        async_: bool | None = None,
        warden: "Warden | None" = None,
    ) -> None:
        super().__init__(handler=handler, warden=warden)
        self.resources = as_spec_list(resources, "resources")
        self.async_ = async_

    async def apply(self, context: RequestContext) -> RequestContext:
        return await self.warden.load(
            context, self.resources, handler=self.handler, async_=self.async_
        )

    def __repr__(self) -> str:
        return f"Load({self.resources!r}, async_={self.async_!r})"


class EnforceAction(Step):
    """Enforce the policy named after the current controller action."""

    async def apply(self, context: RequestContext) -> RequestContext:
        return await self.warden.enforce_action(context, handler=self.handler)

    def __repr__(self) -> str:
        return "EnforceAction()"


__all__ = ["Enforce", "EnforceAction", "Load", "Step"]
