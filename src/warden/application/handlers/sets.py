"""Application handlers – PolicySet, ResourceSet.

Give a handler object a call surface of its own, with itself as the
explicit override at the head of every chain::

    class PostPolicies:
        def policy(self, assigns, discriminator):
            match discriminator:
                case "edit":
                    return OK if assigns["user"].admin else Error("not an admin")
                case _:
                    return NOT_APPLICABLE

    posts = PolicySet(PostPolicies())
    if await posts.authorized(context, "edit"):
        ...
"""
from __future__ import annotations

from typing import Any

from warden.application.engine import Warden, default_warden
from warden.kernel.context import RequestContext


class _HandlerSet:
    def __init__(self, handler: Any, warden: Warden | None = None) -> None:
        self.handler = handler
        self._warden = warden

    @property
    def warden(self) -> Warden:
        return self._warden if self._warden is not None else default_warden()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.handler!r})"


class PolicySet(_HandlerSet):
    async def enforce(self, context: RequestContext, policies: Any) -> RequestContext:
        return await self.warden.enforce(context, policies, handler=self.handler)

    async def enforce_or_raise(self, context: RequestContext, policies: Any) -> RequestContext:
        return await self.warden.enforce_or_raise(context, policies, handler=self.handler)

    async def authorized(self, context: RequestContext, policies: Any) -> bool:
        return await self.warden.authorized(context, policies, handler=self.handler)


class ResourceSet(_HandlerSet):
    async def load(
        self,
        context: RequestContext,
        resources: Any,
        async_: bool | None = None,
    ) -> RequestContext:
        return await self.warden.load(context, resources, handler=self.handler, async_=async_)

    async def load_or_raise(self, context: RequestContext, resources: Any, async_: bool = False) -> Any:
        return await self.warden.load_or_raise(
            context, resources, handler=self.handler, async_=async_
        )


__all__ = ["PolicySet", "ResourceSet"]
