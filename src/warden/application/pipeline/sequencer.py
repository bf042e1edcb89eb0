"""Application pipeline – Sequencer.

Runs an ordered list of policies or resources against one handler chain and
stops at the first business failure::

    Running(specs, context) ──Continue──▶ Running(rest, context')
            │
            └────────Fail(data)────────▶ Halted(data, context)

    all specs consumed ───────────────▶ Completed(context)

``enforce``/``load`` then hand a :class:`Halted` run to the paired error hook
(``policy_error`` / ``resource_error``) dispatched through the same chain.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, Union

from warden.application.dispatch import Dispatcher, HandlerChain, ResponseInterpreter, hooks
from warden.kernel.context import RequestContext
from warden.kernel.protocol import Continue, ResourceBinding
from warden.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class Completed:
    """Every spec passed."""
    context: RequestContext
    bindings: tuple[ResourceBinding, ...] = ()


@dataclasses.dataclass(frozen=True)
class Halted:
    """Spec *spec* failed with *data*; *context* is the context at failure."""
    spec: Any
    data: Any
    context: RequestContext
    handler: str | None = None
    bindings: tuple[ResourceBinding, ...] = ()


RunResult = Union[Completed, Halted]


class Sequencer:
    """Synchronous (one-at-a-time) evaluation of policies and resources."""

    def __init__(
        self,
        dispatcher: Dispatcher | None = None,
        interpreter: ResponseInterpreter | None = None,
    ) -> None:
        self._dispatcher = dispatcher or Dispatcher()
        self._interpreter = interpreter or ResponseInterpreter()

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    @property
    def interpreter(self) -> ResponseInterpreter:
        return self._interpreter

    # ------------------------------------------------------------------
    # Policies
    # ------------------------------------------------------------------

    async def run_policies(
        self,
        context: RequestContext,
        policies: Sequence[Any],
        chain: HandlerChain,
    ) -> RunResult:
        """Evaluate *policies* in order without invoking any error hook."""
        for policy in policies:
            dispatched = await self._dispatcher.dispatch(
                chain, hooks.POLICY, context.assigns, policy, discriminator=policy
            )
            outcome = self._interpreter.policy(dispatched, policy)
            if isinstance(outcome, Continue):
                if outcome.context is not None:
                    context = outcome.context
                continue
            _log.info("policy.failed", policy=repr(policy), handler=dispatched.handler_name)
            return Halted(spec=policy, data=outcome.data, context=context, handler=dispatched.handler_name)
        return Completed(context)

    async def enforce(
        self,
        context: RequestContext,
        policies: Sequence[Any],
        chain: HandlerChain,
    ) -> RequestContext:
        """Run *policies*; on failure return the halted result of ``policy_error``."""
        if context.halted:
            return context
        result = await self.run_policies(context, policies, chain)
        if isinstance(result, Completed):
            return result.context
        handled = await self.handle_failure(result, chain, hooks.POLICY_ERROR)
        return handled if handled.halted else handled.halt()

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    async def run_resources(
        self,
        context: RequestContext,
        resources: Sequence[Any],
        chain: HandlerChain,
    ) -> RunResult:
        """Load *resources* one after another; each loader sees earlier bindings."""
        bindings: list[ResourceBinding] = []
        for resource in resources:
            dispatched = await self._dispatcher.dispatch(
                chain,
                hooks.RESOURCE,
                context,
                resource,
                context.params,
                discriminator=resource,
            )
            outcome = self._interpreter.resource(dispatched, resource)
            if isinstance(outcome, Continue):
                binding: ResourceBinding = outcome.binding  # type: ignore[assignment]
                context = context.assign(binding.name, binding.value)
                bindings.append(binding)
                continue
            _log.info("load.failed", resource=repr(resource), handler=dispatched.handler_name)
            return Halted(
                spec=resource,
                data=outcome.data,
                context=context,
                handler=dispatched.handler_name,
                bindings=tuple(bindings),
            )
        return Completed(context, tuple(bindings))

    async def load(
        self,
        context: RequestContext,
        resources: Sequence[Any],
        chain: HandlerChain,
    ) -> RequestContext:
        """Run *resources*; on failure return the result of ``resource_error``.

        Unlike policy failures the error hook decides whether to halt.
        """
        if context.halted:
            return context
        result = await self.run_resources(context, resources, chain)
        if isinstance(result, Completed):
            return result.context
        return await self.handle_failure(result, chain, hooks.RESOURCE_ERROR)

    # ------------------------------------------------------------------
    # Failure routing
    # ------------------------------------------------------------------

    async def handle_failure(self, halted: Halted, chain: HandlerChain, hook: str) -> RequestContext:
        """Dispatch *hook* with the failure data and validate the returned context.

        Raises:
            DispatchError: No handler defines *hook* for this failure.
        """
        dispatched = await self._dispatcher.dispatch(
            chain, hook, halted.context, halted.data, discriminator=halted.data
        )
        context = self._interpreter.error_context(dispatched, hook, halted.data)
        _log.info(
            "pipeline.failure_handled",
            hook=hook,
            spec=repr(halted.spec),
            handler=dispatched.handler_name,
            halted=context.halted,
            status=context.status,
        )
        return context


__all__ = ["Completed", "Halted", "RunResult", "Sequencer"]
