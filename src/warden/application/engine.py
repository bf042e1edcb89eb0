"""Application – Warden engine.

Ties chain resolution, the sequencer and the concurrent loader together
behind the operations applications call::

    warden = Warden(GlobalHandlers(policies=(policies_module,)))
    context = await warden.enforce(context, ["view_post", ("edit", "post")])
    context = await warden.load(context, ["post", "author"], async_=True)
"""
from __future__ import annotations

from typing import Any

from warden.application.dispatch import (
    Dispatcher,
    HandlerChain,
    ResponseInterpreter,
    context_handler_for,
    hooks,
    resolve_chain,
)
from warden.application.pipeline.concurrent import ConcurrentLoader
from warden.application.pipeline.sequencer import Completed, RunResult, Sequencer
from warden.application.pipeline.specs import as_spec_list
from warden.config import GlobalHandlers, SettingsFactory, WardenSettings
from warden.config.settings import EnvSettingsLoader
from warden.kernel.context import RequestContext
from warden.kernel.errors import ControllerRequiredError, LoadFailedError, PolicyFailedError
from warden.observability.logging import get_logger

_log = get_logger(__name__)


class Warden:
    """Policy enforcement and resource loading over layered handler chains.

    Args:
        handlers: Global handlers and defaults; empty when omitted.
        dispatcher: Override the dispatcher (mainly for tests).
    """

    def __init__(
        self,
        handlers: GlobalHandlers | None = None,
        *,
        dispatcher: Dispatcher | None = None,
    ) -> None:
        self._handlers = handlers or GlobalHandlers()
        self._dispatcher = dispatcher or Dispatcher()
        self._interpreter = ResponseInterpreter(self._handlers.protocol_mode)
        self._sequencer = Sequencer(self._dispatcher, self._interpreter)
        self._concurrent = ConcurrentLoader(
            self._dispatcher, self._interpreter, timeout=self._handlers.load_timeout
        )

    @classmethod
    def from_settings(cls, settings: WardenSettings | None = None) -> "Warden":
        """Build an engine from *settings*, or from ``WARDEN_*`` variables."""
        if settings is None:
            settings = SettingsFactory.create(WardenSettings, [EnvSettingsLoader()])
        return cls(GlobalHandlers.from_settings(settings))

    @property
    def handlers(self) -> GlobalHandlers:
        return self._handlers

    # ------------------------------------------------------------------
    # Chains
    # ------------------------------------------------------------------

    def policy_chain(self, context: RequestContext, handler: Any = None) -> HandlerChain:
        return resolve_chain(handler, context_handler_for(context), self._handlers.policies)

    def loader_chain(self, context: RequestContext, handler: Any = None) -> HandlerChain:
        return resolve_chain(handler, context_handler_for(context), self._handlers.loaders)

    # ------------------------------------------------------------------
    # Policies
    # ------------------------------------------------------------------

    async def enforce(
        self,
        context: RequestContext,
        policies: Any,
        handler: Any = None,
    ) -> RequestContext:
        """Run *policies* in order; a failure yields a halted context.

        The halted context is whatever ``policy_error`` returned, halted by
        warden if the hook did not do so itself.
        """
        specs = as_spec_list(policies, "policies")
        return await self._sequencer.enforce(context, specs, self.policy_chain(context, handler))

    async def authorized(
        self,
        context: RequestContext,
        policies: Any,
        handler: Any = None,
    ) -> bool:
        """``True`` when every policy passes. Error hooks are not invoked."""
        specs = as_spec_list(policies, "policies")
        result = await self._sequencer.run_policies(context, specs, self.policy_chain(context, handler))
        return isinstance(result, Completed)

    async def enforce_or_raise(
        self,
        context: RequestContext,
        policies: Any,
        handler: Any = None,
    ) -> RequestContext:
        """Run *policies*; raise instead of invoking ``policy_error``.

        Raises:
            PolicyFailedError: The first policy that returned ``Error(data)``.
        """
        specs = as_spec_list(policies, "policies")
        result = await self._sequencer.run_policies(context, specs, self.policy_chain(context, handler))
        if isinstance(result, Completed):
            return result.context
        raise PolicyFailedError(result.spec, result.data, handler=result.handler)

    async def enforce_action(self, context: RequestContext, handler: Any = None) -> RequestContext:
        """Enforce the policy named by the context's current action.

        Raises:
            ControllerRequiredError: No explicit handler and no controller, or
                the context carries no action.
        """
        controller = handler if handler is not None else context.controller
        if controller is None or context.action is None:
            raise ControllerRequiredError()
        return await self.enforce(context, [context.action], handler=controller)

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    async def load(
        self,
        context: RequestContext,
        resources: Any,
        handler: Any = None,
        async_: bool | None = None,
    ) -> RequestContext:
        """Bind *resources* into ``assigns``.

        On failure the result of ``resource_error`` is returned unchanged; the
        hook decides whether the request halts.
        """
        specs = as_spec_list(resources, "resources")
        if context.halted:
            return context
        chain = self.loader_chain(context, handler)
        if not self._concurrent_for(async_):
            return await self._sequencer.load(context, specs, chain)
        result = await self._concurrent.run_resources(context, specs, chain)
        if isinstance(result, Completed):
            return result.context
        return await self._sequencer.handle_failure(result, chain, hooks.RESOURCE_ERROR)

    async def load_or_raise(
        self,
        context: RequestContext,
        resources: Any,
        handler: Any = None,
        async_: bool = False,
    ) -> Any:
        """Load and return values without touching ``resource_error``.

        A bare resource returns its value; a list returns ``(name, value)``
        pairs in declared order. Nothing is skipped for keys already bound.

        Raises:
            LoadFailedError: The first resource that returned ``Error(data)``.
        """
        single = not isinstance(resources, list)
        specs = as_spec_list(resources, "resources")
        chain = self.loader_chain(context, handler)
        result: RunResult
        if async_:
            result = await self._concurrent.run_resources(context, specs, chain, skip_bound=False)
        else:
            result = await self._sequencer.run_resources(context, specs, chain)
        if not isinstance(result, Completed):
            raise LoadFailedError(result.spec, result.data, handler=result.handler)
        if single:
            return result.bindings[0].value
        return [(b.name, b.value) for b in result.bindings]

    def _concurrent_for(self, async_: bool | None) -> bool:
        return self._handlers.load_async if async_ is None else async_


_default: Warden | None = None


def default_warden() -> Warden:
    """Return the process-wide engine used by steps built without one."""
    global _default
    if _default is None:
        _default = Warden()
        _log.debug("warden.default_created")
    return _default


def set_default_warden(warden: Warden | None) -> None:
    """Install *warden* as the process-wide engine (``None`` resets it)."""
    global _default
    _default = warden


__all__ = ["Warden", "default_warden", "set_default_warden"]
