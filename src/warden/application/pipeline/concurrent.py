"""Application pipeline – ConcurrentLoader.

Fans a list of resources out to one asyncio task each. Every task sees the
same starting context; nothing is applied until all of them have finished.
Results are then applied in declared order, so a failure at position *k*
keeps the bindings of positions ``< k`` and discards everything after it,
regardless of which task finished first.
"""
from __future__ import annotations

import asyncio
from typing import Any, Sequence

from warden.application.dispatch import Dispatcher, HandlerChain, ResponseInterpreter, hooks
from warden.application.pipeline.sequencer import Completed, Halted, RunResult
from warden.kernel.context import RequestContext
from warden.kernel.errors import LoadTimeoutError
from warden.kernel.protocol import Continue, Outcome, ResourceBinding
from warden.observability.logging import get_logger

_log = get_logger(__name__)


def already_bound(context: RequestContext, resource: Any) -> bool:
    """``True`` when *resource* names a key that is already in ``assigns``."""
    return isinstance(resource, str) and resource in context.assigns


class ConcurrentLoader:
    """Load independent resources in parallel.

    Args:
        dispatcher: Shared dispatcher; synchronous hooks are offloaded to
            worker threads so they do not serialise the batch.
        interpreter: Shared response interpreter.
        timeout: Optional deadline in seconds for the whole batch. ``None``
            waits for every task however long it takes.
    """

    def __init__(
        self,
        dispatcher: Dispatcher | None = None,
        interpreter: ResponseInterpreter | None = None,
        timeout: float | None = None,
    ) -> None:
        self._dispatcher = dispatcher or Dispatcher()
        self._interpreter = interpreter or ResponseInterpreter()
        self._timeout = timeout

    async def run_resources(
        self,
        context: RequestContext,
        resources: Sequence[Any],
        chain: HandlerChain,
        *,
        skip_bound: bool = True,
    ) -> RunResult:
        snapshot = context
        skipped = [r for r in resources if skip_bound and already_bound(snapshot, r)]
        pending = [r for r in resources if not (skip_bound and already_bound(snapshot, r))]
        if skipped:
            _log.debug("load.batch_skipped", skipped=skipped)
        if not pending:
            return Completed(context)

        _log.debug("load.batch_started", resources=[repr(r) for r in pending])
        results = await self._gather(snapshot, pending, chain)

        # A hook that raised is a bug, not a failure: surface the first one
        # in declared order even if an earlier resource failed.
        for result in results:
            if isinstance(result, BaseException):
                raise result

        bindings: list[ResourceBinding] = []
        for resource, (handler_name, outcome) in zip(pending, results):
            if isinstance(outcome, Continue):
                binding: ResourceBinding = outcome.binding  # type: ignore[assignment]
                context = context.assign(binding.name, binding.value)
                bindings.append(binding)
                continue
            _log.info("load.failed", resource=repr(resource), handler=handler_name, concurrent=True)
            return Halted(
                spec=resource,
                data=outcome.data,
                context=context,
                handler=handler_name,
                bindings=tuple(bindings),
            )

        _log.debug("load.batch_completed", bound=[b.name for b in bindings])
        return Completed(context, tuple(bindings))

    async def _gather(
        self,
        snapshot: RequestContext,
        pending: list[Any],
        chain: HandlerChain,
    ) -> list[Any]:
        tasks = [asyncio.ensure_future(self._load_one(snapshot, r, chain)) for r in pending]
        batch = asyncio.gather(*tasks, return_exceptions=True)
        if self._timeout is None:
            return await batch
        try:
            return await asyncio.wait_for(batch, timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise LoadTimeoutError(pending, self._timeout) from exc

    async def _load_one(
        self,
        snapshot: RequestContext,
        resource: Any,
        chain: HandlerChain,
    ) -> tuple[str, Outcome]:
        dispatched = await self._dispatcher.dispatch(
            chain,
            hooks.RESOURCE,
            snapshot,
            resource,
            snapshot.params,
            discriminator=resource,
            offload=True,
        )
        return dispatched.handler_name, self._interpreter.resource(dispatched, resource)


__all__ = ["ConcurrentLoader", "already_bound"]
