"""Application dispatch – Dispatcher.

Walks a :class:`HandlerChain` and invokes the first handler that services a
hook. "Not serviced here" has exactly two forms:

* the handler has no callable attribute named after the hook;
* the hook ran and returned :data:`~warden.kernel.protocol.NOT_APPLICABLE`.

Nothing else advances the walk. An exception raised inside a hook is a bug
in that hook and propagates to the caller untouched.
"""
from __future__ import annotations

import asyncio
import dataclasses
import inspect
from typing import Any

from warden.application.dispatch.chain import HandlerChain, describe_handler
from warden.kernel.errors import DispatchError
from warden.kernel.protocol import NOT_APPLICABLE
from warden.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class Dispatched:
    """Raw, unvalidated response together with the handler that produced it."""
    handler: Any
    response: Any

    @property
    def handler_name(self) -> str:
        return describe_handler(self.handler)


class Dispatcher:
    """Try each handler of a chain in order until one accepts the call."""

    async def dispatch(
        self,
        chain: HandlerChain,
        hook: str,
        *args: Any,
        discriminator: Any,
        offload: bool = False,
    ) -> Dispatched:
        """Invoke ``handler.<hook>(*args)`` on the first handler that services it.

        Args:
            chain: Candidate handlers, highest priority first.
            hook: Attribute name to call (``"policy"``, ``"resource_error"`` …).
            *args: Positional arguments for the hook.
            discriminator: Value reported in :class:`DispatchError` and logs.
            offload: Run synchronous hooks in a worker thread.

        Raises:
            DispatchError: No handler in *chain* services *hook*.
        """
        for handler in chain:
            fn = getattr(handler, hook, None)
            if not callable(fn):
                continue
            response = await self._invoke(fn, args, offload)
            if response is NOT_APPLICABLE:
                continue
            _log.debug("dispatch.resolved", hook=hook, handler=handler, discriminator=repr(discriminator))
            return Dispatched(handler=handler, response=response)

        error = DispatchError(hook, discriminator, chain.names())
        _log.warning(
            "dispatch.unresolved",
            hook=hook,
            discriminator=repr(discriminator),
            handlers=list(error.consulted),
        )
        raise error

    @staticmethod
    async def _invoke(fn: Any, args: tuple[Any, ...], offload: bool) -> Any:
        if inspect.iscoroutinefunction(fn):
            return await fn(*args)
        if offload:
            response = await asyncio.to_thread(fn, *args)
        else:
            response = fn(*args)
        if inspect.isawaitable(response):
            response = await response
        return response


__all__ = ["Dispatched", "Dispatcher"]
