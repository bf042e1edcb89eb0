"""Dispatch errors – programming/configuration mistakes surfaced at request time.

None of these is a business failure: they always abort the current
request and are never routed to an application error hook.
"""

from __future__ import annotations

from typing import Any, Sequence

from warden.kernel.errors.base import WardenError


class DispatchError(WardenError):
    """No handler in the chain services *hook* for *discriminator*.

    ``consulted`` holds the display names of every handler that was tried,
    in chain order, so the operator can see where a definition is missing.
    """

    default_code = "dispatch_error"

    def __init__(
        self,
        hook: str,
        discriminator: Any,
        consulted: Sequence[str] = (),
    ) -> None:
        self.hook = hook
        self.discriminator = discriminator
        self.consulted: tuple[str, ...] = tuple(consulted)
        listing = "\n".join(f"  {name}" for name in self.consulted) or "  (no handlers)"
        super().__init__(
            f"Unable to find a '{hook}' definition for {discriminator!r} "
            f"in any of the following handlers:\n{listing}",
            detail={
                "hook": hook,
                "discriminator": repr(discriminator),
                "consulted": list(self.consulted),
            },
        )


class ProtocolViolationError(WardenError):
    """A handler returned a value outside the documented response contract."""

    default_code = "protocol_violation"

    def __init__(
        self,
        hook: str,
        response: Any,
        expected: str,
        *,
        handler: str | None = None,
        discriminator: Any = None,
    ) -> None:
        self.hook = hook
        self.response = response
        self.handler = handler
        self.discriminator = discriminator
        where = f" from {handler}" if handler else ""
        super().__init__(
            f"'{hook}'{where} must return {expected}, got {response!r}",
            detail={
                "hook": hook,
                "handler": handler,
                "discriminator": repr(discriminator),
                "response": repr(response),
            },
        )


class LoadTimeoutError(WardenError):
    """A concurrent load batch did not finish before its deadline."""

    default_code = "load_timeout"

    def __init__(self, resources: Sequence[Any], timeout: float) -> None:
        self.resources = tuple(resources)
        self.timeout = timeout
        super().__init__(
            f"Loading {list(self.resources)!r} did not finish within {timeout}s",
            detail={"resources": [repr(r) for r in self.resources], "timeout": timeout},
        )


__all__ = ["DispatchError", "LoadTimeoutError", "ProtocolViolationError"]
