"""Application dispatch – ResponseInterpreter.

The single place that decides which raw hook responses are acceptable.
Anything outside the contract raises :class:`ProtocolViolationError`; it is
never downgraded to a business failure.
"""
from __future__ import annotations

from warden.application.dispatch.dispatcher import Dispatched
from warden.kernel.context import RequestContext
from warden.kernel.errors import ProtocolViolationError
from warden.kernel.protocol import (
    OK,
    Continue,
    Error,
    Fail,
    Loaded,
    Outcome,
    ProtocolMode,
    Replace,
    ResourceBinding,
)


_POLICY_STRICT = "OK or Error(data)"
_POLICY_LEGACY = "OK, Error(data), True, False, None or Replace(context)"
_RESOURCE = "Loaded(name, value) or Error(data)"


class ResponseInterpreter:
    def __init__(self, mode: ProtocolMode | str = ProtocolMode.STRICT) -> None:
        self.mode = ProtocolMode(mode)

    def policy(self, dispatched: Dispatched, discriminator: object) -> Outcome:
        response = dispatched.response
        if response is OK:
            return Continue()
        if isinstance(response, Error):
            return Fail(response.data)
        if self.mode is ProtocolMode.LEGACY:
            if response is True:
                return Continue()
            if response is False or response is None:
                return Fail(None)
            if isinstance(response, Replace) and isinstance(response.context, RequestContext):
                return Continue(context=response.context)
        expected = _POLICY_LEGACY if self.mode is ProtocolMode.LEGACY else _POLICY_STRICT
        raise ProtocolViolationError(
            "policy",
            response,
            expected,
            handler=dispatched.handler_name,
            discriminator=discriminator,
        )

    def resource(self, dispatched: Dispatched, discriminator: object) -> Outcome:
        response = dispatched.response
        if isinstance(response, Loaded):
            if not isinstance(response.name, str) or not response.name.isidentifier():
                raise ProtocolViolationError(
                    "resource",
                    response,
                    "a Loaded name that is a valid identifier",
                    handler=dispatched.handler_name,
                    discriminator=discriminator,
                )
            return Continue(binding=ResourceBinding(response.name, response.value))
        if isinstance(response, Error):
            return Fail(response.data)
        raise ProtocolViolationError(
            "resource",
            response,
            _RESOURCE,
            handler=dispatched.handler_name,
            discriminator=discriminator,
        )

    def error_context(self, dispatched: Dispatched, hook: str, data: object) -> RequestContext:
        """Validate the result of an error hook."""
        if isinstance(dispatched.response, RequestContext):
            return dispatched.response
        raise ProtocolViolationError(
            hook,
            dispatched.response,
            "a RequestContext",
            handler=dispatched.handler_name,
            discriminator=data,
        )


__all__ = ["ProtocolMode", "ResponseInterpreter"]
