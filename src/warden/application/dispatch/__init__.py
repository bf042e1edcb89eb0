"""Application dispatch – chain resolution, dispatch and response interpretation."""
from warden.application.dispatch.chain import (
    HandlerChain,
    context_handler_for,
    describe_handler,
    resolve_chain,
)
from warden.application.dispatch.dispatcher import Dispatched, Dispatcher
from warden.application.dispatch.interpreter import ProtocolMode, ResponseInterpreter

__all__ = [
    "Dispatched",
    "Dispatcher",
    "HandlerChain",
    "ProtocolMode",
    "ResponseInterpreter",
    "context_handler_for",
    "describe_handler",
    "resolve_chain",
]
