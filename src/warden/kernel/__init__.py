"""Kernel – request context, handler response protocol and error hierarchy.

Has no dependency on the application or adapter layers.
"""
from warden.kernel.context import RequestContext
from warden.kernel.errors import (
    BaseError,
    ConfigurationError,
    DispatchError,
    ProtocolViolationError,
    WardenError,
)
from warden.kernel.protocol import NOT_APPLICABLE, OK, Error, Loaded, Replace

__all__ = [
    "BaseError",
    "ConfigurationError",
    "DispatchError",
    "Error",
    "Loaded",
    "NOT_APPLICABLE",
    "OK",
    "ProtocolViolationError",
    "Replace",
    "RequestContext",
    "WardenError",
]
