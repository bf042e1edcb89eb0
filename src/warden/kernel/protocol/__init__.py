"""Kernel protocol – handler response vocabulary and canonical outcomes."""
from warden.kernel.protocol.mode import ProtocolMode
from warden.kernel.protocol.outcome import Continue, Fail, Outcome, ResourceBinding
from warden.kernel.protocol.responses import (
    NOT_APPLICABLE,
    OK,
    Error,
    Loaded,
    Replace,
    Signal,
)

__all__ = [
    "Continue",
    "Error",
    "Fail",
    "Loaded",
    "NOT_APPLICABLE",
    "OK",
    "Outcome",
    "ProtocolMode",
    "Replace",
    "ResourceBinding",
    "Signal",
]
