"""Kernel protocol – values that policy and loader hooks return.

Policies return :data:`OK` or :class:`Error`; loaders return :class:`Loaded`
or :class:`Error`. A hook that does not service the discriminator it was
given returns :data:`NOT_APPLICABLE` (usually from the ``case _:`` arm of a
``match``) so dispatch moves on to the next handler in the chain::

    def policy(assigns, name):
        match name:
            case "current_user" if assigns.get("current_user"):
                return OK
            case "current_user":
                return Error("sign in")
            case _:
                return NOT_APPLICABLE
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from warden.kernel.context import RequestContext


class Signal(Enum):
    OK = "ok"
    NOT_APPLICABLE = "not_applicable"

    def __repr__(self) -> str:
        return self.name


OK = Signal.OK
NOT_APPLICABLE = Signal.NOT_APPLICABLE


@dataclasses.dataclass(frozen=True)
class Error:
    """Business failure; *data* is handed to the paired error hook unchanged."""
    data: Any = None


@dataclasses.dataclass(frozen=True)
class Loaded:
    """Successful load: bind *value* into ``assigns`` under *name*."""
    name: str
    value: Any


@dataclasses.dataclass(frozen=True)
class Replace:
    """Legacy policy success that swaps in a new context.

    Only accepted when the engine runs with ``protocol_mode="legacy"``.
    """
    context: "RequestContext"


__all__ = ["Error", "Loaded", "NOT_APPLICABLE", "OK", "Replace", "Signal"]
