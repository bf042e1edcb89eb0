"""Kernel protocol – canonical outcomes produced by the response interpreter."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from warden.kernel.context import RequestContext


@dataclasses.dataclass(frozen=True)
class ResourceBinding:
    name: str
    value: Any


@dataclasses.dataclass(frozen=True)
class Continue:
    """Proceed with the next step.

    ``context`` replaces the current context when set (legacy policies only);
    ``binding`` is the pending resource binding of a successful load.
    """
    context: "RequestContext | None" = None
    binding: ResourceBinding | None = None


@dataclasses.dataclass(frozen=True)
class Fail:
    data: Any = None


Outcome = Union[Continue, Fail]

__all__ = ["Continue", "Fail", "Outcome", "ResourceBinding"]
