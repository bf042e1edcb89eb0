"""Kernel protocol – ProtocolMode."""
from __future__ import annotations

from enum import Enum


class ProtocolMode(str, Enum):
    """Which generation of the policy response contract to accept.

    ``STRICT`` accepts only ``OK`` and ``Error(data)``. ``LEGACY`` also
    accepts ``True``, ``False``/``None`` and ``Replace(context)``.
    """
    STRICT = "strict"
    LEGACY = "legacy"


__all__ = ["ProtocolMode"]
