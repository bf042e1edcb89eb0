"""Config settings – WardenSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from warden.config.settings.base import Settings
from warden.kernel.errors import InvalidSettingValueError
from warden.kernel.protocol import ProtocolMode


@dataclasses.dataclass
class WardenSettings(Settings):
    """Application-wide defaults, read from ``WARDEN_*`` variables.

    ``policy_modules`` / ``loader_modules`` are dotted import paths, optionally
    suffixed with ``:attribute`` to select a class or instance inside the
    module::

        WARDEN_POLICY_MODULES=myapp.policies,myapp.admin:AdminPolicies
        WARDEN_LOAD_ASYNC=true
    """

    _prefix: ClassVar[str] = "WARDEN"

    policy_modules: list[str] = dataclasses.field(default_factory=list)
    loader_modules: list[str] = dataclasses.field(default_factory=list)
    load_async: bool = False
    load_timeout: float | None = None
    protocol_mode: str = ProtocolMode.STRICT.value

    def _validate(self) -> None:
        allowed = [m.value for m in ProtocolMode]
        if self.protocol_mode not in allowed:
            raise InvalidSettingValueError(
                "protocol_mode", self.protocol_mode, f"expected one of {allowed}"
            )
        if self.load_timeout is not None and self.load_timeout <= 0:
            raise InvalidSettingValueError("load_timeout", self.load_timeout, "must be positive")


__all__ = ["WardenSettings"]
