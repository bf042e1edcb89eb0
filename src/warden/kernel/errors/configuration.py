"""Configuration errors – raised at setup time, never recovered automatically."""

from __future__ import annotations

from typing import Any

from warden.kernel.errors.base import WardenError


class ConfigurationError(WardenError):
    """A pipeline step or the global configuration is unusable."""

    default_code = "configuration_error"


class MissingRequiredSettingError(ConfigurationError):
    """A required environment variable / setting is absent."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"Required setting '{setting_name}' is missing",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigurationError):
    """A setting's value is present but semantically invalid."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
            **kwargs,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class ControllerRequiredError(ConfigurationError):
    """An action-derived policy step ran outside of a controller."""

    default_code = "controller_required"

    def __init__(self, message: str = "EnforceAction must run within a controller") -> None:
        super().__init__(message)


__all__ = [
    "ConfigurationError",
    "ControllerRequiredError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
]
