"""Config – GlobalHandlers.

The application-wide tail of every handler chain, resolved once from
:class:`~warden.config.settings.WardenSettings` and injected into the engine.
"""
from __future__ import annotations

import dataclasses
import importlib
from typing import Any, Sequence

from warden.config.settings import WardenSettings
from warden.kernel.errors import InvalidSettingValueError
from warden.kernel.protocol import ProtocolMode
from warden.observability.logging import get_logger

_log = get_logger(__name__)


def import_handler(path: str, setting: str = "handler") -> Any:
    """Import ``package.module`` or ``package.module:attribute``.

    Raises:
        InvalidSettingValueError: The module or attribute cannot be found.
    """
    module_path, _, attribute = path.partition(":")
    try:
        target = importlib.import_module(module_path)
    except ImportError as exc:
        raise InvalidSettingValueError(setting, path, f"cannot import {module_path!r}", cause=exc) from exc
    if not attribute:
        return target
    try:
        return getattr(target, attribute)
    except AttributeError as exc:
        raise InvalidSettingValueError(
            setting, path, f"{module_path!r} has no attribute {attribute!r}", cause=exc
        ) from exc


@dataclasses.dataclass(frozen=True)
class GlobalHandlers:
    """Globally configured handlers and defaults.

    ``policies`` and ``loaders`` are consulted after the explicit override and
    the request's controller/router, in the order given here.
    """

    policies: tuple[Any, ...] = ()
    loaders: tuple[Any, ...] = ()
    load_async: bool = False
    load_timeout: float | None = None
    protocol_mode: ProtocolMode = ProtocolMode.STRICT

    def __post_init__(self) -> None:
        object.__setattr__(self, "policies", tuple(self.policies))
        object.__setattr__(self, "loaders", tuple(self.loaders))
        object.__setattr__(self, "protocol_mode", ProtocolMode(self.protocol_mode))

    @classmethod
    def from_settings(cls, settings: WardenSettings) -> "GlobalHandlers":
        policies = tuple(import_handler(p, "policy_modules") for p in settings.policy_modules)
        loaders = tuple(import_handler(p, "loader_modules") for p in settings.loader_modules)
        _log.debug(
            "config.handlers_resolved",
            handlers=list(policies + loaders),
            protocol_mode=settings.protocol_mode,
        )
        return cls(
            policies=policies,
            loaders=loaders,
            load_async=settings.load_async,
            load_timeout=settings.load_timeout,
            protocol_mode=ProtocolMode(settings.protocol_mode),
        )


__all__ = ["GlobalHandlers", "import_handler"]
