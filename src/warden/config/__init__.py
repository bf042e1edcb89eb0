"""Config – settings loading and global handler configuration."""
from warden.config.handlers import GlobalHandlers
from warden.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsFactory,
    SettingsLoader,
    WardenSettings,
)

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "GlobalHandlers",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "WardenSettings",
]
