"""Config settings – 12-factor env-based configuration."""
from warden.config.settings.base import Settings
from warden.config.settings.factory import SettingsFactory
from warden.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from warden.config.settings.warden_settings import WardenSettings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "WardenSettings",
]
