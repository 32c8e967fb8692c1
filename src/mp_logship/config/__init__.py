"""Config – 12-factor settings and loaders."""

from mp_logship.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError
from mp_logship.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings, SettingsFactory, SettingsLoader
from mp_logship.config.logship import LogShipSettings, load_settings

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LogShipSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_settings",
]
