"""Config – 12-factor settings, loaders, and configuration errors."""

from mp_credentials.config.settings import (
    CredentialSettings,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)
from mp_credentials.config.validation import (
    ConfigError,
    InvalidConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "CredentialSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidConfigurationError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
