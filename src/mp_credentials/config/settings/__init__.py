"""Config settings – 12-factor env-based configuration."""
from mp_credentials.config.settings.base import Settings
from mp_credentials.config.settings.credentials import CredentialSettings
from mp_credentials.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["CredentialSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
