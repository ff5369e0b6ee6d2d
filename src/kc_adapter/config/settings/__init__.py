"""Config settings – 12-factor env-based configuration."""
from kc_adapter.config.settings.base import ExtendedKeycloakSettings, KeycloakSettings, Settings
from kc_adapter.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "ExtendedKeycloakSettings", "KeycloakSettings", "Settings", "SettingsLoader"]
