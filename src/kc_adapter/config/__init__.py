"""Config – provider settings, env loader, and configuration errors."""

from kc_adapter.config.settings import (
    EnvSettingsLoader,
    ExtendedKeycloakSettings,
    KeycloakSettings,
    Settings,
    SettingsLoader,
)
from kc_adapter.config.validation import (
    ConfigError,
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "ConfigurationError",
    "EnvSettingsLoader",
    "ExtendedKeycloakSettings",
    "InvalidSettingValueError",
    "KeycloakSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
