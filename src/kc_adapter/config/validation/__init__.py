"""Config validation errors."""
from kc_adapter.config.validation.errors import (
    ConfigError,
    ConfigurationError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = ["ConfigError", "ConfigurationError", "InvalidSettingValueError", "MissingRequiredSettingError"]
