"""Config settings – Settings base class and the Keycloak settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from kc_adapter.config.validation import InvalidSettingValueError, MissingRequiredSettingError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


def require_non_empty(settings: Settings, *names: str) -> None:
    """Raise :class:`MissingRequiredSettingError` for the first empty field."""
    for name in names:
        value = getattr(settings, name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise MissingRequiredSettingError(name)


@dataclasses.dataclass(kw_only=True)
class KeycloakSettings(Settings):
    """Connection parameters for one realm of one provider."""

    _prefix: ClassVar[str] = "KEYCLOAK"

    host: str
    realm_id: str
    client_id: str
    redirect_uri: str = ""
    timeout: float = 10.0

    def _validate(self) -> None:
        require_non_empty(self, "host", "realm_id", "client_id")
        self.host = self.host.rstrip("/")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")


@dataclasses.dataclass(kw_only=True)
class ExtendedKeycloakSettings(KeycloakSettings):
    """Adds the admin-API credentials used for the password grant."""

    api_client_id: str
    api_client_secret: str
    api_username: str
    api_password: str = dataclasses.field(repr=False)

    def _validate(self) -> None:
        super()._validate()
        require_non_empty(self, "api_client_id", "api_client_secret", "api_username", "api_password")


__all__ = ["ExtendedKeycloakSettings", "KeycloakSettings", "Settings", "require_non_empty"]
