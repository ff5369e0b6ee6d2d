"""Keycloak adapter – KeycloakExtended with admin-API user management."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from kc_adapter.adapters.http import HttpTransport
from kc_adapter.adapters.keycloak import api
from kc_adapter.adapters.keycloak.provider import Keycloak
from kc_adapter.adapters.session import SessionWriter
from kc_adapter.config.validation import MissingRequiredSettingError
from kc_adapter.kernel.errors import NotDefinedError
from kc_adapter.kernel.time import Clock
from kc_adapter.tokens import AccessToken

if TYPE_CHECKING:
    from kc_adapter.config.settings import ExtendedKeycloakSettings


class KeycloakExtended(Keycloak):
    """:class:`Keycloak` plus service-account credentials for the admin API.

    The admin token is obtained explicitly by :meth:`authorize_api` and cached
    as-is; it is never refreshed automatically. Call :meth:`authorize_api`
    again once it expires.
    """

    def __init__(
        self,
        host: str,
        realm_id: str,
        client_id: str,
        redirect_uri: str | None = None,
        *,
        api_client_id: str,
        api_client_secret: str,
        api_username: str,
        api_password: str,
        transport: HttpTransport | None = None,
        session: SessionWriter | None = None,
        clock: Clock | None = None,
        timeout: float = 10.0,
    ) -> None:
        for name, value in (
            ("api_client_id", api_client_id),
            ("api_client_secret", api_client_secret),
            ("api_username", api_username),
            ("api_password", api_password),
        ):
            if not value:
                raise MissingRequiredSettingError(name)
        super().__init__(
            host, realm_id, client_id, redirect_uri,
            transport=transport, session=session, clock=clock, timeout=timeout,
        )
        self._api_client_id = api_client_id
        self._api_client_secret = api_client_secret
        self._api_username = api_username
        self._api_password = api_password
        self._api_access_token: AccessToken | None = None

    @classmethod
    def from_settings(  # type: ignore[override]
        cls,
        settings: ExtendedKeycloakSettings,
        *,
        transport: HttpTransport | None = None,
        session: SessionWriter | None = None,
        clock: Clock | None = None,
    ) -> KeycloakExtended:
        return cls(
            settings.host,
            settings.realm_id,
            settings.client_id,
            settings.redirect_uri or None,
            api_client_id=settings.api_client_id,
            api_client_secret=settings.api_client_secret,
            api_username=settings.api_username,
            api_password=settings.api_password,
            transport=transport,
            session=session,
            clock=clock,
            timeout=settings.timeout,
        )

    @property
    def api_client_id(self) -> str:
        return self._api_client_id

    @property
    def api_client_secret(self) -> str:
        return self._api_client_secret

    @property
    def api_username(self) -> str:
        return self._api_username

    @property
    def api_password(self) -> str:
        return self._api_password

    @property
    def api_access_token(self) -> AccessToken:
        if self._api_access_token is None:
            raise NotDefinedError("ApiAccessToken", "Admin API access token is missing; call authorize_api() first")
        return self._api_access_token

    @api_access_token.setter
    def api_access_token(self, token: AccessToken) -> None:
        self._api_access_token = token

    def authorize_api(self) -> AccessToken:
        """Fetch an admin token with the password grant and cache it."""
        token = api.get_api_authorization(self).access_token
        self._api_access_token = token
        self._log.info("keycloak.api_authorized", expires_at=token.expiration.isoformat())
        return token

    def create_user(
        self,
        username: str,
        first_name: str,
        last_name: str,
        email: str,
        enabled: bool = True,
        groups: Sequence[str] | None = None,
    ) -> bool:
        created = api.create_user(self, username, first_name, last_name, email, enabled, groups)
        self._log.info("keycloak.user_created", username=username)
        return created

    def user_exists(self, email: str) -> bool:
        return api.user_exists(self, email)


__all__ = ["KeycloakExtended"]
