"""Keycloak adapter – Keycloak provider holding connection parameters and tokens."""
from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from kc_adapter.adapters.http import HttpTransport, HttpxTransport
from kc_adapter.adapters.keycloak import api, endpoints
from kc_adapter.adapters.session import ACCESS_TOKEN_EXPIRATION_KEY, SessionWriter
from kc_adapter.config.validation import MissingRequiredSettingError
from kc_adapter.kernel.errors import NotDefinedError
from kc_adapter.kernel.time import Clock, SystemClock
from kc_adapter.observability.logging import get_logger
from kc_adapter.tokens import AccessToken, AuthorizationResponse, RefreshToken

if TYPE_CHECKING:
    from kc_adapter.config.settings import KeycloakSettings


class Keycloak:
    """Single-realm OpenID Connect client for one confidential/public client.

    Parameters
    ----------
    host:
        Provider base URL, e.g. ``https://sso.example.com`` (no ``/auth``).
    realm_id:
        Realm name.
    client_id:
        OAuth client id registered in the realm.
    redirect_uri:
        Callback URL; may be set later but is required by :meth:`get_login_url`.
    transport:
        :class:`~kc_adapter.adapters.http.HttpTransport`; defaults to an
        :class:`~kc_adapter.adapters.http.HttpxTransport` owned by this
        instance and released by :meth:`close`.
    timeout:
        Request timeout in seconds for the default transport.
    session:
        Optional :class:`~kc_adapter.adapters.session.SessionWriter` that
        receives the access-token expiration after each (re)authorization.
    clock:
        Source of "now" for token expiry; defaults to :class:`SystemClock`.

    Instances are not thread-safe: concurrent ``authorize`` / ``reauthorize``
    calls on one instance must be serialised by the caller.
    """

    def __init__(
        self,
        host: str,
        realm_id: str,
        client_id: str,
        redirect_uri: str | None = None,
        *,
        transport: HttpTransport | None = None,
        session: SessionWriter | None = None,
        clock: Clock | None = None,
        timeout: float = 10.0,
    ) -> None:
        for name, value in (("host", host), ("realm_id", realm_id), ("client_id", client_id)):
            if not value:
                raise MissingRequiredSettingError(name)
        self._host = host.rstrip("/")
        self._realm_id = realm_id
        self._client_id = client_id
        self.redirect_uri = redirect_uri
        self._owned_transport: HttpxTransport | None = None
        if transport is None:
            transport = self._owned_transport = HttpxTransport(timeout=timeout)
        self._transport = transport
        self._session = session
        self._clock = clock or SystemClock()
        self._access_token: AccessToken | None = None
        self._refresh_token: RefreshToken | None = None
        self._log = get_logger(__name__, realm=realm_id, client_id=client_id)

    @classmethod
    def from_settings(
        cls,
        settings: KeycloakSettings,
        *,
        transport: HttpTransport | None = None,
        session: SessionWriter | None = None,
        clock: Clock | None = None,
    ) -> Keycloak:
        return cls(
            settings.host,
            settings.realm_id,
            settings.client_id,
            settings.redirect_uri or None,
            transport=transport,
            session=session,
            clock=clock,
            timeout=settings.timeout,
        )

    def close(self) -> None:
        """Close the default transport; an injected transport is left open."""
        if self._owned_transport is not None:
            self._owned_transport.close()

    def __enter__(self) -> Keycloak:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Connection parameters
    # ------------------------------------------------------------------

    @property
    def host(self) -> str:
        return self._host

    @property
    def realm_id(self) -> str:
        return self._realm_id

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def transport(self) -> HttpTransport:
        return self._transport

    @property
    def clock(self) -> Clock:
        return self._clock

    def get_login_url(self) -> str:
        """Authorization-code login URL for the configured redirect URI."""
        if not self.redirect_uri:
            raise MissingRequiredSettingError("redirect_uri")
        return endpoints.login_url(self._host, self._realm_id, self._client_id, self.redirect_uri)

    @property
    def login_url(self) -> str:
        return self.get_login_url()

    # ------------------------------------------------------------------
    # Tokens
    # ------------------------------------------------------------------

    def get_access_token(self) -> AccessToken:
        if self._access_token is None:
            raise NotDefinedError("AccessToken")
        return self._access_token

    def get_refresh_token(self) -> RefreshToken:
        if self._refresh_token is None:
            raise NotDefinedError("RefreshToken")
        return self._refresh_token

    def is_authenticated(self, now: datetime | None = None) -> bool:
        """An access token is held and has not expired."""
        token = self._access_token
        return token is not None and not token.is_expired(now or self._clock.now())

    def _store(self, response: AuthorizationResponse) -> AccessToken:
        self._access_token, self._refresh_token = response.access_token, response.refresh_token
        if self._session is not None:
            self._session.set(ACCESS_TOKEN_EXPIRATION_KEY, response.access_token.expiration)
        return response.access_token

    # ------------------------------------------------------------------
    # Flows
    # ------------------------------------------------------------------

    def authorize(self, authorization_code: str) -> AccessToken:
        """Exchange *authorization_code* and keep the resulting token pair.

        Flow errors propagate unchanged and leave the stored tokens untouched.
        """
        token = self._store(api.get_authorization(self, authorization_code))
        self._log.info("keycloak.authorized", expires_at=token.expiration.isoformat())
        return token

    def reauthorize(self) -> AccessToken:
        """Refresh the token pair with the stored refresh token."""
        token = self._store(api.reauthorize(self, self.get_refresh_token()))
        self._log.info("keycloak.reauthorized", expires_at=token.expiration.isoformat())
        return token

    def logout(self) -> bool:
        """End the provider session and discard both stored tokens."""
        result = api.logout(self, self.get_refresh_token())
        self._access_token = None
        self._refresh_token = None
        self._log.info("keycloak.logged_out")
        return result


__all__ = ["Keycloak"]
