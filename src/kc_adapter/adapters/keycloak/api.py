"""Keycloak adapter – stateless flow operations against the provider.

Each function issues exactly one HTTP call through the provider's transport
and turns the response into a domain result or one of the errors in
:mod:`kc_adapter.kernel.errors`. Nothing is retried and nothing is stored;
token bookkeeping belongs to :class:`~kc_adapter.adapters.keycloak.provider.Keycloak`.

Every endpoint shares one error policy: a JSON object carrying an ``error``
field is a :class:`ProviderError`, checked before any success condition.
"""
from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from kc_adapter.adapters.http import HttpResponse
from kc_adapter.adapters.keycloak import endpoints
from kc_adapter.kernel.errors import (
    ConflictError,
    ProviderError,
    TransportError,
    UnexpectedResponseError,
)
from kc_adapter.observability.logging import get_logger
from kc_adapter.tokens import AuthorizationResponse, RefreshToken

if TYPE_CHECKING:
    from kc_adapter.adapters.keycloak.extended import KeycloakExtended
    from kc_adapter.adapters.keycloak.provider import Keycloak

_log = get_logger(__name__)

DEFAULT_GROUPS: tuple[str, ...] = ("default-group",)

_FORM_HEADERS = {"Content-Type": endpoints.FORM_CONTENT_TYPE}


def _error_body(body: Any) -> Mapping[str, Any] | None:
    if isinstance(body, Mapping) and "error" in body:
        return body
    return None


def _provider_error(body: Mapping[str, Any], status_code: int) -> ProviderError:
    description = body.get("error_description")
    return ProviderError(
        str(body["error"]),
        str(description) if description is not None else None,
        status_code=status_code,
    )


def _exchange(keycloak: Keycloak, grant_type: str, form: dict[str, str]) -> AuthorizationResponse:
    url = endpoints.token_endpoint(keycloak.host, keycloak.realm_id)
    _log.debug("keycloak.request", method="POST", url=url, grant_type=grant_type)
    response = keycloak.transport.post(url, _FORM_HEADERS, form)
    _log.debug("keycloak.response", url=url, grant_type=grant_type, status=response.status_code)

    error = _error_body(response.body)
    if error is not None:
        _log.warning(
            "keycloak.provider_error",
            grant_type=grant_type,
            status=response.status_code,
            error=error.get("error"),
        )
        raise _provider_error(error, response.status_code)

    if isinstance(response.body, Mapping) and "access_token" in response.body:
        return AuthorizationResponse.from_body(response.body, keycloak.clock)

    _log.warning("keycloak.unexpected_response", grant_type=grant_type, status=response.status_code)
    raise UnexpectedResponseError(
        f"Token endpoint returned neither tokens nor an error (HTTP {response.status_code})",
        status_code=response.status_code,
        body=response.body,
    )


def get_authorization(keycloak: Keycloak, authorization_code: str) -> AuthorizationResponse:
    """Exchange an authorization code (``grant_type=authorization_code``)."""
    return _exchange(
        keycloak,
        "authorization_code",
        {
            "grant_type": "authorization_code",
            "code": authorization_code,
            "client_id": keycloak.client_id,
            "redirect_uri": keycloak.redirect_uri or "",
        },
    )


def reauthorize(keycloak: Keycloak, refresh_token: RefreshToken) -> AuthorizationResponse:
    """Obtain a fresh token pair (``grant_type=refresh_token``)."""
    return _exchange(
        keycloak,
        "refresh_token",
        {
            "grant_type": "refresh_token",
            "refresh_token": refresh_token.value,
            "client_id": keycloak.client_id,
            "redirect_uri": keycloak.redirect_uri or "",
        },
    )


def get_api_authorization(keycloak: KeycloakExtended) -> AuthorizationResponse:
    """Obtain an admin-API token with the service account (``grant_type=password``)."""
    return _exchange(
        keycloak,
        "password",
        {
            "grant_type": "password",
            "client_id": keycloak.api_client_id,
            "client_secret": keycloak.api_client_secret,
            "username": keycloak.api_username,
            "password": keycloak.api_password,
        },
    )


def logout(keycloak: Keycloak, refresh_token: RefreshToken) -> bool:
    """End the provider session bound to *refresh_token*.

    Success is strictly HTTP 200. Otherwise a structured error body becomes a
    :class:`ProviderError`; anything else is reported as a
    :class:`TransportError` with the status line.
    """
    url = endpoints.logout_endpoint(keycloak.host, keycloak.realm_id)
    _log.debug("keycloak.request", method="POST", url=url)
    response = keycloak.transport.post(
        url,
        _FORM_HEADERS,
        {"refresh_token": refresh_token.value, "client_id": keycloak.client_id},
    )
    _log.debug("keycloak.response", url=url, status=response.status_code)

    if response.status_code == 200:
        return True

    error = _error_body(response.body)
    if error is not None:
        _log.warning("keycloak.provider_error", url=url, status=response.status_code, error=error.get("error"))
        raise _provider_error(error, response.status_code)

    _log.warning("keycloak.logout_failed", url=url, status=response.status_code)
    raise TransportError(
        url,
        f"HTTP {response.status_code}: {response.reason or 'logout failed'}",
        status_code=response.status_code,
    )


def _admin_headers(keycloak: KeycloakExtended, **extra: str) -> dict[str, str]:
    return {"Authorization": keycloak.api_access_token.authorization_header, **extra}


def _conflict_message(response: HttpResponse) -> str:
    message = f"User creation failed. HTTP response code: {response.status_code}"
    if isinstance(response.body, Mapping) and response.body.get("errorMessage"):
        message = f"{message} ({response.body['errorMessage']})"
    return message


def create_user(
    keycloak: KeycloakExtended,
    username: str,
    first_name: str,
    last_name: str,
    email: str,
    enabled: bool = True,
    groups: Sequence[str] | None = None,
) -> bool:
    """Create a realm user through the admin API; ``True`` on HTTP 201."""
    url = endpoints.admin_users_endpoint(keycloak.host, keycloak.realm_id)
    payload = json.dumps({
        "username": username,
        "firstName": first_name,
        "lastName": last_name,
        "email": email,
        "enabled": enabled,
        "groups": list(DEFAULT_GROUPS if groups is None else groups),
    })
    headers = _admin_headers(keycloak, **{"Content-Type": endpoints.JSON_CONTENT_TYPE})
    _log.debug("keycloak.request", method="POST", url=url)
    response = keycloak.transport.post(url, headers, payload)
    _log.debug("keycloak.response", url=url, status=response.status_code)

    if response.status_code == 201:
        return True

    error = _error_body(response.body)
    if error is not None:
        _log.warning("keycloak.provider_error", url=url, status=response.status_code, error=error.get("error"))
        raise _provider_error(error, response.status_code)

    _log.warning("keycloak.user_create_failed", url=url, status=response.status_code)
    raise ConflictError(_conflict_message(response), status_code=response.status_code)


def user_exists(keycloak: KeycloakExtended, email: str) -> bool:
    """``True`` when the first user returned for *email* has it as username.

    Only a successful lookup can answer ``False``: an empty (or non-list)
    2xx result means the user does not exist. Any other status raises.
    """
    url = endpoints.users_by_email_url(keycloak.host, keycloak.realm_id, email)
    _log.debug("keycloak.request", method="GET", url=endpoints.admin_users_endpoint(keycloak.host, keycloak.realm_id))
    response = keycloak.transport.get(url, _admin_headers(keycloak))
    _log.debug("keycloak.response", status=response.status_code)

    error = _error_body(response.body)
    if error is not None:
        _log.warning("keycloak.provider_error", status=response.status_code, error=error.get("error"))
        raise _provider_error(error, response.status_code)

    if not response.is_success:
        _log.warning("keycloak.unexpected_response", status=response.status_code)
        raise UnexpectedResponseError(
            f"User lookup failed (HTTP {response.status_code})",
            status_code=response.status_code,
            body=response.body,
        )

    body = response.body
    if isinstance(body, list) and body and isinstance(body[0], Mapping):
        return body[0].get("username") == email
    return False


__all__ = [
    "DEFAULT_GROUPS",
    "create_user",
    "get_api_authorization",
    "get_authorization",
    "logout",
    "reauthorize",
    "user_exists",
]
