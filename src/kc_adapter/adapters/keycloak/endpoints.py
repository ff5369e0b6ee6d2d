"""Keycloak adapter – endpoint URL builders.

Paths follow the legacy ``/auth`` context root of the provider and are the
wire contract; keep them byte-for-byte.
"""
from __future__ import annotations

from urllib.parse import quote_plus, urlencode

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


def realm_url(host: str, realm_id: str) -> str:
    return f"{host}/auth/realms/{realm_id}"


def auth_endpoint(host: str, realm_id: str) -> str:
    return f"{realm_url(host, realm_id)}/protocol/openid-connect/auth"


def token_endpoint(host: str, realm_id: str) -> str:
    return f"{realm_url(host, realm_id)}/protocol/openid-connect/token"


def logout_endpoint(host: str, realm_id: str) -> str:
    return f"{realm_url(host, realm_id)}/protocol/openid-connect/logout"


def admin_users_endpoint(host: str, realm_id: str) -> str:
    return f"{host}/auth/admin/realms/{realm_id}/users"


def login_url(host: str, realm_id: str, client_id: str, redirect_uri: str) -> str:
    """Authorization-code login URL; only ``redirect_uri`` is URL-encoded."""
    return (
        f"{auth_endpoint(host, realm_id)}?client_id={client_id}"
        f"&response_type=code&redirect_uri={quote_plus(redirect_uri)}"
    )


def users_by_email_url(host: str, realm_id: str, email: str) -> str:
    return f"{admin_users_endpoint(host, realm_id)}?{urlencode({'email': email})}"


__all__ = [
    "FORM_CONTENT_TYPE",
    "JSON_CONTENT_TYPE",
    "admin_users_endpoint",
    "auth_endpoint",
    "login_url",
    "logout_endpoint",
    "realm_url",
    "token_endpoint",
    "users_by_email_url",
]
