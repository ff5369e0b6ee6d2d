"""Tokens – AuthorizationResponse parsed from a token-endpoint body."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from kc_adapter.kernel.errors import MalformedResponseError
from kc_adapter.kernel.time import Clock
from kc_adapter.tokens.token import AccessToken, RefreshToken


def _require_str(body: Mapping[str, Any], key: str) -> str:
    value = body.get(key)
    if not isinstance(value, str) or not value:
        raise MalformedResponseError(key)
    return value


def _require_int(body: Mapping[str, Any], key: str) -> int:
    value = body.get(key)
    # bool is an int subclass; a JSON true is not a lifetime
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedResponseError(key)
    return value


@dataclass(frozen=True)
class AuthorizationResponse:
    """Access/refresh token pair produced by one token-endpoint exchange."""

    access_token: AccessToken
    refresh_token: RefreshToken

    @classmethod
    def from_body(cls, body: Any, clock: Clock | None = None) -> AuthorizationResponse:
        """Parse ``access_token``, ``expires_in`` and ``refresh_token``.

        Raises :class:`~kc_adapter.kernel.errors.MalformedResponseError` naming
        the first field that is absent or of the wrong type.
        """
        if not isinstance(body, Mapping):
            raise MalformedResponseError("body", "Token response body is not a JSON object")
        bearer = _require_str(body, "access_token")
        expires_in = _require_int(body, "expires_in")
        refresh = _require_str(body, "refresh_token")
        return cls(
            access_token=AccessToken.issue(bearer, expires_in, clock),
            refresh_token=RefreshToken(refresh),
        )


__all__ = ["AuthorizationResponse"]
