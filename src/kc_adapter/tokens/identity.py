"""Tokens – unverified claim decoding and the UserIdentity projection.

Nothing in this module verifies a signature. :class:`UserIdentity` is a
read-only view over whatever the payload segment of a compact token says,
which makes it useful for display and routing but never for authorization
decisions.
"""
from __future__ import annotations

import base64
import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from kc_adapter.kernel.errors import DecodeError


def _b64url_decode(segment: str) -> bytes:
    padded = segment + "=" * (-len(segment) % 4)
    return base64.b64decode(padded.encode("ascii"), altchars=b"-_", validate=True)


def decode_claims(bearer: str) -> dict[str, Any]:
    """Return the JSON object held in segment 1 of a dot-separated token.

    Unknown claims are passed through unchanged.
    """
    segments = bearer.split(".")
    if len(segments) < 2:
        raise DecodeError(
            f"Token has {len(segments)} segment(s); a payload segment is required",
            detail={"segments": len(segments)},
        )
    try:
        raw = _b64url_decode(segments[1])
    except ValueError as exc:
        raise DecodeError("Token payload is not valid base64url", cause=exc) from exc
    try:
        claims = json.loads(raw)
    except ValueError as exc:
        raise DecodeError("Token payload is not valid JSON", cause=exc) from exc
    if not isinstance(claims, dict):
        raise DecodeError(
            "Token payload is not a JSON object",
            detail={"type": type(claims).__name__},
        )
    return claims


@dataclass(frozen=True)
class UserIdentity:
    """Read-only projection of token claims.

    Accessors return ``None`` when a claim is absent. ``verified`` is always
    ``False``: the claims come from an unchecked token payload.
    """

    claims: Mapping[str, Any]
    verified: bool = field(default=False, init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "claims", MappingProxyType(dict(self.claims)))

    def get(self, claim: str, default: Any = None) -> Any:
        return self.claims.get(claim, default)

    def __getitem__(self, claim: str) -> Any:
        return self.claims[claim]

    def __contains__(self, claim: object) -> bool:
        return claim in self.claims

    @property
    def subject(self) -> str | None:
        return self.claims.get("sub")

    @property
    def preferred_username(self) -> str | None:
        return self.claims.get("preferred_username")

    @property
    def email(self) -> str | None:
        return self.claims.get("email")

    @property
    def email_verified(self) -> bool | None:
        return self.claims.get("email_verified")

    @property
    def name(self) -> str | None:
        return self.claims.get("name")

    @property
    def given_name(self) -> str | None:
        return self.claims.get("given_name")

    @property
    def family_name(self) -> str | None:
        return self.claims.get("family_name")

    @property
    def realm_roles(self) -> list[str]:
        """Roles listed under ``realm_access.roles`` (empty when absent)."""
        node = self.claims.get("realm_access")
        if not isinstance(node, dict):
            return []
        roles = node.get("roles")
        if isinstance(roles, list):
            return [r for r in roles if isinstance(r, str)]
        return []

    def to_dict(self) -> dict[str, Any]:
        return dict(self.claims)


__all__ = ["UserIdentity", "decode_claims"]
