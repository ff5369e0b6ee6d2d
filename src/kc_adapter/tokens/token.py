"""Tokens – Token, AccessToken and RefreshToken value types."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from kc_adapter.kernel.time import Clock, SystemClock, utc_now
from kc_adapter.tokens.identity import UserIdentity, decode_claims


@dataclass(frozen=True)
class Token:
    """Expiration instant shared by every issued token."""

    expiration: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Return ``True`` once *now* reaches the expiration instant (inclusive).

        A naive *now* is read as UTC.
        """
        if now is None:
            now = utc_now()
        elif now.tzinfo is None:
            now = now.replace(tzinfo=UTC)
        return now >= self.expiration


@dataclass(frozen=True)
class AccessToken:
    """Bearer string issued by the provider plus its :class:`Token` lifetime.

    The bearer is stored verbatim; nothing here validates its structure or
    signature.
    """

    bearer: str = field(repr=False)
    token: Token

    @classmethod
    def issue(cls, bearer: str, expires_in: int, clock: Clock | None = None) -> AccessToken:
        """Build a token expiring *expires_in* seconds after ``clock.now()``."""
        now = (clock or SystemClock()).now()
        return cls(bearer=bearer, token=Token(now + timedelta(seconds=expires_in)))

    @property
    def expiration(self) -> datetime:
        return self.token.expiration

    def is_expired(self, now: datetime | None = None) -> bool:
        """Expiry check against *now*, or the wall clock when omitted.

        The clock passed to :meth:`issue` is not remembered; pass
        ``clock.now()`` explicitly when testing against a frozen clock.
        """
        return self.token.is_expired(now)

    @property
    def authorization_header(self) -> str:
        """Value for an HTTP ``Authorization`` header."""
        return f"Bearer {self.bearer}"

    def get_user_identity(self) -> UserIdentity:
        """Decode the payload segment into an **unverified** :class:`UserIdentity`.

        The signature is never checked. The result is informational metadata
        and must not be treated as proof of who the caller is.

        Raises :class:`~kc_adapter.kernel.errors.DecodeError` when the payload
        segment is missing, not base64url, or not a JSON object.
        """
        return UserIdentity(decode_claims(self.bearer))


@dataclass(frozen=True)
class RefreshToken:
    """Refresh token string; opaque to this package."""

    value: str = field(repr=False)


__all__ = ["AccessToken", "RefreshToken", "Token"]
