"""Tokens – access/refresh token value types and unverified identity decoding."""
from kc_adapter.tokens.identity import UserIdentity, decode_claims
from kc_adapter.tokens.token import AccessToken, RefreshToken, Token
from kc_adapter.tokens.response import AuthorizationResponse

__all__ = [
    "AccessToken",
    "AuthorizationResponse",
    "RefreshToken",
    "Token",
    "UserIdentity",
    "decode_claims",
]
