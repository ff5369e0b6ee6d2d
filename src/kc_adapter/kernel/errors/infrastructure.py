"""Infrastructure errors – I/O failures and undecodable payloads."""

from __future__ import annotations

from typing import Any

from kc_adapter.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class TransportError(InfrastructureError):
    """The HTTP call could not complete (network, timeout, protocol)."""

    default_code = "transport_error"

    def __init__(
        self,
        url: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Request to '{url}' failed", **kwargs)
        self.url = url
        self.status_code = status_code


class DecodeError(InfrastructureError):
    """A token segment could not be base64url/JSON decoded."""

    default_code = "decode_error"


class MalformedResponseError(InfrastructureError):
    """A token-endpoint body lacks a required field or has the wrong type."""

    default_code = "malformed_response"

    def __init__(self, field: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Token response field '{field}' is missing or invalid", **kwargs)
        self.field = field


__all__ = [
    "DecodeError",
    "InfrastructureError",
    "MalformedResponseError",
    "TransportError",
]
