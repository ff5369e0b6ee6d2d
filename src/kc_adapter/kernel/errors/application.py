"""Application-layer errors – outcomes of an OAuth exchange."""

from __future__ import annotations

from typing import Any

from kc_adapter.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class ProviderError(ApplicationError):
    """The identity provider answered with an OAuth ``error`` body."""

    default_code = "provider_error"

    def __init__(
        self,
        error: str,
        error_description: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        message = f"{error}: {error_description}" if error_description else error
        if status_code is not None:
            message = f"HTTP {status_code}: {message}"
        kwargs.setdefault("detail", {"error": error, "error_description": error_description})
        super().__init__(message, **kwargs)
        self.error = error
        self.error_description = error_description
        self.status_code = status_code


class UnexpectedResponseError(ApplicationError):
    """The response carried neither an error nor the expected payload."""

    default_code = "unexpected_response"

    def __init__(
        self,
        message: str = "Unexpected response from identity provider",
        *,
        status_code: int | None = None,
        body: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code
        self.body = body


__all__ = [
    "ApplicationError",
    "ProviderError",
    "UnexpectedResponseError",
]
