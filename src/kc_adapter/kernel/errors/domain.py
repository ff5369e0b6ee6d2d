"""Domain errors – state that is missing or rejected by the provider."""

from __future__ import annotations

from typing import Any

from kc_adapter.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Provider-side state is missing or a write was refused."""

    default_code = "domain_error"


class NotDefinedError(DomainError):
    """Accessed state has not been populated yet (e.g. no token obtained)."""

    default_code = "not_defined"

    def __init__(self, name: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"{name} is missing", **kwargs)
        self.name = name


class ConflictError(DomainError):
    """An admin write was rejected without a structured error body."""

    default_code = "conflict"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code


__all__ = [
    "ConflictError",
    "DomainError",
    "NotDefinedError",
]
