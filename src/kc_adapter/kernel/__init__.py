"""Kernel – framework-agnostic building blocks (errors, time)."""

from kc_adapter.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DecodeError,
    DomainError,
    InfrastructureError,
    MalformedResponseError,
    NotDefinedError,
    ProviderError,
    TransportError,
    UnexpectedResponseError,
)
from kc_adapter.kernel.time import Clock, FrozenClock, SystemClock, utc_now

__all__ = [
    "ApplicationError",
    "BaseError",
    "Clock",
    "ConflictError",
    "DecodeError",
    "DomainError",
    "FrozenClock",
    "InfrastructureError",
    "MalformedResponseError",
    "NotDefinedError",
    "ProviderError",
    "SystemClock",
    "TransportError",
    "UnexpectedResponseError",
    "utc_now",
]
