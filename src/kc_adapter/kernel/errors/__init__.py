"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError             (domain.py)
    │   ├── NotDefinedError
    │   └── ConflictError
    ├── ApplicationError        (application.py)
    │   ├── ProviderError
    │   ├── UnexpectedResponseError
    │   └── ConfigError         (kc_adapter.config.validation)
    └── InfrastructureError     (infrastructure.py)
        ├── TransportError
        ├── DecodeError
        └── MalformedResponseError
"""

from kc_adapter.kernel.errors.application import (
    ApplicationError,
    ProviderError,
    UnexpectedResponseError,
)
from kc_adapter.kernel.errors.base import BaseError
from kc_adapter.kernel.errors.domain import (
    ConflictError,
    DomainError,
    NotDefinedError,
)
from kc_adapter.kernel.errors.infrastructure import (
    DecodeError,
    InfrastructureError,
    MalformedResponseError,
    TransportError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DecodeError",
    "DomainError",
    "InfrastructureError",
    "MalformedResponseError",
    "NotDefinedError",
    "ProviderError",
    "TransportError",
    "UnexpectedResponseError",
]
