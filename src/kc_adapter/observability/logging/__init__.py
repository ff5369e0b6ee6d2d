"""Observability – structured logging helpers."""
from kc_adapter.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from kc_adapter.observability.logging.processors import RedactionProcessor, get_logger
from kc_adapter.observability.logging.factory import JsonLoggerFactory

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "RedactionProcessor",
    "SensitiveFieldsFilter",
    "get_logger",
]
