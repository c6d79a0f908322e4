"""Observability – structured logging helpers."""
from rotating_jwt.observability.logging.factory import JsonLoggerFactory
from rotating_jwt.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from rotating_jwt.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
