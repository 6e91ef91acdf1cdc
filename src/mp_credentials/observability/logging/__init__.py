"""Observability – structured logging ports and helpers."""
from mp_credentials.observability.logging.filters import SensitiveFieldsFilter
from mp_credentials.observability.logging.factory import JsonLoggerFactory
from mp_credentials.observability.logging.processors import RedactionProcessor, get_logger

__all__ = [
    "JsonLoggerFactory",
    "RedactionProcessor",
    "SensitiveFieldsFilter",
    "get_logger",
]
