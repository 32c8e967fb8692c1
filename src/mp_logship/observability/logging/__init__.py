"""Observability – structured diagnostic logging for the pipeline itself."""
from mp_logship.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from mp_logship.observability.logging.processors import ServiceContextProcessor, get_logger
from mp_logship.observability.logging.factory import JsonLoggerFactory

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "ServiceContextProcessor",
    "get_logger",
]
