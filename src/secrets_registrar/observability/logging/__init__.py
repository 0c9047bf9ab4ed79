"""Observability – structured logging helpers."""
from secrets_registrar.observability.logging.filters import SensitiveFieldsFilter
from secrets_registrar.observability.logging.factory import JsonLoggerFactory
from secrets_registrar.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "SensitiveFieldsFilter", "get_logger"]
