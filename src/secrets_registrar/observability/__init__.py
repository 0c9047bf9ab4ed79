"""Observability – structlog logging and tracing ports."""
from secrets_registrar.observability.logging import JsonLoggerFactory, SensitiveFieldsFilter, get_logger
from secrets_registrar.observability.tracing import (
    NoopTracer,
    NoopTracingConfigurator,
    Span,
    SpanKind,
    Tracer,
    TracingConfigurator,
)

__all__ = [
    "JsonLoggerFactory",
    "NoopTracer",
    "NoopTracingConfigurator",
    "SensitiveFieldsFilter",
    "Span",
    "SpanKind",
    "Tracer",
    "TracingConfigurator",
    "get_logger",
]
