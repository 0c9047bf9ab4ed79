"""Observability – tracing ports."""
from secrets_registrar.observability.tracing.ports import Span, SpanKind, Tracer, TracingConfigurator
from secrets_registrar.observability.tracing.noop import NoopTracer, NoopTracingConfigurator

__all__ = ["NoopTracer", "NoopTracingConfigurator", "Span", "SpanKind", "Tracer", "TracingConfigurator"]
