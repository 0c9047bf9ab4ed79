"""OpenTelemetry adapter – tracer and activity source subscription."""
from secrets_registrar.adapters.opentelemetry.tracer import OtelTracer, OtelTracingConfigurator

__all__ = ["OtelTracer", "OtelTracingConfigurator"]
