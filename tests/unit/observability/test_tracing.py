"""Unit tests for tracing ports and no-op implementations."""

from __future__ import annotations

from secrets_registrar.observability.tracing import (
    NoopTracer,
    NoopTracingConfigurator,
    Span,
    SpanKind,
    TracingConfigurator,
)


class TestNoopTracer:
    def test_yields_span(self) -> None:
        with NoopTracer().start_span("op", SpanKind.INTERNAL, {"a": 1}) as span:
            assert isinstance(span, Span)
            span.set_attribute("k", "v")
            span.set_status_ok()
            span.set_status_error("bad")
            span.record_exception(ValueError("x"))

    def test_default_kind(self) -> None:
        with NoopTracer().start_span("op") as span:
            assert span is not None


class TestNoopTracingConfigurator:
    def test_accepts_sources(self) -> None:
        NoopTracingConfigurator().add_sources(["a", "b"])

    def test_satisfies_port(self) -> None:
        assert isinstance(NoopTracingConfigurator(), TracingConfigurator)


class TestSpanKind:
    def test_values_are_strings(self) -> None:
        assert SpanKind.CLIENT == "CLIENT"
        assert {k.value for k in SpanKind} == {"INTERNAL", "SERVER", "CLIENT", "PRODUCER", "CONSUMER"}
