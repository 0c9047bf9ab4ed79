"""Observability – NoopTracer, NoopTracingConfigurator."""
from __future__ import annotations

import contextlib
from typing import Any, Iterator, Sequence

from secrets_registrar.observability.tracing.ports import Span, SpanKind, Tracer


class _NoopSpan(Span):
    def set_attribute(self, key: str, value: Any) -> None:
        pass

    def set_status_ok(self) -> None:
        pass

    def set_status_error(self, description: str) -> None:
        pass

    def record_exception(self, exc: BaseException) -> None:
        pass


class NoopTracer(Tracer):
    """Silent no-op tracer."""

    @contextlib.contextmanager
    def start_span(self, name: str, kind: SpanKind = SpanKind.INTERNAL, attributes: dict[str, Any] | None = None) -> Iterator[Span]:  # noqa: ARG002
        yield _NoopSpan()


class NoopTracingConfigurator:
    """Accepts source names and discards them."""

    def add_sources(self, names: Sequence[str]) -> None:  # noqa: ARG002
        pass


__all__ = ["NoopTracer", "NoopTracingConfigurator"]
