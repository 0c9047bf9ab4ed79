"""OpenTelemetry adapter – OtelTracer and OtelTracingConfigurator."""
from __future__ import annotations

import contextlib
import threading
from typing import Any, Iterator, Sequence

from secrets_registrar.observability.logging import get_logger
from secrets_registrar.observability.tracing import NoopTracer, Span, SpanKind, Tracer

logger = get_logger(__name__)


def _require_otel() -> Any:
    try:
        from opentelemetry import trace  # type: ignore[import-untyped]
        return trace
    except ImportError as exc:
        raise ImportError("Install 'secrets-registrar[otel]' to use the OpenTelemetry adapter") from exc


class _OtelSpan(Span):
    def __init__(self, span: Any) -> None:
        self._span = span

    def set_attribute(self, key: str, value: Any) -> None:
        self._span.set_attribute(key, value)

    def set_status_ok(self) -> None:
        from opentelemetry.trace import Status, StatusCode  # type: ignore[import-untyped]
        self._span.set_status(Status(StatusCode.OK))

    def set_status_error(self, description: str) -> None:
        from opentelemetry.trace import Status, StatusCode  # type: ignore[import-untyped]
        self._span.set_status(Status(StatusCode.ERROR, description))

    def record_exception(self, exc: BaseException) -> None:
        self._span.record_exception(exc)


class OtelTracer(Tracer):
    """OpenTelemetry tracer adapter for one instrumentation source."""

    def __init__(self, name: str = "secrets_registrar", tracer_provider: Any = None) -> None:
        trace = _require_otel()
        self._name = name
        self._tracer = trace.get_tracer(name, tracer_provider=tracer_provider)

    @property
    def name(self) -> str:
        return self._name

    @contextlib.contextmanager
    def start_span(self, name: str, kind: SpanKind = SpanKind.INTERNAL, attributes: dict[str, Any] | None = None) -> Iterator[Span]:
        from opentelemetry.trace import SpanKind as OtelKind  # type: ignore[import-untyped]
        kinds = {
            SpanKind.INTERNAL: OtelKind.INTERNAL, SpanKind.SERVER: OtelKind.SERVER,
            SpanKind.CLIENT: OtelKind.CLIENT, SpanKind.PRODUCER: OtelKind.PRODUCER,
            SpanKind.CONSUMER: OtelKind.CONSUMER,
        }
        with self._tracer.start_as_current_span(
            name,
            kind=kinds.get(kind, OtelKind.INTERNAL),
            attributes=attributes,
            record_exception=False,
            set_status_on_exception=True,
        ) as span:
            yield _OtelSpan(span)


class OtelTracingConfigurator:
    """Allow-list of activity sources that get real OpenTelemetry tracers.

    Providers ask :meth:`tracer` for their source name; sources that were
    never enabled through :meth:`add_sources` get a :class:`NoopTracer`.
    """

    def __init__(self, tracer_provider: Any = None) -> None:
        _require_otel()
        self._provider = tracer_provider
        self._sources: set[str] = set()
        self._lock = threading.Lock()

    def add_sources(self, names: Sequence[str]) -> None:
        with self._lock:
            added = [n for n in names if n and n not in self._sources]
            self._sources.update(added)
        if added:
            logger.info("otel.sources_enabled", sources=added)

    @property
    def enabled_sources(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._sources)

    def is_enabled(self, name: str) -> bool:
        with self._lock:
            return name in self._sources

    def tracer(self, name: str) -> Tracer:
        if self.is_enabled(name):
            return OtelTracer(name, tracer_provider=self._provider)
        return NoopTracer()


__all__ = ["OtelTracer", "OtelTracingConfigurator"]
