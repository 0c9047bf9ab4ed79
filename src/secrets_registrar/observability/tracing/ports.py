"""Observability – Tracer, Span, SpanKind and TracingConfigurator ports."""
from __future__ import annotations

import abc
import contextlib
from enum import Enum
from typing import Any, Iterator, Protocol, Sequence, runtime_checkable


class SpanKind(str, Enum):
    INTERNAL = "INTERNAL"
    SERVER = "SERVER"
    CLIENT = "CLIENT"
    PRODUCER = "PRODUCER"
    CONSUMER = "CONSUMER"


class Span(abc.ABC):
    """Represents an active trace span."""

    @abc.abstractmethod
    def set_attribute(self, key: str, value: Any) -> None: ...

    @abc.abstractmethod
    def set_status_ok(self) -> None: ...

    @abc.abstractmethod
    def set_status_error(self, description: str) -> None: ...

    @abc.abstractmethod
    def record_exception(self, exc: BaseException) -> None: ...


class Tracer(abc.ABC):
    """Port: create spans around registration steps."""

    @abc.abstractmethod
    @contextlib.contextmanager
    def start_span(
        self,
        name: str,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: dict[str, Any] | None = None,
    ) -> Iterator[Span]: ...


@runtime_checkable
class TracingConfigurator(Protocol):
    """Port: the telemetry capability "enable tracing for these sources".

    Implementations decide whether repeated calls with the same names are
    idempotent.
    """

    def add_sources(self, names: Sequence[str]) -> None: ...


__all__ = ["Span", "SpanKind", "Tracer", "TracingConfigurator"]
