"""
Tracers for the store and the indexing pipeline.

Components take a ``Tracer`` at construction and open spans through it,
never through OpenTelemetry directly. OpenTelemetry is optional: without it
``create_tracer`` hands out a NullTracer and spans cost nothing.

Example:
    >>> tracer = MockTracer()
    >>> store = InMemoryStateStore(tracer=tracer)
    >>> await store.save("events", {"blockNumber": 1})
    >>> tracer.span_names
    ['indexkit.store.save']
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from contextlib import AbstractContextManager
from typing import Any, NamedTuple, Protocol, runtime_checkable

try:
    from opentelemetry import trace

    OTEL_AVAILABLE = True
except ImportError:
    OTEL_AVAILABLE = False
    trace = None  # type: ignore[assignment]

SpanAttributes = dict[str, Any]


@runtime_checkable
class Tracer(Protocol):
    """Anything that can open a named span with optional attributes."""

    def span(
        self,
        name: str,
        attributes: SpanAttributes | None = None,
    ) -> AbstractContextManager[Any]: ...

    @property
    def enabled(self) -> bool:
        """Whether spans are actually recorded somewhere."""
        ...


class NullTracer:
    """Tracer used when tracing is off. Every span is a no-op yielding None."""

    @contextlib.contextmanager
    def span(self, name: str, attributes: SpanAttributes | None = None) -> Iterator[None]:
        yield None

    @property
    def enabled(self) -> bool:
        return False


class OpenTelemetryTracer:
    """
    Tracer backed by the globally configured OpenTelemetry provider.

    Spans become the current span while open, so spans opened by the store
    nest under the pipeline's event span.
    """

    def __init__(self, name: str) -> None:
        if trace is None:
            raise ImportError("opentelemetry-api is required for OpenTelemetryTracer")
        self._tracer = trace.get_tracer(name)

    def span(self, name: str, attributes: SpanAttributes | None = None) -> AbstractContextManager[Any]:
        return self._tracer.start_as_current_span(name, attributes=attributes or {})

    @property
    def enabled(self) -> bool:
        return True


class RecordedSpan(NamedTuple):
    name: str
    attributes: SpanAttributes | None


class MockTracer:
    """
    Tracer for tests. Records every span opened, in opening order.

    Nested spans are recorded when they open, so an outer span always
    precedes the spans opened inside it.
    """

    def __init__(self) -> None:
        self.spans: list[RecordedSpan] = []

    @contextlib.contextmanager
    def span(self, name: str, attributes: SpanAttributes | None = None) -> Iterator[None]:
        self.spans.append(RecordedSpan(name, attributes))
        yield None

    @property
    def enabled(self) -> bool:
        return True

    @property
    def span_names(self) -> list[str]:
        return [recorded.name for recorded in self.spans]

    def clear(self) -> None:
        self.spans.clear()


def create_tracer(name: str, enable_tracing: bool = True) -> Tracer:
    """
    Pick a tracer for a component.

    Args:
        name: Instrumentation scope, usually the calling module's ``__name__``
        enable_tracing: The component's tracing switch

    Returns:
        OpenTelemetryTracer when tracing is switched on and OpenTelemetry is
        importable, NullTracer otherwise
    """
    if enable_tracing and OTEL_AVAILABLE:
        return OpenTelemetryTracer(name)
    return NullTracer()


__all__ = [
    "OTEL_AVAILABLE",
    "Tracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "MockTracer",
    "RecordedSpan",
    "create_tracer",
]
