"""
Observability utilities for indexkit.

Provides composition-based tracing and the standard span attributes used by
the store and the indexing pipeline.

Example:
    >>> from indexkit.observability import create_tracer
    >>>
    >>> class MyStore:
    ...     def __init__(self, enable_tracing: bool = True):
    ...         self._tracer = create_tracer(__name__, enable_tracing)
    ...         self._enable_tracing = self._tracer.enabled

Note:
    OpenTelemetry is an optional dependency. All utilities in this module
    work when it is not installed.
"""

from indexkit.observability.attributes import (
    ATTR_BLOCK_NUMBER,
    ATTR_COLLECTION,
    ATTR_COLLECTION_COUNT,
    ATTR_COLLECTIONS_SKIPPED,
    ATTR_EVENT_ADDRESS,
    ATTR_EVENT_COUNT,
    ATTR_EVENT_KIND,
    ATTR_HANDLER_COUNT,
    ATTR_INDEXER_NAME,
)
from indexkit.observability.tracer import (
    OTEL_AVAILABLE,
    MockTracer,
    NullTracer,
    OpenTelemetryTracer,
    RecordedSpan,
    Tracer,
    create_tracer,
)

__all__ = [
    # Tracers
    "OTEL_AVAILABLE",
    "Tracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "MockTracer",
    "RecordedSpan",
    "create_tracer",
    # Attributes
    "ATTR_BLOCK_NUMBER",
    "ATTR_EVENT_ADDRESS",
    "ATTR_EVENT_KIND",
    "ATTR_EVENT_COUNT",
    "ATTR_COLLECTION",
    "ATTR_COLLECTION_COUNT",
    "ATTR_COLLECTIONS_SKIPPED",
    "ATTR_INDEXER_NAME",
    "ATTR_HANDLER_COUNT",
]
