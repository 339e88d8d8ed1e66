"""
Standard span attributes for indexkit.

Attribute constants used across indexkit components so that spans from the
store and the pipeline can be correlated by the same keys.

Example:
    >>> from indexkit.observability.attributes import ATTR_COLLECTION
    >>> with tracer.span("indexkit.store.save", {ATTR_COLLECTION: "events"}):
    ...     pass
"""

# =============================================================================
# Event Attributes
# =============================================================================

ATTR_BLOCK_NUMBER = "indexkit.event.block"
"""Block height of the event being processed (integer)."""

ATTR_EVENT_ADDRESS = "indexkit.event.address"
"""Address that emitted the event (string)."""

ATTR_EVENT_KIND = "indexkit.event.kind"
"""Payload ``type`` of the event, empty string when absent."""

ATTR_EVENT_COUNT = "indexkit.event.count"
"""Number of events in an operation (integer)."""

# =============================================================================
# Store Attributes
# =============================================================================

ATTR_COLLECTION = "indexkit.store.collection"
"""Name of the collection being written or read."""

ATTR_COLLECTION_COUNT = "indexkit.store.collection_count"
"""Number of collections involved in a state read or restore (integer)."""

ATTR_COLLECTIONS_SKIPPED = "indexkit.store.collections_skipped"
"""Number of restore entries skipped because they were not sequences."""

# =============================================================================
# Handler Attributes
# =============================================================================

ATTR_INDEXER_NAME = "indexkit.indexer.name"
"""Class name of the indexer driving a run."""

ATTR_HANDLER_COUNT = "indexkit.handler.count"
"""Number of handlers invoked for an event (integer)."""

__all__ = [
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
