"""
indexkit - Test harness for event-driven indexing logic.

This library provides:
- BlockEvent, an immutable pydantic model for synthetic on-chain events
- An in-memory state store with snapshot/restore
- Declarative indexers with @handles and a sequential processing pipeline
- Testing helpers (indexkit.testing): EventBuilder, TestEnvironment, assertions
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("indexkit")
except PackageNotFoundError:
    # Package not installed (running from source without install)
    __version__ = "0.0.0.dev0"

from indexkit.events.base import BlockEvent
from indexkit.exceptions import (
    IncompleteEventError,
    IndexKitError,
    MalformedStateError,
    RepeatedTestFailure,
    StateMismatchError,
)
from indexkit.handlers import ANY_EVENT, HandlerRegistry, HandlerSignatureError, handles
from indexkit.indexing import IndexContext, Indexer, IndexingPipeline, PipelineResult
from indexkit.stores import InMemoryStateStore, StateStore, StoreState

__all__ = [
    "__version__",
    # Events
    "BlockEvent",
    # Exceptions
    "IndexKitError",
    "IncompleteEventError",
    "StateMismatchError",
    "MalformedStateError",
    "RepeatedTestFailure",
    # Handlers
    "ANY_EVENT",
    "handles",
    "HandlerRegistry",
    "HandlerSignatureError",
    # Indexing
    "IndexContext",
    "Indexer",
    "IndexingPipeline",
    "PipelineResult",
    # Stores
    "StateStore",
    "StoreState",
    "InMemoryStateStore",
]
