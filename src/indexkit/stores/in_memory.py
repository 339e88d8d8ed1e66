"""
In-memory state store implementation.

The mock persistence layer used by TestEnvironment. All state lives in a
dictionary of lists and is lost when the store is garbage collected.
"""

import asyncio
import copy
import logging
from typing import Any

from indexkit.exceptions import MalformedStateError
from indexkit.observability import (
    ATTR_COLLECTION,
    ATTR_COLLECTION_COUNT,
    ATTR_COLLECTIONS_SKIPPED,
    Tracer,
    create_tracer,
)
from indexkit.stores.interface import StateStore, StoreState

logger = logging.getLogger(__name__)


def _is_record_sequence(value: Any) -> bool:
    """True for values a collection can be restored from (list or tuple)."""
    return isinstance(value, (list, tuple))


class InMemoryStateStore(StateStore):
    """
    In-memory implementation of the state store.

    Collections are kept in creation order. Every record is deep-copied on
    the way in (``save``, ``set_state``) and on the way out (``get_state``,
    ``get_collection``), so no caller ever holds a reference into the live
    store.

    Restore leniency:
        ``set_state`` skips entries whose value is not a list or tuple.
        Pass ``strict_restore=True`` to raise MalformedStateError instead.

    Thread-safety:
        Uses an asyncio.Lock so that no two operations interleave within a
        single event loop.

    Example:
        >>> store = InMemoryStateStore()
        >>> await store.save("events", {"blockNumber": 1})
        >>> snapshot = await store.get_state()
        >>> await store.save("events", {"blockNumber": 2})
        >>> await store.set_state(snapshot)
        >>> await store.count("events")
        1
    """

    def __init__(
        self,
        *,
        strict_restore: bool = False,
        tracer: Tracer | None = None,
        enable_tracing: bool = True,
    ) -> None:
        """
        Initialize an empty store.

        Args:
            strict_restore: Raise MalformedStateError from ``set_state`` for
                non-sequence entries instead of skipping them.
            tracer: Optional custom Tracer instance. If not provided, one is
                created based on enable_tracing setting.
            enable_tracing: If True and OpenTelemetry is available, emit traces.
                Ignored if tracer is explicitly provided.
        """
        self._tracer = tracer or create_tracer(__name__, enable_tracing)
        self._enable_tracing = self._tracer.enabled
        self._strict_restore = strict_restore
        self._collections: dict[str, list[Any]] = {}
        self._lock: asyncio.Lock = asyncio.Lock()

    async def save(self, collection: str, record: Any) -> None:
        with self._tracer.span(
            "indexkit.store.save",
            {ATTR_COLLECTION: collection},
        ):
            async with self._lock:
                self._collections.setdefault(collection, []).append(copy.deepcopy(record))

    async def get_state(self) -> StoreState:
        with self._tracer.span(
            "indexkit.store.get_state",
            {ATTR_COLLECTION_COUNT: len(self._collections)},
        ):
            async with self._lock:
                return copy.deepcopy(self._collections)

    async def set_state(self, new_state: dict[str, Any]) -> None:
        with self._tracer.span(
            "indexkit.store.set_state",
            {ATTR_COLLECTION_COUNT: len(new_state)},
        ) as span:
            async with self._lock:
                restored: dict[str, list[Any]] = {}
                skipped: list[str] = []
                for name, value in new_state.items():
                    if _is_record_sequence(value):
                        restored[name] = list(copy.deepcopy(value))
                        continue
                    # Non-sequence entries are not collections
                    if self._strict_restore:
                        raise MalformedStateError(name, type(value).__name__)
                    skipped.append(name)

                self._collections = restored

            if skipped:
                logger.debug(
                    "Skipped %d non-sequence collection(s) during restore: %s",
                    len(skipped),
                    ", ".join(skipped),
                    extra={"skipped_collections": skipped},
                )
            if span is not None:
                span.set_attribute(ATTR_COLLECTIONS_SKIPPED, len(skipped))

    async def clear(self) -> None:
        with self._tracer.span("indexkit.store.clear"):
            async with self._lock:
                self._collections = {}

    async def get_collection(self, collection: str) -> list[Any]:
        """
        Return a copy of one collection's records.

        Args:
            collection: Name of the collection

        Returns:
            The records in insertion order, or an empty list if the
            collection has never been written
        """
        async with self._lock:
            return copy.deepcopy(self._collections.get(collection, []))

    async def collection_names(self) -> list[str]:
        """Return collection names in creation order."""
        async with self._lock:
            return list(self._collections)

    async def count(self, collection: str) -> int:
        """Return the number of records in a collection (0 if missing)."""
        async with self._lock:
            return len(self._collections.get(collection, []))

    def __repr__(self) -> str:
        sizes = {name: len(records) for name, records in self._collections.items()}
        return f"InMemoryStateStore(collections={sizes})"


__all__ = ["InMemoryStateStore"]
