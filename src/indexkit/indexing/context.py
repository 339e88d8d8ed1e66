"""Per-event context handed to indexer handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from indexkit.events.base import BlockEvent
from indexkit.stores.interface import StateStore


@dataclass(frozen=True)
class IndexContext:
    """
    What a handler sees while processing one event.

    Attributes:
        event: The event being processed
        store: The store the run writes to
        position: Zero-based position of the event in the run
    """

    event: BlockEvent
    store: StateStore
    position: int = 0

    async def save(self, collection: str, record: Any) -> None:
        """Append a record to a collection of the run's store."""
        await self.store.save(collection, record)


__all__ = ["IndexContext"]
