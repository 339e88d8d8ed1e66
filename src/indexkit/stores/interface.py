"""
State store interface.

A state store is the persistence layer an indexer writes to. It holds named
collections, each an ordered, append-only list of records, and supports
capturing and restoring its complete contents.

This module provides:
- StoreState: Type alias for the full contents of a store
- StateStore: Abstract base class for store implementations
"""

from abc import ABC, abstractmethod
from typing import Any

# Collection name -> ordered records
StoreState = dict[str, list[Any]]


class StateStore(ABC):
    """
    Abstract base class for indexer state stores.

    Implementations must guarantee snapshot isolation: values returned by
    ``get_state()`` and values passed to ``set_state()`` never share
    mutable structure with the live store.
    """

    @abstractmethod
    async def save(self, collection: str, record: Any) -> None:
        """
        Append a record to a collection, creating the collection on first use.

        Args:
            collection: Name of the collection
            record: Record to append
        """
        pass

    @abstractmethod
    async def get_state(self) -> StoreState:
        """
        Return an independent copy of every collection and its records.

        Returns:
            Mapping of collection name to its ordered records
        """
        pass

    @abstractmethod
    async def set_state(self, new_state: dict[str, Any]) -> None:
        """
        Replace all collections with a copy of ``new_state``.

        Args:
            new_state: Mapping of collection name to records
        """
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Discard all collections."""
        pass


__all__ = ["StateStore", "StoreState"]
