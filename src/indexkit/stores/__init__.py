"""
State stores for indexkit.

Example:
    >>> from indexkit.stores import InMemoryStateStore
    >>> store = InMemoryStateStore(enable_tracing=False)
"""

from indexkit.stores.in_memory import InMemoryStateStore
from indexkit.stores.interface import StateStore, StoreState

__all__ = [
    "StateStore",
    "StoreState",
    "InMemoryStateStore",
]
