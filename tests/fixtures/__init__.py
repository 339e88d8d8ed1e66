"""
Shared test fixtures for the indexkit library.

Usage:
    from tests.fixtures import TokenIndexer, create_event, transfer
"""

from tests.fixtures.events import TOKEN_ADDRESS, approval, create_event, transfer
from tests.fixtures.indexers import (
    FailingIndexer,
    LargeTransferIndexer,
    MutatingIndexer,
    RecordingIndexer,
    TokenIndexer,
)

__all__ = [
    "TOKEN_ADDRESS",
    "create_event",
    "transfer",
    "approval",
    "TokenIndexer",
    "LargeTransferIndexer",
    "RecordingIndexer",
    "FailingIndexer",
    "MutatingIndexer",
]
