"""
Shared pytest fixtures for the indexkit library tests.

This module provides:
- Event fixtures (event1, event2, transfer_events)
- Store fixtures (store, mock_tracer)
- Environment fixtures (env, token_env)

All fixtures are function scoped so every test gets fresh state.
"""

from __future__ import annotations

import pytest

from indexkit.events.base import BlockEvent
from indexkit.observability import MockTracer
from indexkit.stores.in_memory import InMemoryStateStore
from indexkit.testing import EventBuilder, TestEnvironment
from tests.fixtures import TokenIndexer, transfer

# =============================================================================
# Event Fixtures
# =============================================================================


@pytest.fixture
def event1() -> BlockEvent:
    """Transfer of 100 at block 1."""
    return (
        EventBuilder()
        .block(1)
        .with_address("0x123")
        .with_data({"type": "Transfer", "amount": 100})
        .build()
    )


@pytest.fixture
def event2() -> BlockEvent:
    """Transfer of 50 at block 2."""
    return (
        EventBuilder()
        .block(2)
        .with_address("0x123")
        .with_data({"type": "Transfer", "amount": 50})
        .build()
    )


@pytest.fixture
def transfer_events() -> list[BlockEvent]:
    """Three transfers with distinct blocks, deliberately not in block order."""
    return [transfer(3, 30), transfer(1, 10), transfer(2, 20)]


# =============================================================================
# Store Fixtures
# =============================================================================


@pytest.fixture
def mock_tracer() -> MockTracer:
    """Tracer that records spans."""
    return MockTracer()


@pytest.fixture
def store() -> InMemoryStateStore:
    """Empty in-memory store with tracing disabled."""
    return InMemoryStateStore(enable_tracing=False)


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture
def env() -> TestEnvironment:
    """Fresh environment with the reference indexer."""
    return TestEnvironment()


@pytest.fixture
def token_env() -> TestEnvironment:
    """Fresh environment with TokenIndexer."""
    return TestEnvironment(TokenIndexer())
