"""
Test utilities for indexing logic.

Components:
    EventBuilder: Fluent builder for block events
    TestEnvironment: Queue events, run the indexer, capture/restore and assert state
    Assertions: assert_state_equal, assert_collection, assert_event_sequence
    BDD helpers: given_events, when_indexed, then_state, then_collection, then_collection_length
    StateStoreConformanceSuite: Reusable contract tests for StateStore implementations

Example:
    >>> from indexkit.testing import EventBuilder, TestEnvironment
    >>>
    >>> env = TestEnvironment()
    >>> event = EventBuilder().block(1).with_address("0x123").with_data({"type": "Transfer"}).build()
    >>> await env.mock_event(event)
    >>> await env.run_indexer()
    >>> snapshot = await env.get_state()

Note:
    This module is intended for test code only.
"""

from indexkit.testing.assertions import (
    assert_collection,
    assert_event_sequence,
    assert_state_equal,
)
from indexkit.testing.bdd import (
    given_events,
    then_collection,
    then_collection_length,
    then_state,
    when_indexed,
)
from indexkit.testing.builder import EventBuilder
from indexkit.testing.conformance import StateStoreConformanceSuite
from indexkit.testing.environment import EnvironmentConfig, TestEnvironment
from indexkit.testing.utils import repeat_test

__all__ = [
    # Core classes
    "EventBuilder",
    "TestEnvironment",
    "EnvironmentConfig",
    "StateStoreConformanceSuite",
    # Assertions
    "assert_state_equal",
    "assert_collection",
    "assert_event_sequence",
    # BDD helpers
    "given_events",
    "when_indexed",
    "then_state",
    "then_collection",
    "then_collection_length",
    # Utilities
    "repeat_test",
]
