"""Unit tests for the state assertion helpers."""

import pytest

from indexkit.exceptions import StateMismatchError
from indexkit.testing import assert_collection, assert_event_sequence, assert_state_equal
from tests.fixtures import create_event, transfer


class TestAssertStateEqual:
    def test_equal_states_pass(self) -> None:
        assert_state_equal({"events": [{"a": 1}]}, {"events": [{"a": 1}]})

    def test_key_order_is_irrelevant(self) -> None:
        assert_state_equal({"a": [], "b": [1]}, {"b": [1], "a": []})

    def test_record_order_matters(self) -> None:
        with pytest.raises(StateMismatchError):
            assert_state_equal({"events": [1, 2]}, {"events": [2, 1]})

    def test_extra_collection_fails(self) -> None:
        with pytest.raises(StateMismatchError):
            assert_state_equal({"events": [], "extra": []}, {"events": []})

    def test_message_renders_json(self) -> None:
        with pytest.raises(StateMismatchError) as exc_info:
            assert_state_equal({"events": [{"a": 1}]}, {"events": []})

        message = str(exc_info.value)
        assert 'Expected: {"events": []}' in message
        assert 'Got:      {"events": [{"a": 1}]}' in message

    def test_unserializable_values_fall_back_to_repr(self) -> None:
        marker = object()
        with pytest.raises(StateMismatchError) as exc_info:
            assert_state_equal({"events": [marker]}, {"events": []})

        assert repr(marker) in str(exc_info.value)


class TestAssertCollection:
    def test_matching_collection(self) -> None:
        assert_collection({"events": [1, 2], "other": [3]}, "events", [1, 2])

    def test_missing_collection_equals_empty(self) -> None:
        assert_collection({}, "events", [])

    def test_length_mismatch(self) -> None:
        with pytest.raises(AssertionError, match="length mismatch: expected 1 record"):
            assert_collection({"events": [1, 2]}, "events", [1])

    def test_record_mismatch_reports_position(self) -> None:
        with pytest.raises(AssertionError, match="record mismatch at position 1"):
            assert_collection({"events": [{"a": 1}, {"a": 2}]}, "events", [{"a": 1}, {"a": 3}])


class TestAssertEventSequence:
    def test_matching_payloads(self) -> None:
        events = [transfer(1, 10), transfer(2, 20)]
        assert_event_sequence(
            events,
            [{"type": "Transfer", "amount": 10}, {"type": "Transfer", "amount": 20}],
        )

    def test_mismatch(self) -> None:
        with pytest.raises(AssertionError, match="Event sequence mismatch"):
            assert_event_sequence([create_event(data={"a": 1})], [{"a": 2}])

    def test_order_matters(self) -> None:
        events = [create_event(block=1, data={"n": 1}), create_event(block=2, data={"n": 2})]
        with pytest.raises(AssertionError):
            assert_event_sequence(events, [{"n": 2}, {"n": 1}])
