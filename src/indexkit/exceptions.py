"""Library exceptions for the indexkit package."""

from typing import Any


class IndexKitError(Exception):
    """Base exception for indexkit library."""

    pass


class IncompleteEventError(IndexKitError, ValueError):
    """Raised when an EventBuilder is asked to build before all fields are set."""

    def __init__(self, missing_fields: list[str]) -> None:
        self.missing_fields = missing_fields
        super().__init__(f"Incomplete event: missing {', '.join(missing_fields)}")


class StateMismatchError(IndexKitError, AssertionError):
    """
    Raised when the stored state differs from the expected state.

    Subclasses AssertionError so that a mismatch fails the enclosing test
    the same way a bare ``assert`` would.

    Attributes:
        expected: The state the test expected
        actual: The state found in the store
    """

    def __init__(self, expected: Any, actual: Any, expected_repr: str, actual_repr: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"State mismatch:\n  Expected: {expected_repr}\n  Got:      {actual_repr}")


class MalformedStateError(IndexKitError, TypeError):
    """
    Raised by a strict restore when a collection value is not a sequence.

    The default restore skips such entries; this error is only raised when
    strict restore has been switched on.
    """

    def __init__(self, collection: str, value_type: str) -> None:
        self.collection = collection
        self.value_type = value_type
        super().__init__(
            f"Cannot restore collection '{collection}': expected a list of records, "
            f"got {value_type}"
        )


class RepeatedTestFailure(IndexKitError, AssertionError):
    """Raised when one iteration of a repeated test fails."""

    def __init__(self, iteration: int, error: BaseException) -> None:
        self.iteration = iteration
        self.error = error
        super().__init__(f"Test failed on iteration {iteration}: {error}")
