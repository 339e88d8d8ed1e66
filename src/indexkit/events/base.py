"""
Block event model.

A BlockEvent is an immutable record of something that happened on chain at a
given block height, emitted by a contract address and carrying an arbitrary
payload. Events are the only input an indexing run consumes.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, field_validator


class BlockEvent(BaseModel):
    """
    One occurrence to be indexed.

    Attributes:
        block: Block height the event was emitted at (positive integer)
        address: Identifier of the emitting contract (non-empty)
        data: Event payload; any structured value except None. Deep-copied
            on construction

    Example:
        >>> event = BlockEvent(
        ...     block=1,
        ...     address="0x123",
        ...     data={"type": "Transfer", "amount": 100},
        ... )
        >>> event.kind
        'Transfer'
    """

    model_config = ConfigDict(frozen=True)

    block: PositiveInt = Field(
        ...,
        description="Block height the event was emitted at",
    )
    address: str = Field(
        ...,
        min_length=1,
        description="Address of the emitting contract",
    )
    data: Any = Field(
        ...,
        description="Arbitrary event payload",
    )

    @field_validator("data")
    @classmethod
    def _copy_data(cls, value: Any) -> Any:
        # Detach from the caller's value
        if value is None:
            raise ValueError("data must not be None")
        return copy.deepcopy(value)

    @property
    def kind(self) -> str | None:
        """
        Event kind taken from the payload's ``type`` entry.

        Returns:
            The ``type`` value when the payload is a mapping holding a string
            ``type``, None otherwise.
        """
        if isinstance(self.data, Mapping):
            kind = self.data.get("type")
            if isinstance(kind, str):
                return kind
        return None

    def __str__(self) -> str:
        return f"BlockEvent(block={self.block}, address={self.address}, kind={self.kind})"


__all__ = ["BlockEvent"]
