"""Event model for indexkit."""

from indexkit.events.base import BlockEvent

__all__ = ["BlockEvent"]
