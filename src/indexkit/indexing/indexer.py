"""
Indexer base class.

An indexer turns events into store writes. Handlers are async methods
decorated with @handles; every handler whose selector matches an event is
invoked for it. The base class carries the reference handler that records
every event in the ``events`` collection.
"""

from __future__ import annotations

from typing import Any, ClassVar

from indexkit.events.base import BlockEvent
from indexkit.handlers.decorators import ANY_EVENT, handles
from indexkit.handlers.registry import HandlerRegistry
from indexkit.indexing.context import IndexContext


class Indexer:
    """
    Indexer with declarative handlers.

    Subclasses add behavior by declaring more handlers. Inherited handlers
    always run first and are unaffected by the additions, so a new rule
    for one event kind never changes what is written for another.

    Attributes:
        events_collection: Collection the reference handler appends to

    Example:
        >>> class TokenIndexer(Indexer):
        ...     @handles("Transfer")
        ...     async def _on_transfer(self, context: IndexContext, event: BlockEvent) -> None:
        ...         await context.save("transfers", {
        ...             "block": event.block,
        ...             "amount": event.data["amount"],
        ...         })
        ...
        ...     @handles("Approval")
        ...     async def _on_approval(self, context: IndexContext, event: BlockEvent) -> None:
        ...         await context.save("approvals", event.data)
    """

    events_collection: ClassVar[str] = "events"

    def __init__(self) -> None:
        self._handler_registry = HandlerRegistry(self)

    @handles(ANY_EVENT)
    async def _record_event(self, context: IndexContext, event: BlockEvent) -> None:
        await context.save(self.events_collection, self.event_record(event))

    def event_record(self, event: BlockEvent) -> dict[str, Any]:
        """Record stored in ``events_collection`` for an event."""
        return {"blockNumber": event.block, "data": event.data}

    async def handle(self, context: IndexContext) -> int:
        """
        Process the context's event with every matching handler.

        Returns:
            Number of handlers invoked
        """
        return await self._handler_registry.dispatch(context.event, context)

    @property
    def handler_registry(self) -> HandlerRegistry:
        return self._handler_registry

    def __repr__(self) -> str:
        return f"{type(self).__name__}(handlers={self._handler_registry.handler_names})"


__all__ = ["Indexer"]
