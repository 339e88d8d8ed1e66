"""
Processing pipeline.

Feeds a list of events through an indexer, one at a time, in the order
given. Nothing is reordered, deduplicated or dropped, so the same event
list always produces the same writes.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from indexkit.events.base import BlockEvent
from indexkit.indexing.context import IndexContext
from indexkit.indexing.indexer import Indexer
from indexkit.observability import (
    ATTR_BLOCK_NUMBER,
    ATTR_EVENT_ADDRESS,
    ATTR_EVENT_COUNT,
    ATTR_EVENT_KIND,
    ATTR_HANDLER_COUNT,
    ATTR_INDEXER_NAME,
    Tracer,
    create_tracer,
)
from indexkit.stores.interface import StateStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """
    Outcome of one pipeline run.

    Attributes:
        events_processed: Number of events fed to the indexer
        handler_invocations: Total number of handler calls across all events
    """

    events_processed: int
    handler_invocations: int


class IndexingPipeline:
    """
    Applies events to a store through an indexer.

    The pipeline does not clear the store; callers that need a run to start
    from empty state clear it first.

    Example:
        >>> pipeline = IndexingPipeline(Indexer(), store)
        >>> result = await pipeline.run([event1, event2])
        >>> result.events_processed
        2
    """

    def __init__(
        self,
        indexer: Indexer,
        store: StateStore,
        *,
        tracer: Tracer | None = None,
        enable_tracing: bool = True,
    ) -> None:
        self._indexer = indexer
        self._store = store
        self._tracer = tracer or create_tracer(__name__, enable_tracing)
        self._enable_tracing = self._tracer.enabled

    @property
    def indexer(self) -> Indexer:
        return self._indexer

    @property
    def store(self) -> StateStore:
        return self._store

    async def run(self, events: Sequence[BlockEvent]) -> PipelineResult:
        """
        Process events strictly in order.

        A handler exception propagates unchanged; events after the failing
        one are not processed. Handlers receive a deep copy of each event,
        so ``events`` itself is never modified.

        Args:
            events: Events to process

        Returns:
            PipelineResult with counts for the run
        """
        indexer_name = type(self._indexer).__name__
        invocations = 0

        with self._tracer.span(
            "indexkit.pipeline.run",
            {
                ATTR_INDEXER_NAME: indexer_name,
                ATTR_EVENT_COUNT: len(events),
            },
        ):
            for position, event in enumerate(events):
                invocations += await self._process_event(event, position)

        logger.info(
            "Indexed %d event(s) with %s (%d handler invocation(s))",
            len(events),
            indexer_name,
            invocations,
            extra={
                "indexer": indexer_name,
                "events_processed": len(events),
                "handler_invocations": invocations,
            },
        )
        return PipelineResult(events_processed=len(events), handler_invocations=invocations)

    async def _process_event(self, event: BlockEvent, position: int) -> int:
        with self._tracer.span(
            "indexkit.pipeline.event",
            {
                ATTR_BLOCK_NUMBER: event.block,
                ATTR_EVENT_ADDRESS: event.address,
                ATTR_EVENT_KIND: event.kind or "",
            },
        ) as span:
            # Handlers get their own copy so the caller's event list replays unchanged
            context = IndexContext(
                event=event.model_copy(deep=True),
                store=self._store,
                position=position,
            )
            invoked = await self._indexer.handle(context)
            if span is not None:
                span.set_attribute(ATTR_HANDLER_COUNT, invoked)

        logger.debug(
            "Processed event at block %d (%d handler(s))",
            event.block,
            invoked,
            extra={
                "block": event.block,
                "address": event.address,
                "kind": event.kind,
                "position": position,
                "handlers": invoked,
            },
        )
        return invoked


__all__ = ["IndexingPipeline", "PipelineResult"]
