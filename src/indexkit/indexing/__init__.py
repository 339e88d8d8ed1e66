"""
Event processing for indexkit.

Example:
    >>> from indexkit.indexing import Indexer, IndexingPipeline
    >>> result = await IndexingPipeline(Indexer(), store).run(events)
"""

from indexkit.indexing.context import IndexContext
from indexkit.indexing.indexer import Indexer
from indexkit.indexing.pipeline import IndexingPipeline, PipelineResult

__all__ = [
    "IndexContext",
    "Indexer",
    "IndexingPipeline",
    "PipelineResult",
]
