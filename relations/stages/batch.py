"""
Batch relationship discovery.

Items are processed in chunks of batch_size; items inside one chunk run
concurrently, chunks run one after another. A failure on one item is recorded
in the BatchResult and never aborts the batch.
"""

import asyncio
import logging
from typing import List, Optional, Sequence, Tuple

from ..models.config import RelationsConfig, resolve_config
from ..models.options import BatchOptions, FindOptions
from ..models.results import BatchError, BatchResult, RelatedContentResult
from ..stores.base import MetadataStore
from .finder import RelatedContentFinder

logger = logging.getLogger(__name__)


async def upsert_links(
    metadata_store: MetadataStore,
    source_id: str,
    related: Sequence[RelatedContentResult],
) -> int:
    """Write one link per related result onto source_id's record in one store call. Returns links written."""
    links = [(r.content.id, r.relationship_type, r.similarity) for r in related]
    if links:
        await metadata_store.upsert_related_links(source_id, links)
    return len(links)


def chunked(items: Sequence[str], size: int) -> List[Sequence[str]]:
    return [items[i:i + size] for i in range(0, len(items), size)]


class BatchProcessor:
    def __init__(
        self,
        finder: RelatedContentFinder,
        metadata_store: MetadataStore,
        config: Optional[RelationsConfig] = None,
    ):
        self.finder = finder
        self.metadata_store = metadata_store
        self.config = resolve_config(config or finder.config)

    async def _process_one(self, content_id: str, options: BatchOptions) -> Tuple[str, Optional[str]]:
        """Returns (content_id, None) on success or (content_id, error message)."""
        try:
            related = await self.finder.find_related(
                content_id,
                FindOptions(threshold=options.threshold, limit=options.limit),
            )
            if options.update_metadata:
                await upsert_links(self.metadata_store, content_id, related)
        except Exception as exc:
            logger.warning("[batch] ITEM_FAILED id=%s error=%s", content_id, exc)
            return content_id, str(exc) or type(exc).__name__
        return content_id, None

    async def process(self, content_ids: Sequence[str], options: BatchOptions) -> BatchResult:
        result = BatchResult()
        ids = list(content_ids)
        for index, chunk in enumerate(chunked(ids, options.batch_size)):
            outcomes = await asyncio.gather(*(self._process_one(cid, options) for cid in chunk))
            for content_id, error in outcomes:
                if error is None:
                    result.processed += 1
                else:
                    result.failed += 1
                    result.errors.append(BatchError(content_id=content_id, error=error))
            logger.debug(
                "[batch] CHUNK_DONE index=%d size=%d processed=%d failed=%d",
                index, len(chunk), result.processed, result.failed,
            )
        logger.info(
            "[batch] BATCH_DONE total=%d processed=%d failed=%d",
            len(ids), result.processed, result.failed,
        )
        return result
