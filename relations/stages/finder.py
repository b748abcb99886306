"""
Related content discovery: score every candidate against a source item.

Pipeline for one source:
1) load and enrich the source (NotFoundError if missing),
2) fetch the candidate pool and enrich every candidate concurrently,
3) score, filter by threshold, sort (similarity desc, id asc), truncate,
4) classify the survivors.

A candidate that fails to enrich or score is logged and dropped.
StoreUnavailableError always propagates.
"""

import asyncio
import logging
from typing import List, Optional, Tuple

from ..errors import ItemProcessingError, NotFoundError, StoreUnavailableError
from ..models.config import RelationsConfig, resolve_config
from ..models.content import ContentItem
from ..models.enriched import EnrichedContent, enrich
from ..models.options import FindOptions
from ..models.results import RelatedContentResult
from ..stores.base import ContentStore, MetadataStore
from .classifier import classify
from .similarity import similarity

logger = logging.getLogger(__name__)


class RelatedContentFinder:
    """Finds, scores and classifies items related to a source item."""

    def __init__(
        self,
        content_store: ContentStore,
        metadata_store: MetadataStore,
        config: Optional[RelationsConfig] = None,
    ):
        self.content_store = content_store
        self.metadata_store = metadata_store
        self.config = resolve_config(config)

    async def enrich_item(self, item: ContentItem, include_metadata: bool = True) -> EnrichedContent:
        """Merge one item with its metadata record (or defaults)."""
        metadata = None
        if include_metadata:
            metadata = await self.metadata_store.get_by_content_id(item.id)
        return enrich(item, metadata, self.config)

    async def load(self, content_id: str, include_metadata: bool = True) -> EnrichedContent:
        """Fetch and enrich one item; NotFoundError if the content store has no such id."""
        item = await self.content_store.get_by_id(content_id)
        if item is None:
            raise NotFoundError(content_id)
        return await self.enrich_item(item, include_metadata)

    async def _enrich_and_score(
        self,
        source: EnrichedContent,
        candidate: ContentItem,
        options: FindOptions,
    ) -> Tuple[EnrichedContent, float]:
        """Enrich one candidate and score it; any non-store failure becomes ItemProcessingError."""
        try:
            enriched = await self.enrich_item(candidate, options.include_metadata)
            return enriched, similarity(source, enriched, self.config)
        except StoreUnavailableError:
            raise
        except Exception as exc:
            raise ItemProcessingError(candidate.id, str(exc)) from exc

    async def _score_candidate(
        self,
        source: EnrichedContent,
        candidate: ContentItem,
        options: FindOptions,
    ) -> Optional[RelatedContentResult]:
        try:
            enriched, score = await self._enrich_and_score(source, candidate, options)
        except ItemProcessingError as exc:
            logger.warning(
                "[finder] CANDIDATE_DROPPED source=%s candidate=%s error=%s",
                source.id, candidate.id, exc,
            )
            return None
        if score < options.threshold:
            return None
        return RelatedContentResult(
            content=enriched,
            similarity=score,
            relationship_type=classify(
                source, enriched, score, threshold=options.threshold, config=self.config
            ),
        )

    async def find_related(self, source_id: str, options: FindOptions) -> List[RelatedContentResult]:
        """
        Related items for source_id, best first.

        Every result has similarity >= options.threshold; at most options.limit are returned.
        """
        source = await self.load(source_id, options.include_metadata)
        candidates = await self.content_store.find_candidates(source_id)
        eligible = [c for c in candidates if c.processed and c.id != source_id]

        scored = await asyncio.gather(
            *(self._score_candidate(source, c, options) for c in eligible)
        )
        results = [r for r in scored if r is not None]
        results.sort(key=lambda r: (-r.similarity, r.content.id))
        results = results[: options.limit]
        logger.debug(
            "[finder] FIND_RELATED source=%s candidates=%d matched=%d threshold=%.2f limit=%d",
            source_id, len(eligible), len(results), options.threshold, options.limit,
        )
        return results
