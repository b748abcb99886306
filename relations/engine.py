"""
RelatedContentEngine: the public entry point of the relations package.

Wires the finder, graph builder and batch processor to a content store and a
metadata store. Every operation validates its options before touching a store.
"""

import asyncio
import logging
from typing import List, Optional, Sequence

import numpy as np

from .errors import RelationsError, StoreUnavailableError
from .models.config import RelationsConfig, resolve_config
from .models.options import (
    BatchOptions,
    FindOptions,
    GraphOptions,
    NetworkStatsOptions,
    build_options,
)
from .models.results import (
    BatchResult,
    NetworkSize,
    NetworkStats,
    RelatedContentResult,
    SimilarityBreakdown,
    VisualizationGraph,
)
from .stages.batch import BatchProcessor, upsert_links
from .stages.classifier import classify
from .stages.finder import RelatedContentFinder
from .stages.graph_builder import GraphBuilder
from .stages.similarity import similarity_breakdown
from .stores.base import ContentStore, MetadataStore

logger = logging.getLogger(__name__)


class RelatedContentEngine:
    """
    Content relationship discovery over pluggable stores.

    Usage:
        engine = RelatedContentEngine(content_store, metadata_store)
        related = await engine.find_related("item-1", threshold=0.4, limit=5)
    """

    def __init__(
        self,
        content_store: ContentStore,
        metadata_store: MetadataStore,
        config: Optional[RelationsConfig] = None,
    ):
        self.config = resolve_config(config)
        self.content_store = content_store
        self.metadata_store = metadata_store
        self.finder = RelatedContentFinder(content_store, metadata_store, self.config)
        self.graph_builder = GraphBuilder(self.finder, self.config)
        self.batch_processor = BatchProcessor(self.finder, metadata_store, self.config)

    async def find_related(
        self,
        source_id: str,
        threshold: Optional[float] = None,
        limit: Optional[int] = None,
        include_metadata: bool = True,
    ) -> List[RelatedContentResult]:
        options = build_options(
            FindOptions, self.config,
            threshold=threshold, limit=limit, include_metadata=include_metadata,
        )
        return await self.finder.find_related(source_id, options)

    async def compare(self, content_id_1: str, content_id_2: str) -> SimilarityBreakdown:
        """Composite similarity, relationship type and all sub-scores for one pair."""
        a, b = await asyncio.gather(
            self.finder.load(content_id_1),
            self.finder.load(content_id_2),
        )
        scores, score = similarity_breakdown(a, b, self.config)
        return SimilarityBreakdown(
            content_id_1=content_id_1,
            content_id_2=content_id_2,
            similarity=score,
            relationship_type=classify(a, b, score, config=self.config),
            breakdown=scores,
        )

    async def update_related_metadata(
        self,
        content_id: str,
        threshold: Optional[float] = None,
        limit: Optional[int] = None,
    ) -> int:
        """Discover related items and persist one link per result. Returns links written."""
        options = build_options(FindOptions, self.config, threshold=threshold, limit=limit)
        related = await self.finder.find_related(content_id, options)
        written = await upsert_links(self.metadata_store, content_id, related)
        logger.info("[engine] METADATA_UPDATED id=%s links=%d", content_id, written)
        return written

    async def build_graph(
        self,
        root_id: str,
        max_depth: Optional[int] = None,
        max_nodes: Optional[int] = None,
        include_metrics: bool = True,
    ) -> VisualizationGraph:
        options = build_options(
            GraphOptions, self.config,
            max_depth=max_depth, max_nodes=max_nodes, include_metrics=include_metrics,
        )
        return await self.graph_builder.build(root_id, options)

    async def batch_process(
        self,
        content_ids: Sequence[str],
        batch_size: Optional[int] = None,
        threshold: Optional[float] = None,
        update_metadata: bool = True,
        limit: Optional[int] = None,
    ) -> BatchResult:
        options = build_options(
            BatchOptions, self.config,
            batch_size=batch_size, threshold=threshold, limit=limit,
            update_metadata=update_metadata,
        )
        return await self.batch_processor.process(content_ids, options)

    async def _graph_or_none(self, root_id: str, options: GraphOptions) -> Optional[VisualizationGraph]:
        try:
            return await self.graph_builder.build(root_id, options)
        except StoreUnavailableError:
            raise
        except RelationsError as exc:
            logger.warning("[engine] NETWORK_SKIPPED root=%s error=%s", root_id, exc)
            return None

    async def network_stats(
        self,
        content_ids: Optional[Sequence[str]] = None,
        max_depth: Optional[int] = None,
        max_nodes: Optional[int] = None,
    ) -> NetworkStats:
        """
        Aggregate metrics over the graphs rooted at content_ids.

        With no ids, roots are taken from the processed catalog. At most
        network_stats_max_roots graphs are built; roots whose graph cannot be
        built are skipped.
        """
        stats_options = build_options(
            NetworkStatsOptions, self.config, max_depth=max_depth, max_nodes=max_nodes
        )
        if content_ids is None:
            candidates = await self.content_store.find_candidates(None)
            roots = [c.id for c in candidates[: self.config.network_stats_candidate_roots]]
        else:
            roots = list(content_ids)
        roots = roots[: self.config.network_stats_max_roots]

        graph_options = GraphOptions(
            max_depth=stats_options.max_depth,
            max_nodes=stats_options.max_nodes,
            include_metrics=True,
        )
        graphs = await asyncio.gather(*(self._graph_or_none(r, graph_options) for r in roots))
        built = [g for g in graphs if g is not None and g.metrics is not None]

        stats = NetworkStats(total_networks=len(built))
        if not built:
            return stats
        stats.total_nodes = sum(g.metrics.node_count for g in built)
        stats.total_edges = sum(g.metrics.edge_count for g in built)
        stats.avg_density = float(np.mean([g.metrics.density for g in built]))
        stats.avg_clustering_coefficient = float(
            np.mean([g.metrics.clustering_coefficient for g in built])
        )
        stats.network_sizes = [
            NetworkSize(
                root_id=g.root_id,
                node_count=g.metrics.node_count,
                edge_count=g.metrics.edge_count,
                density=g.metrics.density,
            )
            for g in built
        ]
        logger.info(
            "[engine] NETWORK_STATS roots=%d built=%d nodes=%d edges=%d",
            len(roots), len(built), stats.total_nodes, stats.total_edges,
        )
        return stats
