"""
Bounded breadth-first relationship graph for visualization.

Starting at the root, each BFS level is expanded with the finder (siblings
concurrently), then merged in frontier order so the output does not depend on
scheduling. Expansion stops at max_depth; node admission stops at max_nodes.
The root node is always present.
"""

import asyncio
import logging
from typing import Dict, List, Optional, Tuple

from ..errors import RelationsError, StoreUnavailableError
from ..models.config import RelationsConfig, resolve_config
from ..models.content import ContentType
from ..models.enriched import EnrichedContent
from ..models.options import FindOptions, GraphOptions
from ..models.results import GraphEdge, GraphNode, RelatedContentResult, VisualizationGraph
from ..utils.scores import clamp
from .finder import RelatedContentFinder
from .metrics import network_metrics

logger = logging.getLogger(__name__)

NODE_COLORS: Dict[str, str] = {
    ContentType.ARTICLE.value: "#3498db",
    ContentType.PAPER.value: "#e74c3c",
    ContentType.PODCAST.value: "#9b59b6",
    ContentType.VIDEO.value: "#f39c12",
    ContentType.SOCIAL.value: "#2ecc71",
    ContentType.NEWSLETTER.value: "#34495e",
    ContentType.BOOK.value: "#e67e22",
    ContentType.COURSE.value: "#1abc9c",
}
DEFAULT_NODE_COLOR = "#95a5a6"


def node_color(content_type) -> str:
    key = content_type.value if isinstance(content_type, ContentType) else str(content_type or "")
    return NODE_COLORS.get(key, DEFAULT_NODE_COLOR)


def node_size(content: EnrichedContent, config: Optional[RelationsConfig] = None) -> float:
    """
    Visual size from engagement and quality, clamped to [node_size_min, node_size_max].

    size = base + min(reads/10, 20) + min(saves/5, 15) + min(shares/3, 10)
           + relevance*10 + quality*10
    """
    config = resolve_config(config)
    size = config.node_size_base
    size += min(max(content.read_count, 0) / 10, 20)
    size += min(max(content.save_count, 0) / 5, 15)
    size += min(max(content.share_count, 0) / 3, 10)
    if content.relevance_score:
        size += content.relevance_score * 10
    size += content.quality_score * 10
    return clamp(size, config.node_size_min, config.node_size_max)


def _pair_key(a: str, b: str) -> Tuple[str, str]:
    return (a, b) if a <= b else (b, a)


class GraphBuilder:
    """Builds a VisualizationGraph by repeatedly invoking the finder outward from a root."""

    def __init__(self, finder: RelatedContentFinder, config: Optional[RelationsConfig] = None):
        self.finder = finder
        self.config = resolve_config(config or finder.config)

    def _make_node(self, content: EnrichedContent, depth: int) -> GraphNode:
        return GraphNode(
            id=content.id,
            label=content.title,
            size=node_size(content, self.config),
            color=node_color(content.content_type),
            content_type=content.content_type,
            depth=depth,
        )

    async def _expand(self, node_id: str) -> List[RelatedContentResult]:
        """Related items for a non-root node; a vanished or failing node becomes a leaf."""
        options = FindOptions(threshold=self.config.graph_threshold, limit=self.config.graph_limit)
        try:
            return await self.finder.find_related(node_id, options)
        except StoreUnavailableError:
            raise
        except RelationsError as exc:
            logger.warning("[graph] EXPAND_FAILED node=%s error=%s", node_id, exc)
            return []

    async def build(self, root_id: str, options: GraphOptions) -> VisualizationGraph:
        root = await self.finder.load(root_id)
        nodes: Dict[str, GraphNode] = {root_id: self._make_node(root, 0)}
        edges: Dict[Tuple[str, str], GraphEdge] = {}
        node_cap = max(options.max_nodes, 1)

        frontier = [root_id]
        depth = 0
        while frontier and depth < options.max_depth:
            if depth == 0:
                # Root errors propagate (NotFound / StoreUnavailable)
                expansions = [
                    await self.finder.find_related(
                        root_id,
                        FindOptions(threshold=self.config.graph_threshold, limit=self.config.graph_limit),
                    )
                ]
            else:
                expansions = await asyncio.gather(*(self._expand(n) for n in frontier))

            next_frontier: List[str] = []
            for source_id, related in zip(frontier, expansions):
                for result in related:
                    target_id = result.content.id
                    if target_id == source_id:
                        continue
                    if target_id not in nodes:
                        if len(nodes) >= node_cap:
                            continue
                        nodes[target_id] = self._make_node(result.content, depth + 1)
                        next_frontier.append(target_id)
                    key = _pair_key(source_id, target_id)
                    existing = edges.get(key)
                    if existing is None or result.similarity > existing.similarity:
                        edges[key] = GraphEdge(
                            source=existing.source if existing else source_id,
                            target=existing.target if existing else target_id,
                            similarity=result.similarity,
                            relationship_type=result.relationship_type,
                        )
            logger.debug(
                "[graph] LEVEL_DONE root=%s depth=%d frontier=%d nodes=%d edges=%d",
                root_id, depth, len(frontier), len(nodes), len(edges),
            )
            frontier = next_frontier
            depth += 1

        node_list = list(nodes.values())
        edge_list = list(edges.values())
        return VisualizationGraph(
            root_id=root_id,
            nodes=node_list,
            edges=edge_list,
            metrics=network_metrics(node_list, edge_list) if options.include_metrics else None,
        )
