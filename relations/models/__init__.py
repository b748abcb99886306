"""Data models for the relations engine."""

from .config import DEFAULT_CONFIG, RelationsConfig, resolve_config
from .content import AuthorRef, ContentItem, ContentType, ensure_content_list
from .enriched import EnrichedContent, enrich
from .metadata import ContentMetadataRecord, RelatedContentLink, RelationshipType
from .options import BatchOptions, FindOptions, GraphOptions, NetworkStatsOptions, build_options
from .results import (
    BatchError,
    BatchResult,
    GraphEdge,
    GraphNode,
    NetworkMetrics,
    NetworkSize,
    NetworkStats,
    RelatedContentResult,
    SimilarityBreakdown,
    SimilarityScores,
    VisualizationGraph,
)

__all__ = [
    "DEFAULT_CONFIG",
    "RelationsConfig",
    "resolve_config",
    "AuthorRef",
    "ContentItem",
    "ContentType",
    "ensure_content_list",
    "EnrichedContent",
    "enrich",
    "ContentMetadataRecord",
    "RelatedContentLink",
    "RelationshipType",
    "BatchOptions",
    "FindOptions",
    "GraphOptions",
    "NetworkStatsOptions",
    "build_options",
    "BatchError",
    "BatchResult",
    "GraphEdge",
    "GraphNode",
    "NetworkMetrics",
    "NetworkSize",
    "NetworkStats",
    "RelatedContentResult",
    "SimilarityBreakdown",
    "SimilarityScores",
    "VisualizationGraph",
]
