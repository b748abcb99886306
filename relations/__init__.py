"""
Content relationship and discovery engine.

- models/: ContentItem, ContentMetadataRecord, RelationsConfig, options and results
- stages/: similarity, classifier, finder, graph builder, metrics, batch
- stores/: ContentStore / MetadataStore protocols with in-memory and JSON implementations
- engine: RelatedContentEngine, the single entry point
"""

from .engine import RelatedContentEngine
from .errors import (
    ItemProcessingError,
    NotFoundError,
    RelationsError,
    StoreUnavailableError,
    ValidationError,
)
from .models import (
    DEFAULT_CONFIG,
    BatchResult,
    ContentItem,
    ContentMetadataRecord,
    ContentType,
    EnrichedContent,
    NetworkMetrics,
    NetworkStats,
    RelatedContentResult,
    RelationsConfig,
    RelationshipType,
    SimilarityBreakdown,
    VisualizationGraph,
    enrich,
)
from .stages import classify, network_metrics, similarity
from .stores import (
    ContentStore,
    InMemoryContentStore,
    InMemoryMetadataStore,
    JsonContentStore,
    JsonMetadataStore,
    MetadataStore,
)

__all__ = [
    "RelatedContentEngine",
    "RelationsError",
    "NotFoundError",
    "ValidationError",
    "ItemProcessingError",
    "StoreUnavailableError",
    "DEFAULT_CONFIG",
    "RelationsConfig",
    "ContentItem",
    "ContentType",
    "ContentMetadataRecord",
    "RelationshipType",
    "EnrichedContent",
    "enrich",
    "RelatedContentResult",
    "SimilarityBreakdown",
    "VisualizationGraph",
    "NetworkMetrics",
    "NetworkStats",
    "BatchResult",
    "similarity",
    "classify",
    "network_metrics",
    "ContentStore",
    "MetadataStore",
    "InMemoryContentStore",
    "InMemoryMetadataStore",
    "JsonContentStore",
    "JsonMetadataStore",
]
