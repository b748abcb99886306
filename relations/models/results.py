"""
Result models — what the finder, graph builder, metrics, and batch stages produce.

All ephemeral: returned to the caller, never persisted by the engine.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from .content import ContentType
from .enriched import EnrichedContent
from .metadata import RelationshipType


class RelatedContentResult(BaseModel):
    content: EnrichedContent
    similarity: float = Field(ge=0.0, le=1.0)
    relationship_type: RelationshipType


class SimilarityScores(BaseModel):
    """The five sub-scores behind one composite similarity."""

    topic: float
    category: float
    author: float
    temporal: float
    text: float


class SimilarityBreakdown(BaseModel):
    content_id_1: str
    content_id_2: str
    similarity: float
    relationship_type: RelationshipType
    breakdown: SimilarityScores


class GraphNode(BaseModel):
    id: str
    label: str
    size: float
    color: str
    content_type: ContentType
    depth: int = 0


class GraphEdge(BaseModel):
    source: str
    target: str
    similarity: float
    relationship_type: RelationshipType


class NetworkMetrics(BaseModel):
    node_count: int = 0
    edge_count: int = 0
    density: float = 0.0
    avg_degree: float = 0.0
    max_degree: int = 0
    clustering_coefficient: float = 0.0


class VisualizationGraph(BaseModel):
    root_id: str
    nodes: List[GraphNode]
    edges: List[GraphEdge]
    metrics: Optional[NetworkMetrics] = None


class BatchError(BaseModel):
    content_id: str
    error: str


class BatchResult(BaseModel):
    processed: int = 0
    failed: int = 0
    errors: List[BatchError] = Field(default_factory=list)


class NetworkSize(BaseModel):
    root_id: str
    node_count: int
    edge_count: int
    density: float


class NetworkStats(BaseModel):
    total_networks: int = 0
    total_nodes: int = 0
    total_edges: int = 0
    avg_density: float = 0.0
    avg_clustering_coefficient: float = 0.0
    network_sizes: List[NetworkSize] = Field(default_factory=list)
