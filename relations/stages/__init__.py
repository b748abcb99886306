"""Pipeline stages: similarity and classification (pure), finder, graph builder, metrics, batch."""

from .batch import BatchProcessor, upsert_links
from .classifier import classify
from .finder import RelatedContentFinder
from .graph_builder import GraphBuilder, node_color, node_size
from .metrics import network_metrics
from .similarity import similarity, similarity_breakdown, similarity_scores

__all__ = [
    "BatchProcessor",
    "upsert_links",
    "classify",
    "RelatedContentFinder",
    "GraphBuilder",
    "node_color",
    "node_size",
    "network_metrics",
    "similarity",
    "similarity_breakdown",
    "similarity_scores",
]
