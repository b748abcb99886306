"""
Network metrics for an undirected relationship graph.

Counts, density, degree statistics and the average local clustering
coefficient, computed with networkx. Self loops and repeated pairs are
collapsed; edges that reference ids outside the node list are ignored.
"""

import logging
from typing import Iterable, Union

import networkx as nx
import numpy as np

from ..models.results import GraphEdge, GraphNode, NetworkMetrics

logger = logging.getLogger(__name__)

NodeLike = Union[GraphNode, str]


def _node_id(node: NodeLike) -> str:
    return node if isinstance(node, str) else node.id


def to_networkx(nodes: Iterable[NodeLike], edges: Iterable[GraphEdge]) -> nx.Graph:
    graph = nx.Graph()
    graph.add_nodes_from(_node_id(n) for n in nodes)
    for edge in edges:
        if edge.source == edge.target:
            continue
        if edge.source not in graph or edge.target not in graph:
            logger.debug(
                "[metrics] EDGE_IGNORED source=%s target=%s reason=unknown_node",
                edge.source, edge.target,
            )
            continue
        graph.add_edge(edge.source, edge.target)
    return graph


def average_clustering(graph: nx.Graph) -> float:
    """
    Mean local clustering coefficient over nodes with degree >= 2.

    Nodes with fewer than two neighbours cannot close a triangle and are left out
    of the average (networkx's average_clustering counts them as zeros).
    """
    eligible = [n for n, degree in graph.degree() if degree >= 2]
    if not eligible:
        return 0.0
    local = nx.clustering(graph, eligible)
    return float(np.mean([local[n] for n in eligible]))


def network_metrics(nodes: Iterable[NodeLike], edges: Iterable[GraphEdge]) -> NetworkMetrics:
    """
    Aggregate statistics for N nodes and E edges:

    density = 2E / (N(N-1)) for N > 1 else 0; avg_degree = 2E / N for N > 0 else 0.
    """
    graph = to_networkx(nodes, edges)
    n = graph.number_of_nodes()
    e = graph.number_of_edges()
    degrees = [d for _, d in graph.degree()]
    return NetworkMetrics(
        node_count=n,
        edge_count=e,
        density=(2.0 * e) / (n * (n - 1)) if n > 1 else 0.0,
        avg_degree=(2.0 * e) / n if n > 0 else 0.0,
        max_degree=max(degrees) if degrees else 0,
        clustering_coefficient=average_clustering(graph),
    )
