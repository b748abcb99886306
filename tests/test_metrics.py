"""Network metrics on small hand-built graphs."""

import pytest

from relations.models import GraphEdge, RelationshipType
from relations.stages.metrics import network_metrics


def _edge(source, target, similarity=0.5):
    return GraphEdge(
        source=source,
        target=target,
        similarity=similarity,
        relationship_type=RelationshipType.SIMILAR,
    )


class TestNetworkMetrics:
    def test_empty_graph(self):
        metrics = network_metrics([], [])
        assert metrics.node_count == 0
        assert metrics.density == 0.0
        assert metrics.avg_degree == 0.0
        assert metrics.max_degree == 0

    def test_single_node(self):
        metrics = network_metrics(["a"], [])
        assert metrics.node_count == 1
        assert metrics.edge_count == 0
        assert metrics.density == 0.0
        assert metrics.avg_degree == 0.0
        assert metrics.clustering_coefficient == 0.0

    def test_path(self):
        metrics = network_metrics(["a", "b", "c"], [_edge("a", "b"), _edge("b", "c")])
        assert metrics.node_count == 3
        assert metrics.edge_count == 2
        assert metrics.density == pytest.approx(2 / 3)
        assert metrics.avg_degree == pytest.approx(4 / 3)
        assert metrics.max_degree == 2
        assert metrics.clustering_coefficient == 0.0

    def test_triangle(self):
        metrics = network_metrics(
            ["a", "b", "c"],
            [_edge("a", "b"), _edge("b", "c"), _edge("a", "c")],
        )
        assert metrics.density == pytest.approx(1.0)
        assert metrics.clustering_coefficient == pytest.approx(1.0)

    def test_triangle_with_tail(self):
        # d hangs off c; only a, b, c have degree >= 2
        metrics = network_metrics(
            ["a", "b", "c", "d"],
            [_edge("a", "b"), _edge("b", "c"), _edge("a", "c"), _edge("c", "d")],
        )
        # local clustering: a=1, b=1, c=1/3
        assert metrics.clustering_coefficient == pytest.approx((1 + 1 + 1 / 3) / 3)
        assert metrics.max_degree == 3

    def test_self_loops_duplicates_and_unknown_nodes_are_ignored(self):
        metrics = network_metrics(
            ["a", "b"],
            [_edge("a", "b"), _edge("b", "a", 0.9), _edge("a", "a"), _edge("a", "zzz")],
        )
        assert metrics.edge_count == 1
        assert metrics.density == pytest.approx(1.0)
