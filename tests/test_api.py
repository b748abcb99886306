"""
HTTP adapter tests

Runs the FastAPI app in-process with TestClient over an engine backed by the
shared in-memory catalog fixture.
"""

import pytest
from fastapi.testclient import TestClient

from relations import (
    InMemoryContentStore,
    InMemoryMetadataStore,
    RelatedContentEngine,
    StoreUnavailableError,
)
from server import AppState, ServerConfig, app, set_state


class UnavailableContentStore(InMemoryContentStore):
    async def find_candidates(self, exclude_id=None):
        raise StoreUnavailableError("content_store", "connection refused")


@pytest.fixture
def client(engine):
    set_state(AppState(ServerConfig(), engine=engine))
    yield TestClient(app)
    set_state(None)


class TestRoot:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["content_count"] == 7

    def test_health(self, client):
        assert client.get("/api/health").json()["status"] == "healthy"


class TestRelatedRoutes:
    def test_get_related(self, client):
        response = client.get("/api/related/a", params={"limit": 2})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert len(body["data"]) == 2
        first = body["data"][0]
        assert first["relationship_type"] in {"same_author", "update", "similar_topic", "similar"}
        assert 0.0 <= first["similarity"] <= 1.0
        assert first["content"]["id"] in {"b", "c", "d", "e"}

    def test_not_found(self, client):
        response = client.get("/api/related/nope")
        assert response.status_code == 404

    def test_invalid_threshold(self, client):
        response = client.get("/api/related/a", params={"threshold": 2})
        assert response.status_code == 400

    def test_visualization(self, client):
        response = client.get("/api/related/a/visualization", params={"max_depth": 1})
        assert response.status_code == 200
        graph = response.json()["data"]
        assert graph["root_id"] == "a"
        assert len(graph["nodes"]) == 5
        assert graph["metrics"]["node_count"] == 5

    def test_visualization_without_metrics(self, client):
        response = client.get("/api/related/a/visualization", params={"include_metrics": "false"})
        assert response.json()["data"]["metrics"] is None

    def test_update(self, client, metadata_store):
        response = client.post("/api/related/a/update", json={"limit": 3})
        assert response.status_code == 200
        assert response.json()["data"] == {"content_id": "a", "links_written": 3}
        assert len(metadata_store.get("a").related_content) == 3

    def test_update_without_body(self, client):
        response = client.post("/api/related/b/update")
        assert response.status_code == 200
        assert response.json()["data"]["links_written"] == 4

    def test_batch_process(self, client):
        response = client.post(
            "/api/related/batch-process",
            json={"content_ids": ["a", "nope"], "batch_size": 5},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["processed"] == 1
        assert data["failed"] == 1
        assert data["errors"][0]["content_id"] == "nope"

    def test_batch_invalid_size(self, client):
        response = client.post(
            "/api/related/batch-process",
            json={"content_ids": ["a"], "batch_size": 100},
        )
        assert response.status_code == 400

    def test_similarity(self, client):
        response = client.get("/api/related/similarity/a/b")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["content_id_1"] == "a"
        assert set(data["breakdown"]) == {"topic", "category", "author", "temporal", "text"}

    def test_similarity_missing(self, client):
        assert client.get("/api/related/similarity/a/nope").status_code == 404

    def test_network_stats(self, client):
        response = client.get(
            "/api/related/network-stats",
            params={"content_ids": ["a", "b"], "max_depth": 1},
        )
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total_networks"] == 2
        assert data["total_nodes"] == 10


class TestStoreFailures:
    def test_store_unavailable_maps_to_503(self, ai_catalog):
        engine = RelatedContentEngine(UnavailableContentStore(ai_catalog), InMemoryMetadataStore())
        set_state(AppState(ServerConfig(), engine=engine))
        try:
            response = TestClient(app).get("/api/related/a")
            assert response.status_code == 503
        finally:
            set_state(None)
