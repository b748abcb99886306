"""Batch processing: completeness, failure isolation, and metadata write-back."""

import pytest

from relations import (
    InMemoryContentStore,
    InMemoryMetadataStore,
    RelatedContentEngine,
    RelationshipType,
    StoreUnavailableError,
)


class LookupFailingContentStore(InMemoryContentStore):
    """get_by_id raises for the configured ids."""

    def __init__(self, items, failing_ids, exc_factory=lambda cid: RuntimeError(f"lookup failed: {cid}")):
        super().__init__(items)
        self.failing_ids = set(failing_ids)
        self.exc_factory = exc_factory

    async def get_by_id(self, content_id):
        if content_id in self.failing_ids:
            raise self.exc_factory(content_id)
        return await super().get_by_id(content_id)


class TestBatchProcess:
    @pytest.mark.asyncio
    async def test_all_succeed_and_links_written(self, engine, metadata_store):
        result = await engine.batch_process(["a", "b", "c"], batch_size=2)
        assert result.processed == 3
        assert result.failed == 0
        assert result.errors == []
        record = metadata_store.get("a")
        assert {link.related_content_id for link in record.related_content} == {"b", "c", "d", "e"}

    @pytest.mark.asyncio
    async def test_lookup_failure_is_isolated(self, ai_catalog):
        store = LookupFailingContentStore(ai_catalog, failing_ids=["a"])
        engine = RelatedContentEngine(store, InMemoryMetadataStore())
        result = await engine.batch_process(["a", "b"])
        assert result.processed == 1
        assert result.failed == 1
        assert len(result.errors) == 1
        assert result.errors[0].content_id == "a"
        assert "lookup failed" in result.errors[0].error

    @pytest.mark.asyncio
    async def test_counts_always_add_up(self, ai_catalog):
        store = LookupFailingContentStore(
            ai_catalog,
            failing_ids=["c"],
            exc_factory=lambda cid: StoreUnavailableError("content_store"),
        )
        engine = RelatedContentEngine(store, InMemoryMetadataStore())
        ids = ["a", "missing", "c", "d", "e", "b", "other-missing"]
        result = await engine.batch_process(ids, batch_size=3)
        assert result.processed + result.failed == len(ids)
        assert len(result.errors) == result.failed
        assert {e.content_id for e in result.errors} == {"missing", "c", "other-missing"}

    @pytest.mark.asyncio
    async def test_update_metadata_false_writes_nothing(self, engine, metadata_store):
        result = await engine.batch_process(["a", "b"], update_metadata=False)
        assert result.processed == 2
        assert metadata_store.all_records() == []

    @pytest.mark.asyncio
    async def test_empty_batch(self, engine):
        result = await engine.batch_process([])
        assert result.processed == 0
        assert result.failed == 0

    @pytest.mark.asyncio
    async def test_rerun_is_idempotent(self, engine, metadata_store):
        await engine.batch_process(["a"])
        first = metadata_store.get("a").related_content
        await engine.batch_process(["a"])
        second = metadata_store.get("a").related_content
        assert len(first) == len(second)
        assert [link.model_dump() for link in first] == [link.model_dump() for link in second]


class TestUpsert:
    @pytest.mark.asyncio
    async def test_upsert_overwrites_by_related_id(self):
        store = InMemoryMetadataStore()
        await store.upsert_related_link("a", "b", RelationshipType.SIMILAR, 0.4)
        await store.upsert_related_link("a", "b", RelationshipType.SIMILAR_TOPIC, 0.7)
        record = store.get("a")
        assert len(record.related_content) == 1
        assert record.related_content[0].relationship_type == RelationshipType.SIMILAR_TOPIC
        assert record.related_content[0].strength == 0.7
