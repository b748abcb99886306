"""Shared fixtures: content item factory, in-memory stores and an engine over them."""

from datetime import datetime

import pytest

from relations import (
    ContentItem,
    InMemoryContentStore,
    InMemoryMetadataStore,
    RelatedContentEngine,
    enrich,
)


def make_item(content_id: str, **overrides) -> ContentItem:
    """A processed item with no topics/categories/author/date unless overridden."""
    data = {
        "id": content_id,
        "title": f"Untitled {content_id}",
        "processed": True,
    }
    data.update(overrides)
    return ContentItem.model_validate(data)


def make_enriched(content_id: str, metadata=None, **overrides):
    return enrich(make_item(content_id, **overrides), metadata)


@pytest.fixture
def item_factory():
    return make_item


@pytest.fixture
def enriched_factory():
    return make_enriched


@pytest.fixture
def ai_catalog():
    """
    Five processed AI items by different authors plus one unprocessed item and
    one unrelated cooking item.
    """
    date = datetime(2024, 3, 1)
    return [
        make_item("a", title="Transformers for language", topics=["ai", "nlp"],
                  author="Ada", publish_date=date),
        make_item("b", title="Transformers for vision", topics=["ai", "nlp"],
                  author="Ben", publish_date=date),
        make_item("c", title="Attention in transformers", topics=["ai", "nlp"],
                  author="Cy", publish_date=date),
        make_item("d", title="Scaling language transformers", topics=["ai", "nlp"],
                  author="Di", publish_date=date),
        make_item("e", title="Language model evaluation", topics=["ai", "nlp"],
                  author="Ed", publish_date=date),
        make_item("draft", title="Transformers for language", topics=["ai", "nlp"],
                  author="Ada", publish_date=date, processed=False),
        make_item("cook", title="Baking sourdough bread", topics=["cooking"],
                  categories=["food"], author="Flo", publish_date=datetime(2022, 1, 1)),
    ]


@pytest.fixture
def content_store(ai_catalog):
    return InMemoryContentStore(ai_catalog)


@pytest.fixture
def metadata_store():
    return InMemoryMetadataStore()


@pytest.fixture
def engine(content_store, metadata_store):
    return RelatedContentEngine(content_store, metadata_store)
