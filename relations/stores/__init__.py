"""Store protocols and implementations (in-memory, JSON file)."""

from .base import ContentStore, MetadataStore
from .json_store import JsonContentStore, JsonMetadataStore
from .memory import InMemoryContentStore, InMemoryMetadataStore

__all__ = [
    "ContentStore",
    "MetadataStore",
    "InMemoryContentStore",
    "InMemoryMetadataStore",
    "JsonContentStore",
    "JsonMetadataStore",
]
