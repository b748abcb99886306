"""
In-memory stores.

Used for tests, evaluation, and embedding the engine in another process
that already holds its catalog in memory.
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from ..models.content import ContentItem, ensure_content_list
from ..models.metadata import ContentMetadataRecord, RelationshipType


class InMemoryContentStore:
    """Content store backed by a dict of id -> ContentItem."""

    def __init__(self, items: Iterable[Union[Dict[str, Any], ContentItem]] = ()):
        self._items: Dict[str, ContentItem] = {}
        for item in ensure_content_list(list(items)):
            self._items[item.id] = item

    def add(self, item: Union[Dict[str, Any], ContentItem]) -> ContentItem:
        typed = ContentItem.model_validate(item) if isinstance(item, dict) else item
        self._items[typed.id] = typed
        return typed

    def all_items(self) -> List[ContentItem]:
        return list(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    async def get_by_id(self, content_id: str) -> Optional[ContentItem]:
        return self._items.get(content_id)

    async def find_candidates(self, exclude_id: Optional[str] = None) -> List[ContentItem]:
        return [
            item for item in self._items.values()
            if item.processed and item.id != exclude_id
        ]


class InMemoryMetadataStore:
    """Metadata store backed by a dict of content_id -> ContentMetadataRecord."""

    def __init__(self, records: Iterable[Union[Dict[str, Any], ContentMetadataRecord]] = ()):
        self._records: Dict[str, ContentMetadataRecord] = {}
        for record in records:
            typed = (
                ContentMetadataRecord.model_validate(record)
                if isinstance(record, dict) else record
            )
            self._records[typed.content_id] = typed

    def get(self, content_id: str) -> Optional[ContentMetadataRecord]:
        return self._records.get(content_id)

    def put(self, record: ContentMetadataRecord) -> None:
        self._records[record.content_id] = record

    def all_records(self) -> List[ContentMetadataRecord]:
        return list(self._records.values())

    async def get_by_content_id(self, content_id: str) -> Optional[ContentMetadataRecord]:
        return self._records.get(content_id)

    async def upsert_related_link(
        self,
        content_id: str,
        related_content_id: str,
        relationship_type: RelationshipType,
        strength: float,
    ) -> None:
        self._apply_link(content_id, related_content_id, relationship_type, strength)

    async def upsert_related_links(
        self,
        content_id: str,
        links: Sequence[Tuple[str, RelationshipType, float]],
    ) -> None:
        for related_content_id, relationship_type, strength in links:
            self._apply_link(content_id, related_content_id, relationship_type, strength)

    def _apply_link(
        self,
        content_id: str,
        related_content_id: str,
        relationship_type: RelationshipType,
        strength: float,
    ) -> None:
        record = self._records.get(content_id) or ContentMetadataRecord(content_id=content_id)
        self._records[content_id] = record.with_related_link(
            related_content_id, relationship_type, strength
        )
