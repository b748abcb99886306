"""
Store abstractions the engine depends on.

ContentStore supplies content items (read-only); MetadataStore supplies
metadata records and persists discovered related-content links. Both are
async; implementations raise StoreUnavailableError when their backend is unreachable.
"""

from typing import List, Optional, Protocol, Sequence, Tuple

from ..models.content import ContentItem
from ..models.metadata import ContentMetadataRecord, RelationshipType

# (related_content_id, relationship_type, strength)
RelatedLinkSpec = Tuple[str, RelationshipType, float]


class ContentStore(Protocol):
    """Protocol for content catalog access. Implement for in-memory, JSON file, or a database."""

    async def get_by_id(self, content_id: str) -> Optional[ContentItem]:
        """Return the item, or None if no item has this id."""
        ...

    async def find_candidates(self, exclude_id: Optional[str] = None) -> List[ContentItem]:
        """
        Return processed items, excluding exclude_id when given.
        exclude_id=None lists every processed item.
        """
        ...


class MetadataStore(Protocol):
    """Protocol for content metadata read/write."""

    async def get_by_content_id(self, content_id: str) -> Optional[ContentMetadataRecord]:
        """Return the metadata record, or None if the item has none."""
        ...

    async def upsert_related_link(
        self,
        content_id: str,
        related_content_id: str,
        relationship_type: RelationshipType,
        strength: float,
    ) -> None:
        """
        Add or overwrite the link to related_content_id on content_id's record,
        creating the record if needed. Idempotent per (content_id, related_content_id).
        """
        ...

    async def upsert_related_links(
        self,
        content_id: str,
        links: Sequence[RelatedLinkSpec],
    ) -> None:
        """
        Apply upsert_related_link for every (related_content_id, relationship_type,
        strength) in links, in order. Durable stores persist once per call.
        """
        ...
