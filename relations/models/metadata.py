"""
Metadata model — the per-content record owned by the metadata store.

The engine reads keywords, tags and quality from it and writes back
RelatedContentLink entries through the store's upsert operation.
"""

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

CustomValue = Union[str, int, float, bool, None]


class RelationshipType(str, Enum):
    """Why two items are related, in classifier precedence order."""

    SAME_AUTHOR = "same_author"
    UPDATE = "update"
    SIMILAR_TOPIC = "similar_topic"
    SIMILAR = "similar"


class RelatedContentLink(BaseModel):
    related_content_id: str
    relationship_type: RelationshipType
    strength: float = Field(ge=0.0, le=1.0)


class ContentMetadataRecord(BaseModel):
    """Enhanced metadata for one content item. All fields except content_id are optional."""

    model_config = ConfigDict(extra="allow")

    content_id: str
    keywords: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    quality_score: float = Field(default=0.5, ge=0.0, le=1.0)
    related_content: List[RelatedContentLink] = Field(default_factory=list)
    custom_fields: Dict[str, CustomValue] = Field(default_factory=dict)

    def with_related_link(
        self,
        related_content_id: str,
        relationship_type: RelationshipType,
        strength: float,
    ) -> "ContentMetadataRecord":
        """
        Return a copy with the link upserted by related_content_id.

        An existing link to the same id has its type and strength overwritten;
        otherwise the link is appended. Applying the same link twice is a no-op.
        """
        links = list(self.related_content)
        new_link = RelatedContentLink(
            related_content_id=related_content_id,
            relationship_type=relationship_type,
            strength=strength,
        )
        for idx, link in enumerate(links):
            if link.related_content_id == related_content_id:
                links[idx] = new_link
                break
        else:
            links.append(new_link)
        return self.model_copy(update={"related_content": links})

    def merge_custom_fields(self, updates: Dict[str, CustomValue]) -> "ContentMetadataRecord":
        """Return a copy with custom fields merged; last write wins per key."""
        return self.model_copy(update={"custom_fields": {**self.custom_fields, **updates}})

    def get_link(self, related_content_id: str) -> Optional[RelatedContentLink]:
        for link in self.related_content:
            if link.related_content_id == related_content_id:
                return link
        return None
