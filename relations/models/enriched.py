"""
EnrichedContent — the single normalized shape every scoring function consumes.

A ContentItem merged with its ContentMetadataRecord (or with defaults when the
record is missing). Author representation, tag casing and keyword extraction
are all resolved here so that scoring never has to inspect raw records.
"""

from datetime import datetime
from typing import FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from ..utils.text import extract_keywords
from .config import RelationsConfig, resolve_config
from .content import ContentItem, ContentType
from .metadata import ContentMetadataRecord

DEFAULT_QUALITY_SCORE = 0.5


def _normalize_tags(values) -> FrozenSet[str]:
    return frozenset(v.strip().lower() for v in values if v and v.strip())


def _normalize_author(name: str) -> str:
    return " ".join(name.split()).casefold()


class EnrichedContent(BaseModel):
    """Engine-internal, never persisted."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    authors: Tuple[str, ...] = ()
    content_type: ContentType = ContentType.ARTICLE
    topics: FrozenSet[str] = frozenset()
    categories: FrozenSet[str] = frozenset()
    publish_date: Optional[datetime] = None
    summary: str = ""
    key_insights: Tuple[str, ...] = ()
    read_count: int = 0
    save_count: int = 0
    share_count: int = 0
    relevance_score: Optional[float] = None
    keywords: FrozenSet[str] = frozenset()
    tags: FrozenSet[str] = frozenset()
    quality_score: float = DEFAULT_QUALITY_SCORE
    text_keywords: FrozenSet[str] = frozenset()
    has_metadata: bool = False

    @property
    def primary_author(self) -> Optional[str]:
        """Normalized first author, or None when the item has no author."""
        return self.authors[0] if self.authors else None

    @property
    def keyword_set(self) -> FrozenSet[str]:
        """Extracted text keywords plus metadata keywords and tags."""
        return self.text_keywords | self.keywords | self.tags


def enrich(
    item: ContentItem,
    metadata: Optional[ContentMetadataRecord] = None,
    config: Optional[RelationsConfig] = None,
) -> EnrichedContent:
    """Merge a content item with its metadata record; missing metadata yields defaults."""
    config = resolve_config(config)
    text_keywords = extract_keywords(
        [item.title, item.summary, *item.key_insights],
        max_keywords=config.max_keywords,
        min_length=config.min_keyword_length,
    )
    return EnrichedContent(
        id=item.id,
        title=item.title,
        authors=tuple(_normalize_author(n) for n in item.author_names()),
        content_type=item.content_type,
        topics=_normalize_tags(item.topics),
        categories=_normalize_tags(item.categories),
        publish_date=item.publish_date,
        summary=item.summary,
        key_insights=tuple(item.key_insights),
        read_count=item.read_count,
        save_count=item.save_count,
        share_count=item.share_count,
        relevance_score=item.relevance_score,
        keywords=_normalize_tags(metadata.keywords) if metadata else frozenset(),
        tags=_normalize_tags(metadata.tags) if metadata else frozenset(),
        quality_score=metadata.quality_score if metadata else DEFAULT_QUALITY_SCORE,
        text_keywords=frozenset(text_keywords),
        has_metadata=metadata is not None,
    )
