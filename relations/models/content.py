"""
Content model — a content item as supplied by the content store.

Read-only from the engine's point of view. Built from store/API dicts via
ContentItem.model_validate(d) or ensure_content_list().
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ContentType(str, Enum):
    ARTICLE = "article"
    PAPER = "paper"
    PODCAST = "podcast"
    VIDEO = "video"
    SOCIAL = "social"
    NEWSLETTER = "newsletter"
    BOOK = "book"
    COURSE = "course"


class AuthorRef(BaseModel):
    """One entry of a multi-author list: only the name is used for matching."""

    model_config = ConfigDict(extra="allow")

    name: str = ""


class ContentItem(BaseModel):
    """
    A content item eligible for relationship discovery.

    author is either a single name or a list of {name} records; the engine
    resolves both forms once, in enrich(). Engagement counters default to 0.
    """

    model_config = ConfigDict(extra="allow", use_enum_values=False)

    id: str
    title: str = ""
    author: Optional[Union[str, List[AuthorRef]]] = None
    content_type: ContentType = ContentType.ARTICLE
    topics: List[str] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    publish_date: Optional[datetime] = None
    summary: str = ""
    key_insights: List[str] = Field(default_factory=list)
    read_count: int = 0
    save_count: int = 0
    share_count: int = 0
    relevance_score: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    processed: bool = False

    def author_names(self) -> List[str]:
        """Raw author names in their original order (may be empty)."""
        if self.author is None:
            return []
        if isinstance(self.author, str):
            return [self.author] if self.author.strip() else []
        return [a.name for a in self.author if a.name and a.name.strip()]


def ensure_content_list(
    items: List[Union[Dict[str, Any], "ContentItem"]],
) -> List["ContentItem"]:
    """Convert list of dicts or ContentItems to list of ContentItem models."""
    return [
        ContentItem.model_validate(i) if isinstance(i, dict) else i
        for i in items
    ]
