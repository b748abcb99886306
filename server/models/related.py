"""Request models for the related-content endpoints."""

from typing import List, Optional

from pydantic import BaseModel


class UpdateRelatedRequest(BaseModel):
    threshold: Optional[float] = None
    limit: Optional[int] = None


class BatchProcessRequest(BaseModel):
    content_ids: List[str]
    batch_size: Optional[int] = None
    threshold: Optional[float] = None
    limit: Optional[int] = None
    update_metadata: bool = True
