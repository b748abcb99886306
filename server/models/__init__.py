"""Pydantic request/response models for the API."""

from .common import ApiResponse
from .related import BatchProcessRequest, UpdateRelatedRequest

__all__ = [
    "ApiResponse",
    "BatchProcessRequest",
    "UpdateRelatedRequest",
]
