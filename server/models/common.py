"""Common Pydantic models shared across routes."""

from typing import Any

from pydantic import BaseModel


class ApiResponse(BaseModel):
    """Envelope for every /api/related response."""

    success: bool = True
    data: Any = None
