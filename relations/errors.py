"""
Error taxonomy for the relations engine.

NotFoundError and StoreUnavailableError propagate to callers of top-level
operations. ItemProcessingError marks a failure confined to one candidate or
one batch item; the finder drops such candidates, the batch processor reports them.
"""

from typing import Optional


class RelationsError(Exception):
    """Base class for all engine errors."""


class NotFoundError(RelationsError):
    def __init__(self, content_id: str, message: Optional[str] = None):
        self.content_id = content_id
        super().__init__(message or f"Content not found: {content_id}")


class ValidationError(RelationsError, ValueError):
    """Options out of their declared bounds. Raised before any store access."""

    def __init__(self, message: str, errors: Optional[list] = None):
        self.errors = errors or []
        super().__init__(message)


class ItemProcessingError(RelationsError):
    def __init__(self, content_id: str, message: str):
        self.content_id = content_id
        super().__init__(f"Failed to process {content_id}: {message}")


class StoreUnavailableError(RelationsError):
    """The content or metadata store cannot be reached."""

    def __init__(self, store: str, message: str = "store unavailable"):
        self.store = store
        super().__init__(f"{store}: {message}")
