"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .related import router as related_router
from .root import router as root_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(related_router, prefix="/api/related", tags=["related"])
