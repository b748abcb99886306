"""Root and health endpoints."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    state = get_state()
    return {
        "name": "Content Relations API",
        "version": "1.0.0",
        "status": "healthy",
        "data_source": state.config.data_source or "memory",
        "content_count": state.content_count,
        "endpoints": {
            "related": [
                "/api/related/{id}",
                "/api/related/{id}/visualization",
                "/api/related/{id}/update",
                "/api/related/batch-process",
                "/api/related/similarity/{id1}/{id2}",
                "/api/related/network-stats",
            ],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    return {
        "status": "healthy",
        "content_count": state.content_count,
    }
