"""
Content Relations API — FastAPI app factory.

Use: uvicorn server.app:app
Or:  from server import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .routes import register_routes
from .state import get_state

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup."""
    config = get_config()
    configure_logging(config.log_level)

    app = FastAPI(
        title="Content Relations API",
        description="Related content discovery, relationship graphs and network metrics",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def _load_state():
        _, errors = get_config().validate()
        for error in errors:
            logger.warning("[startup] CONFIG_INVALID %s", error)
        state = get_state()
        logger.info(
            "[startup] Content Relations API ready data_source=%s items=%s",
            state.config.data_source or "memory", state.content_count,
        )

    return app


app = create_app()
