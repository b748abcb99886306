"""Application state: stores and the relations engine."""

import logging
from typing import Optional

from relations import (
    InMemoryContentStore,
    InMemoryMetadataStore,
    JsonContentStore,
    JsonMetadataStore,
    RelatedContentEngine,
)

from .config import ServerConfig, get_config

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(self, config: ServerConfig, engine: Optional[RelatedContentEngine] = None):
        self.config = config
        self.engine = engine or self._create_engine(config)

    def _create_engine(self, config: ServerConfig) -> RelatedContentEngine:
        """Engine over JSON stores when DATA_SOURCE=json, else empty in-memory stores."""
        relations_config = config.load_relations_config()
        if config.data_source == "json":
            content_store = JsonContentStore(config.content_json_path)
            metadata_store = JsonMetadataStore(config.metadata_json_path)
            logger.info(
                "[startup] Stores: JSON content=%s metadata=%s",
                config.content_json_path, config.metadata_json_path,
            )
        else:
            content_store = InMemoryContentStore()
            metadata_store = InMemoryMetadataStore()
            logger.info("[startup] Stores: in-memory (empty)")
        return RelatedContentEngine(content_store, metadata_store, relations_config)

    @property
    def content_count(self) -> Optional[int]:
        store = self.engine.content_store
        return len(store) if hasattr(store, "__len__") else None


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        _state = AppState(get_config())
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Replace (or clear with None) the global state; used by tests and embedding apps."""
    global _state
    _state = state
