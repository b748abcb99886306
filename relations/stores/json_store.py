"""
JSON file-backed stores.

Used when DATA_SOURCE=json; paths come from CONTENT_JSON_PATH and METADATA_JSON_PATH.
The content file is read once at construction. The metadata file is rewritten
once per upsert call, off the event loop; a batch of links for one item is
a single write.
"""

import asyncio
import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple, Union

from ..errors import StoreUnavailableError
from ..models.content import ensure_content_list
from ..models.metadata import RelationshipType
from .memory import InMemoryContentStore, InMemoryMetadataStore

logger = logging.getLogger(__name__)


def _read_records(path: Path, key: str, store: str) -> List[Dict]:
    """Records from a JSON list or from {key: [...]}; unreadable files raise StoreUnavailableError."""
    try:
        with open(path) as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise StoreUnavailableError(store, f"invalid JSON in {path}: {exc}") from exc
    except OSError as exc:
        raise StoreUnavailableError(store, f"cannot read {path}: {exc}") from exc
    records = data.get(key, []) if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise StoreUnavailableError(store, f"expected a list under '{key}' in {path}")
    return records


class JsonContentStore(InMemoryContentStore):
    """Content store backed by a JSON file: a list of items, or {"content": [...]}."""

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        if not self._path.exists():
            raise FileNotFoundError(f"Content JSON not found: {self._path}")
        records = _read_records(self._path, "content", "content_store")
        super().__init__(ensure_content_list(records))
        logger.info("[json_store] CONTENT_LOADED path=%s items=%d", self._path, len(self))


class JsonMetadataStore(InMemoryMetadataStore):
    """Metadata store backed by a JSON file: a list of records, or {"metadata": [...]}."""

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        records: List[Dict] = []
        if self._path.exists():
            records = _read_records(self._path, "metadata", "metadata_store")
        super().__init__(records)
        self._write_lock = threading.Lock()
        self._version = 0
        self._written_version = 0
        logger.info("[json_store] METADATA_LOADED path=%s records=%d", self._path, len(self._records))

    def _snapshot(self) -> Dict[str, Any]:
        return {"metadata": [r.model_dump(mode="json") for r in self._records.values()]}

    def _write(self, payload: Dict[str, Any], version: int) -> None:
        with self._write_lock:
            # a newer snapshot already reached disk
            if version <= self._written_version:
                return
            try:
                with open(self._path, "w") as f:
                    json.dump(payload, f, indent=2)
            except OSError as exc:
                raise StoreUnavailableError("metadata_store", f"cannot write {self._path}: {exc}") from exc
            self._written_version = version

    async def _save(self) -> None:
        self._version += 1
        await asyncio.to_thread(self._write, self._snapshot(), self._version)

    async def upsert_related_link(
        self,
        content_id: str,
        related_content_id: str,
        relationship_type: RelationshipType,
        strength: float,
    ) -> None:
        await super().upsert_related_link(content_id, related_content_id, relationship_type, strength)
        await self._save()

    async def upsert_related_links(
        self,
        content_id: str,
        links: Sequence[Tuple[str, RelationshipType, float]],
    ) -> None:
        if not links:
            return
        await super().upsert_related_links(content_id, links)
        await self._save()
        logger.debug("[json_store] LINKS_SAVED id=%s links=%d", content_id, len(links))
