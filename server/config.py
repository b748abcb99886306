"""
Server Configuration

Loads configuration from environment variables and provides defaults.
A .env file at the project root is read with python-dotenv.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from relations.models.config import RelationsConfig

BASE_DIR = Path(__file__).resolve().parent.parent

root_env = BASE_DIR / ".env"
if root_env.exists():
    load_dotenv(root_env)


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Data source: "json" | None (empty in-memory stores)
    data_source: Optional[str] = None
    # When data_source=json: content catalog and metadata records
    content_json_path: Optional[Path] = None
    metadata_json_path: Optional[Path] = None

    # Optional JSON file merged over RelationsConfig defaults
    relations_config_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        data_source = os.getenv("DATA_SOURCE", "").strip().lower() or None
        if data_source and data_source != "json":
            data_source = None

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (BASE_DIR / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            data_source=data_source,
            content_json_path=_path_env("CONTENT_JSON_PATH", BASE_DIR / "data" / "content.json"),
            metadata_json_path=_path_env("METADATA_JSON_PATH", BASE_DIR / "data" / "metadata.json"),
            relations_config_path=_path_env("RELATIONS_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.data_source == "json":
            if not self.content_json_path or not self.content_json_path.exists():
                errors.append(f"Content JSON not found: {self.content_json_path}")
            # Metadata file is created on first write

        if self.relations_config_path and not self.relations_config_path.exists():
            errors.append(f"Relations config not found: {self.relations_config_path}")

        return len(errors) == 0, errors

    def load_relations_config(self) -> RelationsConfig:
        """RelationsConfig from relations_config_path, or defaults when unset."""
        if not self.relations_config_path:
            return RelationsConfig()
        with open(self.relations_config_path) as f:
            return RelationsConfig.from_dict(json.load(f))


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
