"""
Per-call options for the engine operations, with their declared bounds.

Values left as None fall back to RelationsConfig defaults. Out-of-range values
raise relations.errors.ValidationError; nothing is silently clamped.
"""

from typing import Any, Dict, Optional, Type, TypeVar

import pydantic
from pydantic import BaseModel, Field

from ..errors import ValidationError
from .config import RelationsConfig


class FindOptions(BaseModel):
    threshold: float = Field(ge=0.0, le=1.0)
    limit: int = Field(ge=1, le=100)
    include_metadata: bool = True


class GraphOptions(BaseModel):
    max_depth: int = Field(ge=0, le=5)
    max_nodes: int = Field(ge=0, le=200)
    include_metrics: bool = True


class BatchOptions(BaseModel):
    batch_size: int = Field(ge=1, le=50)
    threshold: float = Field(ge=0.0, le=1.0)
    limit: int = Field(ge=1, le=100)
    update_metadata: bool = True


class NetworkStatsOptions(BaseModel):
    max_depth: int = Field(ge=0, le=5)
    max_nodes: int = Field(ge=0, le=200)


_DEFAULTS = {
    FindOptions: lambda c: {"threshold": c.similarity_threshold, "limit": c.max_related_items},
    GraphOptions: lambda c: {"max_depth": c.graph_max_depth, "max_nodes": c.graph_max_nodes},
    BatchOptions: lambda c: {
        "batch_size": c.batch_size,
        "threshold": c.similarity_threshold,
        "limit": c.max_related_items,
    },
    NetworkStatsOptions: lambda c: {
        "max_depth": c.graph_max_depth,
        "max_nodes": c.network_stats_max_nodes,
    },
}

OptionsT = TypeVar("OptionsT", bound=BaseModel)


def build_options(
    options_cls: Type[OptionsT],
    config: RelationsConfig,
    **values: Optional[Any],
) -> OptionsT:
    """Fill unset values from config and validate; raise ValidationError on bad input."""
    merged: Dict[str, Any] = dict(_DEFAULTS[options_cls](config))
    merged.update({k: v for k, v in values.items() if v is not None})
    try:
        return options_cls.model_validate(merged)
    except pydantic.ValidationError as exc:
        details = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
        ]
        raise ValidationError("; ".join(details), errors=details) from exc
