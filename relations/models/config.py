"""
Engine configuration — similarity weights, discovery defaults, classifier and graph parameters.

RelationsConfig defaults are defined here. The server may pass a dict
(e.g. from a JSON file named by RELATIONS_CONFIG_PATH); from_dict() merges it with these defaults.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field, model_validator


class RelationsConfig(BaseModel):
    """Configuration for similarity scoring, discovery, and graph building."""

    # -------------------------------------------------------------------------
    # Composite similarity weights (must sum to 1.0)
    # similarity = wt*topic + wx*text + wc*category + wa*author + wd*temporal
    # -------------------------------------------------------------------------

    weight_topic: float = 0.35
    weight_text: float = 0.25
    weight_category: float = 0.15
    weight_author: float = 0.15
    weight_temporal: float = 0.10

    # -------------------------------------------------------------------------
    # Temporal similarity
    # temporal = exp(-days_apart / temporal_decay_days). 90 gives ~0.017 at one year.
    # -------------------------------------------------------------------------

    temporal_decay_days: float = Field(default=90.0, gt=0.0)
    # Returned when either side has no publish date.
    temporal_missing_score: float = 0.5

    # -------------------------------------------------------------------------
    # Text keywords
    # -------------------------------------------------------------------------

    max_keywords: int = Field(default=50, ge=1)
    min_keyword_length: int = Field(default=3, ge=1)

    # -------------------------------------------------------------------------
    # Discovery defaults (find_related)
    # -------------------------------------------------------------------------

    similarity_threshold: float = Field(default=0.3, ge=0.0, le=1.0)
    max_related_items: int = Field(default=10, ge=1, le=100)

    # -------------------------------------------------------------------------
    # Classifier: similar_topic needs (jaccard >= min_topic_jaccard OR
    # shared topics >= min_shared_topics) AND similarity >= discovery threshold.
    # -------------------------------------------------------------------------

    min_topic_jaccard: float = Field(default=0.5, ge=0.0, le=1.0)
    min_shared_topics: int = Field(default=3, ge=1)

    # -------------------------------------------------------------------------
    # Graph builder
    # -------------------------------------------------------------------------

    graph_max_depth: int = Field(default=2, ge=0, le=5)
    graph_max_nodes: int = Field(default=50, ge=0, le=200)
    # Finder parameters used when expanding each graph node.
    graph_threshold: float = Field(default=0.3, ge=0.0, le=1.0)
    graph_limit: int = Field(default=10, ge=1, le=100)

    # Node size = base + capped engagement terms + quality terms, clamped to [min, max].
    node_size_base: float = 10.0
    node_size_min: float = 10.0
    node_size_max: float = 50.0

    # -------------------------------------------------------------------------
    # Batch processing
    # -------------------------------------------------------------------------

    batch_size: int = Field(default=10, ge=1, le=50)

    # -------------------------------------------------------------------------
    # Network statistics
    # -------------------------------------------------------------------------

    # Roots considered when no ids are given, and max roots actually built.
    network_stats_candidate_roots: int = 50
    network_stats_max_roots: int = 10
    network_stats_max_nodes: int = Field(default=100, ge=0, le=200)

    @model_validator(mode="after")
    def weights_sum_to_one(self):
        total = (
            self.weight_topic
            + self.weight_text
            + self.weight_category
            + self.weight_author
            + self.weight_temporal
        )
        if abs(total - 1.0) > 0.01:
            raise ValueError(f"Similarity weights must sum to 1.0, got {total}")
        if self.node_size_min > self.node_size_max:
            raise ValueError("node_size_min must not exceed node_size_max")
        return self

    @classmethod
    def from_dict(cls, config_dict: Dict) -> "RelationsConfig":
        """Create config from dictionary (e.g., loaded from JSON)."""
        flat = {}
        if "weights" in config_dict:
            for key, value in config_dict["weights"].items():
                flat[f"weight_{key}"] = value
        if "temporal" in config_dict:
            t = config_dict["temporal"]
            if "decay_days" in t:
                flat["temporal_decay_days"] = t["decay_days"]
            if "missing_score" in t:
                flat["temporal_missing_score"] = t["missing_score"]
        if "discovery" in config_dict:
            d = config_dict["discovery"]
            if "threshold" in d:
                flat["similarity_threshold"] = d["threshold"]
            if "limit" in d:
                flat["max_related_items"] = d["limit"]
        if "classifier" in config_dict:
            c = config_dict["classifier"]
            if "min_topic_jaccard" in c:
                flat["min_topic_jaccard"] = c["min_topic_jaccard"]
            if "min_shared_topics" in c:
                flat["min_shared_topics"] = c["min_shared_topics"]
        if "graph" in config_dict:
            g = config_dict["graph"]
            for key in ("max_depth", "max_nodes", "threshold", "limit"):
                if key in g:
                    flat[f"graph_{key}"] = g[key]
        if "batch" in config_dict:
            flat["batch_size"] = config_dict["batch"].get("size", 10)
        # Flat keys are accepted as-is
        flat.update({k: v for k, v in config_dict.items() if not isinstance(v, dict)})
        allowed = set(cls.model_fields)
        filtered = {k: v for k, v in flat.items() if k in allowed}
        return cls.model_validate(filtered)

    def weights(self) -> Dict[str, float]:
        return {
            "topic": self.weight_topic,
            "text": self.weight_text,
            "category": self.weight_category,
            "author": self.weight_author,
            "temporal": self.weight_temporal,
        }


DEFAULT_CONFIG = RelationsConfig()


def resolve_config(config: Optional["RelationsConfig"]) -> "RelationsConfig":
    """Return config or DEFAULT_CONFIG when none is provided."""
    return config if config is not None else DEFAULT_CONFIG
