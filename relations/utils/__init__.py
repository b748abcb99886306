"""Shared utilities for scoring and text handling."""

from .scores import clamp, days_between, decay_score, jaccard
from .text import STOP_WORDS, extract_keywords, normalize_title, split_version_marker, tokenize

__all__ = [
    "clamp",
    "days_between",
    "decay_score",
    "jaccard",
    "STOP_WORDS",
    "extract_keywords",
    "normalize_title",
    "split_version_marker",
    "tokenize",
]
