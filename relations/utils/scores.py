"""
Score helpers — set overlap, date distance, and clamping used by the similarity stage.
"""

import math
from datetime import datetime
from typing import AbstractSet


def jaccard(a: AbstractSet[str], b: AbstractSet[str]) -> float:
    """
    Jaccard coefficient |a ∩ b| / |a ∪ b|.

    Both empty is vacuous agreement (1.0); exactly one empty is 0.0.
    """
    if not a and not b:
        return 1.0
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b)


def days_between(d1: datetime, d2: datetime) -> int:
    """Whole calendar days between two timestamps, ignoring time of day and tz."""
    return abs((d1.date() - d2.date()).days)


def decay_score(days_apart: int, decay_days: float) -> float:
    """Exponential decay: 1.0 at zero days, exp(-days/decay_days) after."""
    return math.exp(-days_apart / decay_days)


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))
