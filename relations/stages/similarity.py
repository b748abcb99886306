"""
Similarity stage: five symmetric sub-scores and their weighted composite.

Every function takes two EnrichedContent values and is pure. Each sub-score
is symmetric in its arguments, so the composite is too.

    similarity = w_topic*topic + w_text*text + w_category*category
               + w_author*author + w_temporal*temporal        (clamped to [0, 1])
"""

from typing import Optional, Tuple

from ..models.config import RelationsConfig, resolve_config
from ..models.enriched import EnrichedContent
from ..models.results import SimilarityScores
from ..utils.scores import clamp, days_between, decay_score, jaccard


def topic_similarity(a: EnrichedContent, b: EnrichedContent) -> float:
    """Jaccard over case-normalized topic sets."""
    return jaccard(a.topics, b.topics)


def category_similarity(a: EnrichedContent, b: EnrichedContent) -> float:
    """Jaccard over case-normalized category sets."""
    return jaccard(a.categories, b.categories)


def author_similarity(a: EnrichedContent, b: EnrichedContent) -> float:
    """1.0 when both primary authors resolve to the same name; 0.0 otherwise or if either is missing."""
    if not a.primary_author or not b.primary_author:
        return 0.0
    return 1.0 if a.primary_author == b.primary_author else 0.0


def temporal_similarity(
    a: EnrichedContent,
    b: EnrichedContent,
    config: Optional[RelationsConfig] = None,
) -> float:
    """
    Publication proximity with exponential decay over whole days.

    Same date -> 1.0; missing date on either side -> neutral (0.5 by default).
    """
    config = resolve_config(config)
    if a.publish_date is None or b.publish_date is None:
        return config.temporal_missing_score
    return decay_score(days_between(a.publish_date, b.publish_date), config.temporal_decay_days)


def text_similarity(a: EnrichedContent, b: EnrichedContent) -> float:
    """
    Jaccard over extracted text keywords combined with metadata keywords and tags.

    Unlike the other set scores, an empty keyword set on either side scores 0:
    two items with no usable keywords share no text.
    """
    ka, kb = a.keyword_set, b.keyword_set
    if not ka or not kb:
        return 0.0
    return jaccard(ka, kb)


def similarity_scores(
    a: EnrichedContent,
    b: EnrichedContent,
    config: Optional[RelationsConfig] = None,
) -> SimilarityScores:
    """All five sub-scores, for diagnostics and the pairwise lookup."""
    return SimilarityScores(
        topic=topic_similarity(a, b),
        category=category_similarity(a, b),
        author=author_similarity(a, b),
        temporal=temporal_similarity(a, b, config),
        text=text_similarity(a, b),
    )


def combine_scores(scores: SimilarityScores, config: Optional[RelationsConfig] = None) -> float:
    config = resolve_config(config)
    total = (
        config.weight_topic * scores.topic
        + config.weight_text * scores.text
        + config.weight_category * scores.category
        + config.weight_author * scores.author
        + config.weight_temporal * scores.temporal
    )
    return clamp(total)


def similarity(
    a: EnrichedContent,
    b: EnrichedContent,
    config: Optional[RelationsConfig] = None,
) -> float:
    """Composite similarity in [0, 1]; similarity(a, b) == similarity(b, a)."""
    return combine_scores(similarity_scores(a, b, config), config)


def similarity_breakdown(
    a: EnrichedContent,
    b: EnrichedContent,
    config: Optional[RelationsConfig] = None,
) -> Tuple[SimilarityScores, float]:
    """(sub-scores, composite) for one pair."""
    scores = similarity_scores(a, b, config)
    return scores, combine_scores(scores, config)
