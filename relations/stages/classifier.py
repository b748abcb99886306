"""
Relationship classification: label why two items are related.

Rules are evaluated top to bottom and the first match wins:
same_author -> update -> similar_topic -> similar.
"""

from typing import Optional

from ..models.config import RelationsConfig, resolve_config
from ..models.enriched import EnrichedContent
from ..models.metadata import RelationshipType
from ..utils.scores import jaccard
from ..utils.text import normalize_title, split_version_marker


def is_same_author(a: EnrichedContent, b: EnrichedContent) -> bool:
    return bool(a.primary_author) and a.primary_author == b.primary_author


def is_update(a: EnrichedContent, b: EnrichedContent) -> bool:
    """
    True when the titles match apart from a version/sequence marker and the authors differ.

    At least one title must carry a marker ("v2", "part 2", "#3", trailing number, ...).
    """
    base_a, marked_a = split_version_marker(a.title)
    base_b, marked_b = split_version_marker(b.title)
    if not base_a or not (marked_a or marked_b):
        return False
    if base_a != base_b:
        return False
    # "Intro v2" vs "intro  v2" is the same title, not an update
    if normalize_title(a.title) == normalize_title(b.title):
        return False
    return not is_same_author(a, b)


def is_similar_topic(
    a: EnrichedContent,
    b: EnrichedContent,
    similarity: float,
    threshold: float,
    config: RelationsConfig,
) -> bool:
    if similarity < threshold:
        return False
    shared = len(a.topics & b.topics)
    if shared == 0:
        return False
    return (
        jaccard(a.topics, b.topics) >= config.min_topic_jaccard
        or shared >= config.min_shared_topics
    )


def classify(
    a: EnrichedContent,
    b: EnrichedContent,
    similarity: float,
    threshold: Optional[float] = None,
    config: Optional[RelationsConfig] = None,
) -> RelationshipType:
    """
    Relationship type for a scored pair.

    threshold is the primary discovery threshold (defaults to config.similarity_threshold);
    similar_topic additionally requires the composite similarity to clear it.
    """
    config = resolve_config(config)
    if threshold is None:
        threshold = config.similarity_threshold
    if is_same_author(a, b):
        return RelationshipType.SAME_AUTHOR
    if is_update(a, b):
        return RelationshipType.UPDATE
    if is_similar_topic(a, b, similarity, threshold, config):
        return RelationshipType.SIMILAR_TOPIC
    return RelationshipType.SIMILAR
