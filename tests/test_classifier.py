"""Relationship classifier: precedence and each rule in isolation."""

from relations.models import RelationshipType
from relations.stages.classifier import classify, is_update
from relations.utils.text import split_version_marker


class TestVersionMarkers:
    def test_part_marker(self):
        assert split_version_marker("Intro to RAG, Part 2") == ("intro to rag", True)

    def test_version_marker(self):
        assert split_version_marker("Scaling Laws v2") == ("scaling laws", True)

    def test_hash_marker(self):
        assert split_version_marker("Weekly digest #14") == ("weekly digest", True)

    def test_no_marker(self):
        assert split_version_marker("Intro to RAG") == ("intro to rag", False)

    def test_bare_number_title_keeps_itself(self):
        assert split_version_marker("42") == ("42", False)


class TestClassify:
    def test_same_author_wins(self, enriched_factory):
        a = enriched_factory("a", title="Intro to RAG", author="X", topics=["ai"])
        b = enriched_factory("b", title="Intro to RAG part 2", author="x", topics=["ai"])
        assert classify(a, b, 0.9) == RelationshipType.SAME_AUTHOR

    def test_update_with_different_authors(self, enriched_factory):
        a = enriched_factory("a", title="Intro to RAG", author="X")
        b = enriched_factory("b", title="Intro to RAG part 2", author="Y")
        assert is_update(a, b)
        assert classify(a, b, 0.4) == RelationshipType.UPDATE

    def test_identical_titles_are_not_updates(self, enriched_factory):
        a = enriched_factory("a", title="Intro to RAG v2", author="X")
        b = enriched_factory("b", title="Intro to RAG v2", author="Y")
        assert not is_update(a, b)

    def test_titles_differing_only_in_spacing_are_not_updates(self, enriched_factory):
        a = enriched_factory("a", title="Intro to RAG v2", author="X")
        b = enriched_factory("b", title="intro to  RAG v2.", author="Y")
        assert not is_update(a, b)
        assert classify(a, b, 0.4) != RelationshipType.UPDATE

    def test_similar_topic_by_jaccard(self, enriched_factory):
        a = enriched_factory("a", title="Alpha report", topics=["ai", "ml"], author="X")
        b = enriched_factory("b", title="Beta findings", topics=["ai", "ml", "nlp"], author="Y")
        assert classify(a, b, 0.55) == RelationshipType.SIMILAR_TOPIC

    def test_similar_topic_by_shared_count(self, enriched_factory):
        topics_a = ["ai", "ml", "nlp", "a1", "a2", "a3", "a4"]
        topics_b = ["ai", "ml", "nlp", "b1", "b2", "b3", "b4"]
        a = enriched_factory("a", title="Alpha report", topics=topics_a, author="X")
        b = enriched_factory("b", title="Beta findings", topics=topics_b, author="Y")
        # jaccard 3/11 is below 0.5; three shared topics still qualify
        assert classify(a, b, 0.5) == RelationshipType.SIMILAR_TOPIC

    def test_topic_overlap_below_threshold_is_similar(self, enriched_factory):
        a = enriched_factory("a", title="Alpha report", topics=["ai", "ml"], author="X")
        b = enriched_factory("b", title="Beta findings", topics=["ai", "ml"], author="Y")
        assert classify(a, b, 0.1, threshold=0.3) == RelationshipType.SIMILAR

    def test_fallback_is_similar(self, enriched_factory):
        a = enriched_factory("a", title="Neural networks explained", topics=["ai"], author="X")
        b = enriched_factory("b", title="Baking sourdough bread", topics=["cooking"], author="Y")
        assert classify(a, b, 0.05) == RelationshipType.SIMILAR

    def test_missing_authors_are_not_same_author(self, enriched_factory):
        a = enriched_factory("a", title="Alpha report")
        b = enriched_factory("b", title="Beta findings")
        assert classify(a, b, 0.2) == RelationshipType.SIMILAR
