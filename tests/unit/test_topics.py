"""
Unit tests for covered-topic extraction.

Run: pytest tests/unit/test_topics.py -v
"""

import sys
from pathlib import Path

# Add project root to Python path (for direct invocation)
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from agents.followup.topics import MAX_COVERED_TOPICS, STOPWORDS, build_covered_topics


class TestBuildCoveredTopics:
    """Tests for build_covered_topics."""

    def test_empty_history(self):
        assert build_covered_topics([]) == []
        assert build_covered_topics(None) == []

    def test_tokens_are_lowercased_in_discovery_order(self):
        history = [{"question": "Full name", "answer": "Jane Doe"}]
        assert build_covered_topics(history) == ["full", "name", "jane", "doe"]

    def test_stopwords_dropped(self):
        history = [{"question": "Did you use the Kafka and Redis for that?", "answer": ""}]
        assert build_covered_topics(history) == ["did", "use", "kafka", "redis"]

    def test_short_tokens_dropped(self):
        history = [{"question": "Go or k8s?", "answer": "AI ML"}]
        assert build_covered_topics(history) == ["k8s"]

    def test_tech_punctuation_kept(self):
        history = [{"question": "Which stack?", "answer": "node.js c++ ci_cd ci/cd"}]
        assert build_covered_topics(history) == ["which", "stack", "node.js", "c++", "ci_cd"]

    def test_duplicates_removed(self):
        history = [
            {"question": "Kafka at Acme?", "answer": "Kafka consumers"},
            {"question": "More on kafka?", "answer": "KAFKA again"},
        ]
        topics = build_covered_topics(history)
        assert topics.count("kafka") == 1
        assert topics[0] == "kafka"

    def test_missing_fields_treated_as_empty(self):
        history = [{"question": None, "answer": "Kubernetes"}, {"answer": "Terraform"}, {}]
        assert build_covered_topics(history) == ["kubernetes", "terraform"]

    def test_truncated_to_limit(self):
        history = [{"question": "", "answer": " ".join(f"tok{i}" for i in range(300))}]
        topics = build_covered_topics(history)
        assert len(topics) == MAX_COVERED_TOPICS
        assert topics[0] == "tok0"
        assert topics[-1] == f"tok{MAX_COVERED_TOPICS - 1}"

    def test_bounded_and_stopword_free_for_twelve_turns(self):
        words = "the and for with you your this that from " * 3
        history = [
            {"question": f"{words} question{i} about service{i}?", "answer": f"{words} " + " ".join(f"word{i}x{j}" for j in range(20))}
            for i in range(12)
        ]
        topics = build_covered_topics(history)
        assert len(topics) <= MAX_COVERED_TOPICS
        assert not STOPWORDS.intersection(topics)
