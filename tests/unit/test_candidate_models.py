"""
Unit tests for candidate and entity models.
"""
import pytest

from piiscan.models.candidate import InvalidSpanError, PatternCandidate, ProperNounCandidate
from piiscan.models.entity import Entity, Occurrence


class TestCandidate:
    def test_overlap_is_half_open(self, make_candidate):
        a = make_candidate("email", 0, 5)
        b = make_candidate("email", 5, 9)
        c = make_candidate("email", 4, 6)

        assert not a.overlaps(b)
        assert a.overlaps(c) and c.overlaps(b)

    def test_span_length(self, make_candidate):
        assert make_candidate("url", 3, 10).span_length() == 7

    def test_zero_length_allowed(self, make_candidate):
        assert make_candidate("custom", 4, 4).span_length() == 0

    def test_inverted_span_error_carries_bounds(self):
        with pytest.raises(InvalidSpanError) as exc_info:
            PatternCandidate(type="email", text="x", start=9, end=2, confidence=1.0)

        assert (exc_info.value.start, exc_info.value.end) == (9, 2)
        assert isinstance(exc_info.value, ValueError)

    def test_pattern_candidate_dict(self):
        candidate = PatternCandidate(
            type="money", text="$5", start=0, end=2, confidence=1.0,
            metadata={"currency": "USD"},
        )
        data = candidate.to_dict()

        assert data["metadata"] == {"currency": "USD"}
        assert data["scope"] == 0

    def test_proper_noun_protection(self):
        weak = ProperNounCandidate(type="properNoun", text="Zorblax", start=0, end=7, confidence=0.6)
        strong = ProperNounCandidate(
            type="properNoun", text="Zorblax", start=0, end=7, confidence=0.6, threshold=0.5,
        )

        assert weak.will_be_protected is False
        assert strong.will_be_protected is True
        assert strong.to_dict()["will_be_protected"] is True


class TestEntity:
    def test_meets_threshold(self):
        entity = Entity(id="pii-1", type="date", text="Jan 5", confidence=0.8, threshold=0.5)
        assert entity.meets_threshold

    def test_to_dict(self):
        entity = Entity(
            id="pii-2", type="email", text="a@b.io", confidence=1.0, threshold=0.5,
            occurrences=[Occurrence(start=5, end=11)],
        )
        data = entity.to_dict()

        assert data["occurrences"] == [{"start": 5, "end": 11, "scope": 0, "segments": []}]
        assert data["linked_entities"] == []
        assert "pii-2" in repr(entity)
