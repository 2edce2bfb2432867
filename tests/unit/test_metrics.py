"""
Unit tests for piiscan.detection.metrics.

Counters are read back through the default prometheus registry; each test
compares before/after values since the registry is process-wide.
"""
from __future__ import annotations

import pytest
from prometheus_client import REGISTRY

from piiscan.config import settings
from piiscan.detection import metrics as m


def _sample(name: str, **labels) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


@pytest.fixture
def metrics_on(monkeypatch):
    monkeypatch.setattr(settings, "METRICS_ENABLED", True)


@pytest.fixture
def metrics_off(monkeypatch):
    monkeypatch.setattr(settings, "METRICS_ENABLED", False)


class TestMetricDefinitions:
    def test_all_public_helpers_present(self):
        for name in (
            "record_candidates",
            "record_overlap_discards",
            "record_threshold_drop",
            "record_published",
            "timed_phase",
            "CANDIDATES_FOUND",
            "OVERLAP_DISCARDS",
            "THRESHOLD_DROPS",
            "ENTITIES_PUBLISHED",
            "PHASE_LATENCY",
        ):
            assert hasattr(m, name), f"Missing public symbol: {name}"


class TestMetricHelpers:
    def test_record_candidates_counts_per_type(self, metrics_on, make_candidate):
        before_email = _sample("piiscan_candidates_total", pii_type="email")
        before_date = _sample("piiscan_candidates_total", pii_type="date")

        m.record_candidates([
            make_candidate("email", 0, 5),
            make_candidate("email", 6, 10),
            make_candidate("date", 11, 15),
        ])

        assert _sample("piiscan_candidates_total", pii_type="email") == before_email + 2
        assert _sample("piiscan_candidates_total", pii_type="date") == before_date + 1

    def test_record_overlap_discards(self, metrics_on):
        before = _sample("piiscan_overlap_discards_total", phase="occurrences")
        m.record_overlap_discards("occurrences", 3)
        m.record_overlap_discards("occurrences", 0)
        assert _sample("piiscan_overlap_discards_total", phase="occurrences") == before + 3

    def test_record_threshold_drop(self, metrics_on):
        before = _sample("piiscan_threshold_drops_total", pii_type="properNoun")
        m.record_threshold_drop("properNoun")
        assert _sample("piiscan_threshold_drops_total", pii_type="properNoun") == before + 1

    def test_record_published(self, metrics_on, make_candidate):
        before = _sample("piiscan_entities_published_total", pii_type="phone")
        m.record_published([make_candidate("phone", 0, 12)])
        assert _sample("piiscan_entities_published_total", pii_type="phone") == before + 1

    def test_disabled_metrics_record_nothing(self, metrics_off):
        before = _sample("piiscan_threshold_drops_total", pii_type="ssn")
        m.record_threshold_drop("ssn")
        assert _sample("piiscan_threshold_drops_total", pii_type="ssn") == before


class TestTimedPhase:
    def test_observation_recorded(self, metrics_on):
        before = _sample("piiscan_phase_seconds_count", phase="unit-test")
        with m.timed_phase("unit-test"):
            pass
        assert _sample("piiscan_phase_seconds_count", phase="unit-test") == before + 1

    def test_exceptions_propagate(self):
        with pytest.raises(RuntimeError):
            with m.timed_phase("unit-test-error"):
                raise RuntimeError("boom")

    def test_disabled_records_nothing(self, metrics_off):
        before = _sample("piiscan_phase_seconds_count", phase="unit-test-off")
        with m.timed_phase("unit-test-off"):
            pass
        assert _sample("piiscan_phase_seconds_count", phase="unit-test-off") == before
