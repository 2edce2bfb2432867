"""
Prometheus Metrics — detection observability.

Exposes counters and histograms for:
- Candidates found per type
- Overlap discards per resolution phase
- Threshold drops per type
- Entities published per type
- Scan phase latency

Usage
-----
    from piiscan.detection.metrics import record_candidates, timed_phase

    with timed_phase("find_candidates"):
        candidates = detector.find_all_candidates(text_map)

    record_candidates(candidates)

Recording can be switched off with PIISCAN_METRICS_ENABLED=false.
"""
from __future__ import annotations

import logging
from collections import Counter as TypeCounter
from contextlib import contextmanager
from typing import Generator, Iterable

from prometheus_client import Counter, Histogram

from piiscan.config import settings

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Raw candidates emitted by recognizers and the scorer, labelled by type.
CANDIDATES_FOUND: Counter = Counter(
    "piiscan_candidates_total",
    "Raw PII candidates emitted by recognizers and the proper-noun scorer",
    ["pii_type"],
)

# Detections removed by the overlap resolver.
OVERLAP_DISCARDS: Counter = Counter(
    "piiscan_overlap_discards_total",
    "Detections discarded by overlap resolution",
    ["phase"],
)

# Entities dropped because their confidence was below the type threshold.
THRESHOLD_DROPS: Counter = Counter(
    "piiscan_threshold_drops_total",
    "Entities dropped by the type-aware confidence threshold",
    ["pii_type"],
)

# Entities published after refinement and type filtering.
ENTITIES_PUBLISHED: Counter = Counter(
    "piiscan_entities_published_total",
    "Entities published to the caller",
    ["pii_type"],
)

# Latency per scan phase (seconds).
PHASE_LATENCY: Histogram = Histogram(
    "piiscan_phase_seconds",
    "Processing time per detection phase in seconds",
    ["phase"],
    buckets=(0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def _count_by_type(items: Iterable) -> TypeCounter:
    return TypeCounter(item.type for item in items)


def record_candidates(candidates: Iterable) -> None:
    """Increment the candidate counter once per candidate type."""
    if not settings.METRICS_ENABLED:
        return
    for pii_type, count in _count_by_type(candidates).items():
        CANDIDATES_FOUND.labels(pii_type=pii_type).inc(count)


def record_overlap_discards(phase: str, count: int) -> None:
    """Add *count* discarded detections for *phase* ("candidates" | "occurrences")."""
    if settings.METRICS_ENABLED and count > 0:
        OVERLAP_DISCARDS.labels(phase=phase).inc(count)


def record_threshold_drop(pii_type: str) -> None:
    if settings.METRICS_ENABLED:
        THRESHOLD_DROPS.labels(pii_type=pii_type).inc()


def record_published(entities: Iterable) -> None:
    if not settings.METRICS_ENABLED:
        return
    for pii_type, count in _count_by_type(entities).items():
        ENTITIES_PUBLISHED.labels(pii_type=pii_type).inc(count)


@contextmanager
def timed_phase(phase: str) -> Generator[None, None, None]:
    """
    Context manager that records phase latency.

    Usage::

        with timed_phase("refine"):
            dictionary.refine()
    """
    if not settings.METRICS_ENABLED:
        yield
        return
    with PHASE_LATENCY.labels(phase=phase).time():
        yield
