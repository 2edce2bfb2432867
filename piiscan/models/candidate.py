"""
Candidate models — raw detections before grouping and refinement.

PatternCandidate carries recognizer metadata (currency, unit, phone region…);
ProperNounCandidate carries the heuristic role, the score breakdown notes and
the threshold it will be judged against.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List


class InvalidSpanError(ValueError):
    """Raised when a candidate is built with end < start."""

    def __init__(self, start: int, end: int, text: str = ""):
        super().__init__(f"Invalid span [{start},{end}) for '{text}': end < start")
        self.start = start
        self.end = end


@dataclass
class Candidate:
    """A single detected span with its confidence and provenance."""

    type: str
    text: str
    start: int
    end: int
    confidence: float
    scope: Hashable = 0                  # owning segment index
    origin_signals: Dict[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise InvalidSpanError(self.start, self.end, self.text)

    def overlaps(self, other: "Candidate") -> bool:
        """Check if two candidates have overlapping spans."""
        return not (self.end <= other.start or other.end <= self.start)

    def span_length(self) -> int:
        return self.end - self.start

    def to_dict(self) -> dict:
        return {
            "type": self.type,
            "text": self.text,
            "start": self.start,
            "end": self.end,
            "confidence": self.confidence,
            "scope": self.scope,
            "origin_signals": dict(self.origin_signals),
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}('{self.text}', {self.type}, "
            f"[{self.start},{self.end}], {self.confidence:.2f})"
        )


@dataclass(repr=False)
class PatternCandidate(Candidate):
    """Candidate produced by a structured recognizer."""

    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["metadata"] = dict(self.metadata)
        return data


@dataclass(repr=False)
class ProperNounCandidate(Candidate):
    """Candidate produced by the capitalization-led heuristic scorer."""

    role: str = "person"                 # "company" | "person" | "company_or_person"
    details: List[str] = field(default_factory=list)
    threshold: float = 0.75

    @property
    def will_be_protected(self) -> bool:
        return self.confidence >= self.threshold

    def to_dict(self) -> dict:
        data = super().to_dict()
        data.update(
            role=self.role,
            details=list(self.details),
            threshold=self.threshold,
            will_be_protected=self.will_be_protected,
        )
        return data
