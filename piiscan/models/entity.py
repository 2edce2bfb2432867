"""
Entity model — one distinct PII text with all of its occurrences.
"""
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Tuple

from piiscan.models.text_map import SegmentSlice


@dataclass
class Occurrence:
    """One place in the buffer where an entity's text was detected."""

    start: int
    end: int
    scope: Hashable = 0
    segments: Tuple[SegmentSlice, ...] = ()

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "end": self.end,
            "scope": self.scope,
            "segments": [s.to_dict() for s in self.segments],
        }


@dataclass
class Entity:
    """A published (or pending) PII entity grouped by exact text."""

    id: str
    type: str
    text: str
    confidence: float
    threshold: float
    role: Optional[str] = None
    occurrences: List[Occurrence] = field(default_factory=list)
    linked_entities: List[str] = field(default_factory=list)
    origin_signals: Dict[str, float] = field(default_factory=dict)

    @property
    def meets_threshold(self) -> bool:
        return self.confidence >= self.threshold

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "type": self.type,
            "text": self.text,
            "confidence": self.confidence,
            "threshold": self.threshold,
            "role": self.role,
            "occurrences": [o.to_dict() for o in self.occurrences],
            "linked_entities": list(self.linked_entities),
        }

    def __repr__(self) -> str:
        return f"Entity({self.id}, '{self.text}', {self.type}, x{len(self.occurrences)})"
