"""
Typed Pydantic models for the detector's published output.

These are the contracts handed to the host (highlighting, replacement,
debug panels); internal dataclasses are converted by output_builder.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator


class SegmentRef(BaseModel):
    """Where an occurrence lands inside one document leaf."""

    leaf_id: str
    index: int = Field(..., ge=0)
    relative_start: int = Field(..., ge=0)
    relative_end: int = Field(..., ge=0)


class OccurrenceResult(BaseModel):
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    scope: Union[int, str] = 0
    segments: List[SegmentRef] = Field(default_factory=list)

    @field_validator("end")
    @classmethod
    def validate_end(cls, v: int, info) -> int:
        start = info.data.get("start")
        if start is not None and v < start:
            raise ValueError("end must not precede start")
        return v


class DetectedEntity(BaseModel):
    """A published PII entity with every surviving occurrence."""

    id: str = Field(..., pattern=r"^pii-\d+$")
    type: str
    text: str = Field(..., min_length=1)
    confidence: float = Field(..., ge=0.0, le=1.0)
    threshold: float = Field(..., ge=0.0, le=1.0)
    role: Optional[str] = None
    occurrences: List[OccurrenceResult] = Field(..., min_length=1)
    linked_entities: List[str] = Field(default_factory=list)


class CandidateResult(BaseModel):
    """A resolved candidate as shown by the debug path (no threshold applied)."""

    type: str
    text: str
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    confidence: float = Field(..., ge=0.0, le=1.0)
    scope: Union[int, str] = 0
    role: Optional[str] = None
    threshold: Optional[float] = None
    will_be_protected: Optional[bool] = None
    details: List[str] = Field(default_factory=list)
    metadata: Dict[str, Any] = Field(default_factory=dict)
    origin_signals: Dict[str, float] = Field(default_factory=dict)


class DetectionStats(BaseModel):
    total: int = Field(..., ge=0)
    by_type: Dict[str, int] = Field(default_factory=dict)
    avg_confidence: float = Field(0.0, ge=0.0, le=1.0)
