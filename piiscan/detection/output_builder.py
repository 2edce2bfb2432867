"""
Output Builder — internal entities/candidates → published result models.

Converts the dataclasses used during a scan into the pydantic contracts of
piiscan.models.detection_io and checks JSON payloads against
DETECTION_RESULT_SCHEMA.
"""
from typing import Iterable, List

from jsonschema import Draft7Validator

from piiscan.config.schemas import DETECTION_RESULT_SCHEMA
from piiscan.models.candidate import Candidate
from piiscan.models.detection_io import (
    CandidateResult,
    DetectedEntity,
    OccurrenceResult,
    SegmentRef,
)
from piiscan.models.entity import Entity

_RESULT_VALIDATOR = Draft7Validator(DETECTION_RESULT_SCHEMA)


def build_entity_result(entity: Entity) -> DetectedEntity:
    return DetectedEntity(
        id=entity.id,
        type=entity.type,
        text=entity.text,
        confidence=entity.confidence,
        threshold=entity.threshold,
        role=entity.role,
        occurrences=[
            OccurrenceResult(
                start=occ.start,
                end=occ.end,
                scope=occ.scope,
                segments=[
                    SegmentRef(
                        leaf_id=s.segment.leaf_id,
                        index=s.segment.index,
                        relative_start=s.relative_start,
                        relative_end=s.relative_end,
                    )
                    for s in occ.segments
                ],
            )
            for occ in entity.occurrences
        ],
        linked_entities=list(entity.linked_entities),
    )


def build_detection_output(entities: Iterable[Entity]) -> List[DetectedEntity]:
    """Published entities, ordered by their first occurrence."""
    ordered = sorted(entities, key=lambda e: min((o.start for o in e.occurrences), default=0))
    return [build_entity_result(e) for e in ordered]


def build_candidate_result(candidate: Candidate) -> CandidateResult:
    """Debug view of a resolved candidate, including its score breakdown."""
    return CandidateResult(**candidate.to_dict())


def to_payload(results: Iterable[DetectedEntity]) -> List[dict]:
    """JSON-ready list of published entities."""
    return [r.model_dump(mode="json") for r in results]


def validate_detection_output(payload: List[dict]) -> List[str]:
    """
    Check a published payload against DETECTION_RESULT_SCHEMA.

    Returns:
        Error messages (empty when the payload is valid).
    """
    return [
        f"{'/'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
        for error in _RESULT_VALIDATOR.iter_errors(payload)
    ]
