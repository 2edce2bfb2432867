"""
Detection configuration — immutable, validated settings for one detector.

Overrides arrive as a JSON document (dict, JSON string or file path), are
checked against DETECTION_CONFIG_SCHEMA, merged over the defaults and frozen
into a DetectionConfig. Changing the proper-noun threshold produces a new
config instead of mutating the shared one.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, FrozenSet, Optional, Union

from jsonschema import ValidationError, validate
from pydantic import BaseModel, ConfigDict, Field

from piiscan.config import settings
from piiscan.config.constants import (
    DEFAULT_PATTERN_THRESHOLD,
    DEFAULT_SCORING_WEIGHTS,
    DEFAULT_TYPE_PRIORITIES,
    DEPARTMENT_PREFIXES,
    DEPARTMENT_SUFFIXES,
    MAX_NEARBY_PII_WINDOW,
    MIN_NEARBY_PII_WINDOW,
    PII_TYPES,
    UNKNOWN_TYPE_THRESHOLD,
)
from piiscan.config.schemas import DETECTION_CONFIG_SCHEMA

logger = logging.getLogger(__name__)


class ScoringWeights(BaseModel):
    """Weights added to a proper-noun score when the matching signal fires."""

    model_config = ConfigDict(frozen=True)

    capitalization: float = DEFAULT_SCORING_WEIGHTS["capitalization"]
    unknown_words: float = DEFAULT_SCORING_WEIGHTS["unknown_words"]
    context_clue: float = DEFAULT_SCORING_WEIGHTS["context_clue"]
    multi_word: float = DEFAULT_SCORING_WEIGHTS["multi_word"]
    not_sentence_start: float = DEFAULT_SCORING_WEIGHTS["not_sentence_start"]
    near_pii: float = DEFAULT_SCORING_WEIGHTS["near_pii"]
    email_domain_match: float = DEFAULT_SCORING_WEIGHTS["email_domain_match"]
    inside_link: float = DEFAULT_SCORING_WEIGHTS["inside_link"]
    known_location: float = DEFAULT_SCORING_WEIGHTS["known_location"]
    department_name: float = DEFAULT_SCORING_WEIGHTS["department_name"]
    job_description_prefix: float = DEFAULT_SCORING_WEIGHTS["job_description_prefix"]
    non_noun_pos: float = DEFAULT_SCORING_WEIGHTS["non_noun_pos"]
    appears_in_page_links: float = DEFAULT_SCORING_WEIGHTS["appears_in_page_links"]
    appears_in_header_footer: float = DEFAULT_SCORING_WEIGHTS["appears_in_header_footer"]


class DetectionConfig(BaseModel):
    """Read-only configuration shared by the recognizers, scorer and refiner."""

    model_config = ConfigDict(frozen=True)

    proper_noun_threshold: float = Field(
        settings.PROPER_NOUN_THRESHOLD, ge=0.0, le=1.0,
        description="Minimum score for a proper-noun entity to be published.",
    )
    pattern_threshold: float = Field(
        DEFAULT_PATTERN_THRESHOLD, ge=0.0, le=1.0,
        description="Minimum confidence for every other known type.",
    )
    nearby_pii_window: int = Field(
        settings.NEARBY_PII_WINDOW, ge=MIN_NEARBY_PII_WINDOW, le=MAX_NEARBY_PII_WINDOW,
        description="Characters around a proper noun searched for emails/phones.",
    )
    phone_region: str = Field(settings.PHONE_REGION, min_length=2, max_length=2)
    type_priorities: Dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_TYPE_PRIORITIES))
    type_thresholds: Dict[str, float] = Field(default_factory=dict)
    weights: ScoringWeights = Field(default_factory=ScoringWeights)
    department_prefixes: FrozenSet[str] = DEPARTMENT_PREFIXES
    department_suffixes: FrozenSet[str] = DEPARTMENT_SUFFIXES

    def priority_for(self, pii_type: str) -> int:
        """Overlap priority of *pii_type*; unknown types rank 0."""
        return self.type_priorities.get(pii_type, 0)

    def threshold_for(self, pii_type: str) -> float:
        """Publication threshold of *pii_type*; unknown types are never filtered."""
        if pii_type == "properNoun":
            return self.proper_noun_threshold
        if pii_type in self.type_thresholds:
            return self.type_thresholds[pii_type]
        if pii_type in PII_TYPES:
            return self.pattern_threshold
        return UNKNOWN_TYPE_THRESHOLD

    def with_proper_noun_threshold(self, value: float) -> "DetectionConfig":
        """Return a validated copy using *value* as the proper-noun threshold."""
        data = self.model_dump()
        data["proper_noun_threshold"] = value
        return DetectionConfig.model_validate(data)


def _read_source(source: Union[dict, str, Path]) -> dict:
    if isinstance(source, dict):
        return source
    if isinstance(source, Path) or not str(source).lstrip().startswith("{"):
        path = Path(source)
        try:
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except OSError as e:
            raise ValueError(f"Cannot read detection config '{path}': {e}") from e
        except json.JSONDecodeError as e:
            raise ValueError(f"Detection config '{path}' is not valid JSON: {e}") from e
    try:
        return json.loads(source)
    except json.JSONDecodeError as e:
        raise ValueError(f"Detection config is not valid JSON: {e}") from e


def load_detection_config(source: Optional[Union[dict, str, Path]] = None) -> DetectionConfig:
    """
    Build a DetectionConfig from an override document.

    Priorities, thresholds and weights are merged key-by-key over the
    defaults; every other field replaces the default wholesale.

    Args:
        source: Override dict, JSON string, path to a JSON file, or None.

    Returns:
        Frozen DetectionConfig.

    Raises:
        ValueError: the document cannot be read or violates the schema.
    """
    if source is None:
        return DetectionConfig()

    overrides = _read_source(source)

    try:
        validate(instance=overrides, schema=DETECTION_CONFIG_SCHEMA)
    except ValidationError as e:
        logger.error("Detection config rejected: %s", e.message)
        raise ValueError(f"Invalid detection config: {e.message}") from e

    data = dict(overrides)
    data["type_priorities"] = {**DEFAULT_TYPE_PRIORITIES, **overrides.get("type_priorities", {})}
    data["weights"] = {**DEFAULT_SCORING_WEIGHTS, **overrides.get("weights", {})}
    for key in ("department_prefixes", "department_suffixes"):
        if key in overrides:
            data[key] = frozenset(v.lower() for v in overrides[key])

    config = DetectionConfig.model_validate(data)
    logger.info(
        "Detection config loaded (proper_noun_threshold=%.2f, window=%d)",
        config.proper_noun_threshold,
        config.nearby_pii_window,
    )
    return config
