"""
JSON Schemas for detection configuration overrides and published output.

Two schemas:
1. DETECTION_CONFIG_SCHEMA  — host-supplied override document
2. DETECTION_RESULT_SCHEMA  — published entity list
"""
from piiscan.config.constants import (
    MAX_NEARBY_PII_WINDOW,
    MIN_NEARBY_PII_WINDOW,
    PII_TYPES,
)

_UNIT_INTERVAL: dict = {"type": "number", "minimum": 0, "maximum": 1}

# =============================================================================
# 1. Detection configuration override
# =============================================================================
DETECTION_CONFIG_SCHEMA: dict = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "proper_noun_threshold": _UNIT_INTERVAL,
        "pattern_threshold": _UNIT_INTERVAL,
        "nearby_pii_window": {
            "type": "integer",
            "minimum": MIN_NEARBY_PII_WINDOW,
            "maximum": MAX_NEARBY_PII_WINDOW,
        },
        "phone_region": {
            "type": "string",
            "pattern": "^[A-Z]{2}$",
        },
        "type_priorities": {
            "type": "object",
            "additionalProperties": {"type": "integer"},
        },
        "type_thresholds": {
            "type": "object",
            "additionalProperties": _UNIT_INTERVAL,
        },
        "weights": {
            "type": "object",
            "additionalProperties": False,
            "properties": {
                "capitalization": {"type": "number"},
                "unknown_words": {"type": "number"},
                "context_clue": {"type": "number"},
                "multi_word": {"type": "number"},
                "not_sentence_start": {"type": "number"},
                "near_pii": {"type": "number"},
                "email_domain_match": {"type": "number"},
                "inside_link": {"type": "number"},
                "known_location": {"type": "number"},
                "department_name": {"type": "number"},
                "job_description_prefix": {"type": "number"},
                "non_noun_pos": {"type": "number"},
                "appears_in_page_links": {"type": "number"},
                "appears_in_header_footer": {"type": "number"},
            },
        },
        "department_prefixes": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
        "department_suffixes": {
            "type": "array",
            "items": {"type": "string", "minLength": 1},
        },
    },
}

# =============================================================================
# 2. Published detection result
# =============================================================================
DETECTION_RESULT_SCHEMA: dict = {
    "type": "array",
    "items": {
        "type": "object",
        "additionalProperties": False,
        "required": ["id", "type", "text", "confidence", "occurrences"],
        "properties": {
            "id": {"type": "string", "pattern": "^pii-\\d+$"},
            "type": {"type": "string", "enum": PII_TYPES + ["custom"]},
            "text": {"type": "string", "minLength": 1},
            "confidence": _UNIT_INTERVAL,
            "threshold": _UNIT_INTERVAL,
            "role": {"type": ["string", "null"]},
            "occurrences": {
                "type": "array",
                "minItems": 1,
                "items": {
                    "type": "object",
                    "required": ["start", "end", "segments"],
                    "properties": {
                        "start": {"type": "integer", "minimum": 0},
                        "end": {"type": "integer", "minimum": 0},
                        "scope": {"type": ["integer", "string"]},
                        "segments": {
                            "type": "array",
                            "minItems": 1,
                            "items": {
                                "type": "object",
                                "required": ["leaf_id", "relative_start", "relative_end"],
                                "properties": {
                                    "leaf_id": {"type": "string"},
                                    "index": {"type": "integer"},
                                    "relative_start": {"type": "integer", "minimum": 0},
                                    "relative_end": {"type": "integer", "minimum": 0},
                                },
                            },
                        },
                    },
                },
            },
            "linked_entities": {
                "type": "array",
                "items": {"type": "string"},
            },
        },
    },
}
