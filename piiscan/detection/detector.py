"""
PII Detector — public facade of the detection pipeline.

Phases of one scan:
    1. Segment the document into a TextMap
    2. Find candidates of every type (recognizers + proper-noun scorer)
    3. Build the entity dictionary (group by text)
    4. Refine (overlap resolution, type-aware thresholds)
    5. Filter by the caller's enabled types

Detection runs for every type regardless of what the caller enabled;
filtering happens last so that, for example, the date "Dec. 9" still
blocks a proper-noun "Dec" when only proper nouns are enabled.
"""
import logging
from typing import Dict, Iterable, List, Optional, Union

import numpy as np

from piiscan.config.constants import DEFAULT_MIN_CONFIDENCE, TYPE_ALIASES
from piiscan.config.detection_config import DetectionConfig
from piiscan.data.locations import LocationGazetteer, get_location_gazetteer
from piiscan.detection.metrics import (
    record_candidates,
    record_overlap_discards,
    record_published,
    timed_phase,
)
from piiscan.detection.output_builder import build_candidate_result, build_detection_output
from piiscan.dictionary.common_words import CommonWordDictionary, get_common_word_dictionary
from piiscan.dictionary.entity_dictionary import EntityDictionary
from piiscan.entity_extraction.overlap_resolver import resolve
from piiscan.entity_extraction.pattern_matcher import PatternExtractor, normalize_type
from piiscan.entity_extraction.pipeline import find_all_candidates
from piiscan.entity_extraction.proper_noun_scorer import ProperNounScorer
from piiscan.entity_extraction.segmenter import (
    LeafInput,
    SkipPredicate,
    default_skip_predicate,
    segment,
    segment_text,
)
from piiscan.models.candidate import Candidate
from piiscan.models.detection_io import CandidateResult, DetectedEntity, DetectionStats
from piiscan.models.text_map import TextMap

logger = logging.getLogger(__name__)

DocumentInput = Union[str, TextMap, Iterable[LeafInput]]


def normalize_enabled_types(names: Optional[Iterable[str]]) -> Optional[List[str]]:
    """
    Map UI type names (singular or plural) to internal type names.

    Unknown names are passed through unchanged; None stays None (all types).
    """
    if names is None:
        return None
    normalized: List[str] = []
    for name in names:
        internal = normalize_type(name)
        if internal not in TYPE_ALIASES.values():
            logger.debug("Unrecognized type name passed through: %s", name)
        if internal not in normalized:
            normalized.append(internal)
    return normalized


class PIIDetector:
    """
    Detects PII in plain text or segmented documents.

    The common-word dictionary is shared process-wide and loaded once;
    pass a CommonWordDictionary to use a private one.
    """

    def __init__(
        self,
        config: Optional[DetectionConfig] = None,
        common_words: Optional[CommonWordDictionary] = None,
        gazetteer: Optional[LocationGazetteer] = None,
    ):
        self._config = config or DetectionConfig()
        self._common_words = common_words
        self.gazetteer = gazetteer or get_location_gazetteer()
        self.extractor = PatternExtractor(self._config, self.gazetteer)
        self.scorer = ProperNounScorer(self._config, common_words, self.gazetteer)

    # ------------------------------------------------------------------
    # Lifecycle & configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> DetectionConfig:
        return self._config

    @property
    def common_words(self) -> Optional[CommonWordDictionary]:
        return self._common_words

    @property
    def is_initialized(self) -> bool:
        return self._common_words is not None and self._common_words.is_loaded

    def initialize(self) -> "PIIDetector":
        """Load the common-word dictionary (once)."""
        if self._common_words is None:
            self._common_words = get_common_word_dictionary()
        else:
            self._common_words.load()
        self.scorer.common_words = self._common_words
        return self

    async def ainitialize(self) -> "PIIDetector":
        """Async variant of initialize()."""
        if self._common_words is None:
            self._common_words = CommonWordDictionary()
        await self._common_words.initialize()
        self.scorer.common_words = self._common_words
        return self

    @property
    def proper_noun_threshold(self) -> float:
        return self._config.proper_noun_threshold

    def set_proper_noun_threshold(self, value: float) -> None:
        """
        Replace the proper-noun threshold for subsequent scans.

        Raises:
            pydantic.ValidationError: value outside [0, 1].
        """
        self._config = self._config.with_proper_noun_threshold(value)
        self.extractor.config = self._config
        self.scorer.config = self._config
        logger.info("Proper-noun threshold set to %.2f", value)

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _to_text_map(self, document: DocumentInput, skip_leaf: SkipPredicate) -> TextMap:
        if isinstance(document, TextMap):
            return document
        if isinstance(document, str):
            return segment_text(document)
        return segment(document, skip_leaf=skip_leaf)

    def find_all_candidates(self, text_map: TextMap) -> List[Candidate]:
        """Raw candidates of every type, in buffer coordinates."""
        with timed_phase("find_candidates"):
            candidates = find_all_candidates(text_map, self.extractor, self.scorer)
        record_candidates(candidates)
        logger.info("Phase 2: %d raw candidates from %d segments", len(candidates), len(text_map))
        return candidates

    def scan(
        self,
        document: DocumentInput,
        skip_leaf: SkipPredicate = default_skip_predicate,
    ) -> EntityDictionary:
        """Segment, detect, build and refine; no type filtering."""
        with timed_phase("segment"):
            text_map = self._to_text_map(document, skip_leaf)

        dictionary = EntityDictionary(self._config)
        if text_map.is_empty:
            return dictionary

        candidates = self.find_all_candidates(text_map)

        logger.info("Phase 3: building dictionary from %d candidates", len(candidates))
        with timed_phase("build"):
            dictionary.build(candidates, text_map)

        with timed_phase("refine"):
            dictionary.refine()
        logger.info("Phase 4: %d entities after refinement", len(dictionary))
        return dictionary

    def detect_document(
        self,
        document: DocumentInput,
        enabled_types: Optional[Iterable[str]] = None,
        skip_leaf: SkipPredicate = default_skip_predicate,
    ) -> List[DetectedEntity]:
        """
        Published entities for a document, filtered to *enabled_types*.

        Args:
            document: Leaves, a TextMap, or a plain string.
            enabled_types: Type names (UI spellings accepted); None means all.
            skip_leaf: Leaf filter used when segmenting.

        Returns:
            Non-overlapping entities ordered by first occurrence.
        """
        self._ensure_initialized()
        dictionary = self.scan(document, skip_leaf=skip_leaf)
        entities = dictionary.enabled(normalize_enabled_types(enabled_types))
        record_published(entities)
        logger.info("Phase 5: %d entities published", len(entities))
        return build_detection_output(entities)

    def detect(self, text: str, enabled_types: Optional[Iterable[str]] = None) -> List[DetectedEntity]:
        """Published entities for a single string (one segment)."""
        if not text:
            return []
        return self.detect_document(segment_text(text), enabled_types)

    def detect_with_debug(
        self,
        document: DocumentInput,
        enabled_types: Optional[Iterable[str]] = None,
        skip_leaf: SkipPredicate = default_skip_predicate,
    ) -> List[CandidateResult]:
        """
        Overlap-resolved candidates without any threshold, for inspection.

        Below-threshold proper nouns are kept (with will_be_protected=False)
        so hosts can show why a span was or was not protected.
        """
        self._ensure_initialized()
        text_map = self._to_text_map(document, skip_leaf)
        if text_map.is_empty:
            return []

        candidates = self.find_all_candidates(text_map)
        resolved = resolve(candidates, priorities=self._config.type_priorities)
        record_overlap_discards("candidates", len(candidates) - len(resolved))

        wanted = normalize_enabled_types(enabled_types)
        if wanted is not None:
            resolved = [c for c in resolved if c.type in wanted]
        return [build_candidate_result(c) for c in resolved]

    def _ensure_initialized(self) -> None:
        if not self.is_initialized:
            self.initialize()

    # ------------------------------------------------------------------
    # Helpers over published results
    # ------------------------------------------------------------------

    @staticmethod
    def get_stats(entities: Iterable[DetectedEntity]) -> DetectionStats:
        entities = list(entities)
        by_type: Dict[str, int] = {}
        for e in entities:
            by_type[e.type] = by_type.get(e.type, 0) + 1
        avg = float(np.mean([e.confidence for e in entities])) if entities else 0.0
        return DetectionStats(total=len(entities), by_type=by_type, avg_confidence=round(avg, 4))

    @staticmethod
    def filter_by_confidence(
        entities: Iterable[DetectedEntity],
        min_confidence: float = DEFAULT_MIN_CONFIDENCE,
    ) -> List[DetectedEntity]:
        return [e for e in entities if e.confidence >= min_confidence]
