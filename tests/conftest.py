"""
Shared test fixtures for the detection test suite.
"""
import pytest

from piiscan.config.detection_config import DetectionConfig
from piiscan.dictionary.common_words import CommonWordDictionary
from piiscan.detection.detector import PIIDetector
from piiscan.entity_extraction.pattern_matcher import PatternExtractor
from piiscan.entity_extraction.proper_noun_scorer import ProperNounScorer
from piiscan.models.candidate import PatternCandidate, ProperNounCandidate
from piiscan.models.text_map import DocumentLeaf


# ==========================================================================
# Configuration
# ==========================================================================

@pytest.fixture
def detection_config():
    return DetectionConfig(proper_noun_threshold=0.75, nearby_pii_window=50, phone_region="US")


# ==========================================================================
# Dictionaries
# ==========================================================================

@pytest.fixture
def common_words():
    """Bundled word list, independent of PIISCAN_COMMON_WORDS_FILE."""
    return CommonWordDictionary(source_file="").load()


# ==========================================================================
# Pipeline components
# ==========================================================================

@pytest.fixture
def extractor(detection_config):
    return PatternExtractor(detection_config)


@pytest.fixture
def scorer(detection_config, common_words):
    return ProperNounScorer(detection_config, common_words)


@pytest.fixture
def detector(detection_config, common_words):
    return PIIDetector(detection_config, common_words=common_words)


# ==========================================================================
# Documents
# ==========================================================================

@pytest.fixture
def mock_leaves():
    return [
        DocumentLeaf(leaf_id="p-1", text="Contact John Doe", container="p"),
        DocumentLeaf(leaf_id="p-2", text="for details.", container="p"),
        DocumentLeaf(leaf_id="s-1", text="var x = 'jane@example.com';", container="script"),
        DocumentLeaf(leaf_id="p-3", text="   ", container="p"),
        DocumentLeaf(leaf_id="p-4", text="Invoice total $1,199.99 due Jan 17, 2026.", container="p"),
    ]


# ==========================================================================
# Candidate factories
# ==========================================================================

@pytest.fixture
def make_candidate():
    def _make(pii_type, start, end, confidence=1.0, scope=0, text=None):
        text = text if text is not None else "x" * (end - start)
        if pii_type == "properNoun":
            return ProperNounCandidate(
                type=pii_type, text=text, start=start, end=end,
                confidence=confidence, scope=scope,
            )
        return PatternCandidate(
            type=pii_type, text=text, start=start, end=end,
            confidence=confidence, scope=scope,
        )
    return _make
