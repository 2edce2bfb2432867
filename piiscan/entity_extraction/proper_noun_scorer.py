"""
Proper-Noun Scorer — weighted multi-signal heuristic for names and companies.

Finds capitalization-led runs (optional honorific / job title, one or more
capitalized words, optional organizational suffix), strips leading filler
words, then sums the weights of every signal that fires:

    capitalization (always)      unknown-word ratio > 0.5
    honorific/title/suffix       multi-word
    not at sentence start        near an email or phone
    matches nearby email domain  inside a hyperlink
    known location               department name (negative)
    adjective-shaped (negative)  every word also in page links
    every word in header/footer (negative)

The sum is clamped to [0, 1]. A standalone job title ("Senior Engineer")
scores 0; a job-description prefix ("Tech Writer Jane Roe") costs 0.25.
Every candidate is returned, including those below threshold.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Hashable, List, Optional, Sequence

import numpy as np

from piiscan.config.constants import (
    ADJECTIVE_SUFFIX_MIN_LENGTH,
    ADJECTIVE_SUFFIXES,
    CAPITALIZED_WORD,
    COMPANY_SUFFIXES,
    DEPARTMENT_LEAD_VERBS,
    FILLER_WORDS,
    HONORIFICS,
    JOB_TITLES,
    MIN_ADJECTIVE_LENGTH,
    NEARBY_PII_TYPES,
    ORGANIZATION_SUFFIXES,
    STANDALONE_TITLE_ROLES,
    STANDALONE_TITLE_SENIORITY,
    UNKNOWN_WORD_RATIO_TRIGGER,
    UNLOADED_DICTIONARY_RATIO,
)
from piiscan.config.detection_config import DetectionConfig
from piiscan.data.locations import LocationGazetteer, get_location_gazetteer
from piiscan.dictionary.common_words import CommonWordDictionary
from piiscan.models.candidate import Candidate, ProperNounCandidate

logger = logging.getLogger(__name__)

# ==========================================================================
# Patterns
# ==========================================================================
_TITLES = "|".join(HONORIFICS + JOB_TITLES)
_WORD = CAPITALIZED_WORD
_NOT_TITLE = rf"(?!(?:{_TITLES})\b)"

CAPITALIZED_RUN = re.compile(
    rf"(?<![A-Za-z'])"
    rf"(?:(?:{_TITLES})\.?\s+)?"
    rf"{_NOT_TITLE}{_WORD}"
    rf"(?:\s+(?:&\s+)?{_NOT_TITLE}{_WORD})*"
    rf"(?:\s+(?:{'|'.join(ORGANIZATION_SUFFIXES)})\.?)?"
    rf"(?![A-Za-z'])"
)

HONORIFIC_PREFIX = re.compile(rf"^(?:{'|'.join(HONORIFICS)})\b\.?\s+", re.IGNORECASE)
JOB_TITLE_PREFIX = re.compile(rf"^(?:{'|'.join(JOB_TITLES)})\b\.?\s+", re.IGNORECASE)
ORGANIZATION_SUFFIX = re.compile(rf"\b(?:{'|'.join(ORGANIZATION_SUFFIXES)})\.?\s*$", re.IGNORECASE)
TRAILING_ORGANIZATION_SUFFIX = re.compile(
    rf"\s+(?:{'|'.join(ORGANIZATION_SUFFIXES)})\.?$", re.IGNORECASE
)
DOMAIN_SUFFIX = re.compile(
    r"\s+(?:inc|corp|llc|ltd|limited|company|co\.|corporation|gmbh|sa|plc|ag)$", re.IGNORECASE
)

STANDALONE_JOB_TITLE = [
    re.compile(
        rf"^(?:{'|'.join(STANDALONE_TITLE_SENIORITY)})\s+(?:{'|'.join(STANDALONE_TITLE_ROLES)})$",
        re.IGNORECASE,
    ),
    re.compile(r"^(?:Tech|Senior Tech|Lead Tech|Staff Tech)\s+(?:Writer|Reporter|Lead|Manager)$", re.IGNORECASE),
]

_DESCRIPTION_ROLES = (
    "Engineer|Developer|Designer|Analyst|Writer|Reporter|Editor|Architect"
    "|Scientist|Consultant|Technician|Specialist"
)
JOB_DESCRIPTION_PREFIX = [
    re.compile(
        rf"^(?:{'|'.join(STANDALONE_TITLE_SENIORITY)}|Tech)\s+(?:{_DESCRIPTION_ROLES})\s+",
        re.IGNORECASE,
    ),
    re.compile(rf"^(?:{_DESCRIPTION_ROLES}|Tech)\s+(?!Inc|Corp|LLC|Ltd)", re.IGNORECASE),
]

_LEAD_VERB = re.compile(rf"^(?:{'|'.join(DEPARTMENT_LEAD_VERBS)})\s+")
_SENTENCE_END = ".!?"


@dataclass
class ScoringContext:
    """Where the scored text sits inside the scan buffer."""

    scope: Hashable = 0
    offset: int = 0                                     # segment start in the buffer
    nearby_pii: Sequence[Candidate] = field(default_factory=list)
    inside_link: bool = False
    words_in_links: FrozenSet[str] = frozenset()
    words_in_headers_footers: FrozenSet[str] = frozenset()


class ProperNounScorer:
    """
    Scores capitalized spans as names / company names.

    Weights and thresholds come from DetectionConfig; the common-word
    dictionary and location gazetteer are injected so tests can swap them.
    """

    def __init__(
        self,
        config: Optional[DetectionConfig] = None,
        common_words: Optional[CommonWordDictionary] = None,
        gazetteer: Optional[LocationGazetteer] = None,
    ):
        self.config = config or DetectionConfig()
        self.common_words = common_words
        self.gazetteer = gazetteer or get_location_gazetteer()

    @property
    def threshold(self) -> float:
        return self.config.proper_noun_threshold

    def score_candidates(self, text: str, context: Optional[ScoringContext] = None) -> List[ProperNounCandidate]:
        """
        Score every capitalization-led run in *text*.

        Args:
            text: Segment text.
            context: Scope, buffer offset, nearby email/phone candidates, link
                flag and page-wide link / header-footer words.

        Returns:
            All candidates (buffer coordinates), below-threshold ones included.
        """
        if not text:
            return []
        context = context or ScoringContext()

        candidates: List[ProperNounCandidate] = []
        for match in CAPITALIZED_RUN.finditer(text):
            phrase, start = self._strip_filler(match.group(0), match.start())
            if not phrase:
                continue
            candidates.append(self._score_phrase(text, phrase, start, context))

        logger.debug("Scored %d proper-noun candidates in scope %s", len(candidates), context.scope)
        return candidates

    def detect(self, text: str, context: Optional[ScoringContext] = None) -> List[ProperNounCandidate]:
        """Candidates at or above the configured threshold."""
        return [c for c in self.score_candidates(text, context) if c.will_be_protected]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _strip_filler(phrase: str, start: int):
        words = phrase.split(None, 1)
        if words[0] in FILLER_WORDS:
            stripped = words[1] if len(words) > 1 else ""
            start += len(phrase) - len(stripped)
            phrase = stripped
        if phrase.startswith("& "):
            stripped = phrase[2:].lstrip()
            start += len(phrase) - len(stripped)
            phrase = stripped
        return phrase, start

    def _score_phrase(self, text: str, phrase: str, start: int, context: ScoringContext) -> ProperNounCandidate:
        weights = self.config.weights
        end = start + len(phrase)
        abs_start, abs_end = context.offset + start, context.offset + end

        has_honorific = bool(HONORIFIC_PREFIX.match(phrase))
        has_job_title = bool(JOB_TITLE_PREFIX.match(phrase))
        has_company_suffix = bool(ORGANIZATION_SUFFIX.search(phrase))
        word_count = len(HONORIFIC_PREFIX.sub("", phrase).split())
        words = self._content_words(phrase)
        unknown_ratio = self.unknown_word_ratio(phrase)
        is_adjective = bool(words) and all(self.is_adjective(w) for w in words)
        in_page_links = bool(words) and all(w in context.words_in_links for w in words)
        in_header_footer = bool(words) and all(w in context.words_in_headers_footers for w in words)
        nearby = self._nearby_pii(abs_start, abs_end, context.nearby_pii)
        domain_match = self._matches_email_domain(phrase, nearby)
        is_department = self.is_department_name(phrase)
        is_location = self.gazetteer.is_known_location(phrase)
        standalone_title = any(p.match(phrase) for p in STANDALONE_JOB_TITLE)
        description_prefix = any(p.match(phrase) for p in JOB_DESCRIPTION_PREFIX)

        signals: Dict[str, float] = {"capitalization": weights.capitalization}
        details: List[str] = []

        if unknown_ratio > UNKNOWN_WORD_RATIO_TRIGGER:
            signals["unknown_words"] = weights.unknown_words
            details.append(f"{round(unknown_ratio * 100)}% unknown")

        if has_honorific or has_job_title or has_company_suffix:
            signals["context_clue"] = weights.context_clue
            clues = [
                name for name, fired in (
                    ("honorific", has_honorific),
                    ("job_title", has_job_title),
                    ("company_suffix", has_company_suffix),
                ) if fired
            ]
            details.append("+".join(clues))

        if word_count >= 2:
            signals["multi_word"] = weights.multi_word
            details.append(f"{word_count} words")

        if not self._is_sentence_start(text, start):
            signals["not_sentence_start"] = weights.not_sentence_start

        if nearby:
            signals["near_pii"] = weights.near_pii
            details.append("near_pii")

        if domain_match:
            signals["email_domain_match"] = weights.email_domain_match
            details.append("company_from_email")

        if context.inside_link:
            signals["inside_link"] = weights.inside_link
            details.append("inside_link")

        if is_location:
            signals["known_location"] = weights.known_location
            details.append("known_location")

        if is_department:
            signals["department_name"] = weights.department_name
            details.append("generic_department")

        if is_adjective:
            signals["non_noun_pos"] = weights.non_noun_pos
            details.append("adjective")

        if in_page_links:
            signals["appears_in_page_links"] = weights.appears_in_page_links
            details.append("word_in_page_links")

        if in_header_footer:
            signals["appears_in_header_footer"] = weights.appears_in_header_footer
            details.append("word_in_header_footer")

        score = float(np.clip(sum(signals.values()), 0.0, 1.0))

        if standalone_title:
            signals["standalone_job_title"] = -score
            details.append("standalone_job_title")
            score = 0.0
        elif description_prefix:
            penalty = weights.job_description_prefix
            signals["job_description_prefix"] = penalty
            details.append("job_description_prefix")
            score = max(0.0, score + penalty)

        return ProperNounCandidate(
            type="properNoun",
            text=phrase,
            start=abs_start,
            end=abs_end,
            confidence=round(score, 4),
            scope=context.scope,
            origin_signals=signals,
            role=self._role(has_honorific, has_job_title, has_company_suffix, word_count),
            details=details,
            threshold=self.threshold,
        )

    def unknown_word_ratio(self, phrase: str) -> float:
        """Share of words (title prefix and trailing suffix removed) outside the dictionary."""
        words = self._content_words(phrase)
        if not words:
            return 0.0
        if self.common_words is None or not self.common_words.is_loaded:
            return UNLOADED_DICTIONARY_RATIO
        unknown = sum(1 for w in words if not self.common_words.is_common(w))
        return unknown / len(words)

    @staticmethod
    def is_adjective(word: str) -> bool:
        """Adjective-shaped word by suffix ("Canadian", "Historic"); short words never are."""
        normalized = word.lower()
        if len(normalized) < MIN_ADJECTIVE_LENGTH:
            return False
        return any(
            normalized.endswith(suffix)
            and len(normalized) >= ADJECTIVE_SUFFIX_MIN_LENGTH.get(suffix, MIN_ADJECTIVE_LENGTH)
            for suffix in ADJECTIVE_SUFFIXES
        )

    @staticmethod
    def _content_words(phrase: str) -> List[str]:
        cleaned = HONORIFIC_PREFIX.sub("", phrase)
        cleaned = JOB_TITLE_PREFIX.sub("", cleaned)
        cleaned = TRAILING_ORGANIZATION_SUFFIX.sub("", cleaned)
        return [w for w in cleaned.split() if w != "&"]

    def is_department_name(self, phrase: str) -> bool:
        """Generic department/team names ("Human Resources", "Marketing Team")."""
        normalized = phrase.strip().rstrip(".,;!?").lower()
        prefixes = self.config.department_prefixes
        suffixes = self.config.department_suffixes

        for candidate in (normalized, _LEAD_VERB.sub("", normalized)):
            if candidate in prefixes:
                return True
            head, _, last = candidate.rpartition(" ")
            if last in suffixes and head.strip() in prefixes:
                return True
        return False

    @staticmethod
    def _is_sentence_start(text: str, start: int) -> bool:
        if start == 0:
            return True
        before = text[start - 1]
        if before in _SENTENCE_END:
            return True
        return before == " " and start > 1 and text[start - 2] in _SENTENCE_END

    def _nearby_pii(self, start: int, end: int, pii: Sequence[Candidate]) -> List[Candidate]:
        window = self.config.nearby_pii_window
        lo, hi = start - window, end + window
        return [c for c in pii if c.type in NEARBY_PII_TYPES and c.start >= lo and c.end <= hi]

    @staticmethod
    def _matches_email_domain(phrase: str, nearby: Sequence[Candidate]) -> bool:
        domains = set()
        for c in nearby:
            if c.type != "email" or "@" not in c.text:
                continue
            label = c.text.split("@", 1)[1].split(".", 1)[0].lower()
            if label:
                domains.add(label)
        if not domains:
            return False
        normalized = DOMAIN_SUFFIX.sub("", phrase.lower()).strip()
        return normalized in domains

    @staticmethod
    def _role(has_honorific: bool, has_job_title: bool, has_company_suffix: bool, word_count: int) -> str:
        if has_company_suffix:
            return "company"
        if has_honorific or has_job_title:
            return "person"
        if word_count == 1:
            return "company_or_person"
        return "person"
