"""
Candidate Pipeline — runs every recognizer and the scorer over a TextMap.

Pipeline (per segment, buffer coordinates, scope = segment index):
    1. Structured recognizers (email, phone, money, …, location, custom)
    2. Proper-noun scorer, fed with the buffer-level email/phone
       candidates for its "near other PII" and domain signals, and with
       the page-wide link and header/footer word sets

No filtering by enabled type happens here: every type takes part in
overlap resolution so a disabled high-priority type still blocks a
lower-priority false positive on the same characters.
"""
from typing import List

from piiscan.config.constants import NEARBY_PII_TYPES
from piiscan.entity_extraction.pattern_matcher import PatternExtractor
from piiscan.entity_extraction.proper_noun_scorer import ProperNounScorer, ScoringContext
from piiscan.models.candidate import Candidate, PatternCandidate
from piiscan.models.text_map import TextMap


def find_all_candidates(
    text_map: TextMap,
    extractor: PatternExtractor,
    scorer: ProperNounScorer,
) -> List[Candidate]:
    """
    Collect raw candidates of every type for the whole document.

    Args:
        text_map: Segmented document.
        extractor: Structured recognizers.
        scorer: Proper-noun heuristic scorer.

    Returns:
        Pattern candidates followed by proper-noun candidates, each group in
        segment order.
    """
    pattern_candidates: List[PatternCandidate] = []
    for seg in text_map.segments:
        pattern_candidates.extend(extractor.extract(seg.text, scope=seg.index, offset=seg.start))

    nearby_pii = [c for c in pattern_candidates if c.type in NEARBY_PII_TYPES]
    page = text_map.page_context

    proper_nouns = []
    for seg in text_map.segments:
        context = ScoringContext(
            scope=seg.index,
            offset=seg.start,
            nearby_pii=nearby_pii,
            inside_link=seg.inside_link,
            words_in_links=page.words_in_links,
            words_in_headers_footers=page.words_in_headers_footers,
        )
        proper_nouns.extend(scorer.score_candidates(seg.text, context))

    return pattern_candidates + proper_nouns
