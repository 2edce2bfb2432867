"""
Text Segmenter — builds the scan buffer from document leaves.

Leaves are visited in document order; empty/whitespace leaves and leaves
rejected by the skip predicate contribute nothing. Kept leaves are joined
with a single space and each one records its [start, end) buffer range.

The page context (capitalized words in links and in header/footer chrome)
is gathered from every visible leaf, skipped ones included.
"""
import logging
import re
from typing import Callable, Iterable, List, Set, Tuple, Union

from piiscan.config.constants import (
    CAPITALIZED_WORD,
    HEADER_FOOTER_CONTAINERS,
    HEADER_FOOTER_ROLES,
    LINK_CONTAINER,
    SEGMENT_SEPARATOR,
    SKIPPED_CONTAINERS,
    SKIPPED_ROLES,
)
from piiscan.models.text_map import DocumentLeaf, PageContext, Segment, TextMap

logger = logging.getLogger(__name__)

_PAGE_WORD = re.compile(rf"(?<![A-Za-z']){CAPITALIZED_WORD}(?![A-Za-z'])")

LeafInput = Union[DocumentLeaf, Tuple[str, str]]
SkipPredicate = Callable[[DocumentLeaf], bool]


def default_skip_predicate(leaf: DocumentLeaf) -> bool:
    """Skip hidden leaves and non-content containers (scripts, nav, labels…)."""
    return (
        leaf.hidden
        or leaf.container.lower() in SKIPPED_CONTAINERS
        or leaf.role.lower() in SKIPPED_ROLES
    )


def _is_page_chrome(leaf: DocumentLeaf) -> bool:
    return leaf.container.lower() in HEADER_FOOTER_CONTAINERS or leaf.role.lower() in HEADER_FOOTER_ROLES


def _as_leaf(item: LeafInput) -> DocumentLeaf:
    if isinstance(item, DocumentLeaf):
        return item
    leaf_id, text = item
    return DocumentLeaf(leaf_id=str(leaf_id), text=text)


def segment(
    document: Iterable[LeafInput],
    skip_leaf: SkipPredicate = default_skip_predicate,
) -> TextMap:
    """
    Concatenate the document's text leaves into one TextMap.

    Args:
        document: Leaves in document order (DocumentLeaf or (leaf_id, text)).
        skip_leaf: Predicate rejecting leaves that must not be scanned.

    Returns:
        TextMap whose full_text is the kept leaf texts joined by one space.
    """
    parts: List[str] = []
    segments: List[Segment] = []
    offset = 0
    skipped = 0
    link_words: Set[str] = set()
    chrome_words: Set[str] = set()

    for item in document:
        leaf = _as_leaf(item)
        if not leaf.text or not leaf.text.strip():
            continue
        if not leaf.hidden:
            if leaf.inside_link or leaf.container.lower() == LINK_CONTAINER:
                link_words.update(_PAGE_WORD.findall(leaf.text))
            if _is_page_chrome(leaf):
                chrome_words.update(_PAGE_WORD.findall(leaf.text))
        if skip_leaf(leaf):
            skipped += 1
            continue

        if segments:
            offset += len(SEGMENT_SEPARATOR)
        segments.append(
            Segment(
                index=len(segments),
                leaf_id=leaf.leaf_id,
                text=leaf.text,
                start=offset,
                end=offset + len(leaf.text),
                inside_link=leaf.inside_link,
            )
        )
        parts.append(leaf.text)
        offset += len(leaf.text)

    logger.debug("Segmented %d leaves (%d skipped)", len(segments), skipped)
    return TextMap(
        full_text=SEGMENT_SEPARATOR.join(parts),
        segments=tuple(segments),
        page_context=PageContext(
            words_in_links=frozenset(link_words),
            words_in_headers_footers=frozenset(chrome_words),
        ),
    )


def segment_text(text: str, leaf_id: str = "text-0") -> TextMap:
    """Single-segment TextMap for callers holding a plain string."""
    return segment([DocumentLeaf(leaf_id=leaf_id, text=text)], skip_leaf=lambda _leaf: False)
