"""
TextMap — the concatenated scan buffer and its leaf-to-offset mapping.

Every leaf contributes one Segment; the buffer joins segment texts with a
single separator character so separator positions belong to no segment.
"""
from bisect import bisect_right
from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple


class UnresolvedSpanError(ValueError):
    """Raised when a buffer span maps to no segment of the TextMap."""

    def __init__(self, start: int, end: int):
        super().__init__(f"Span [{start},{end}) does not map to any segment")
        self.start = start
        self.end = end


@dataclass(frozen=True)
class DocumentLeaf:
    """A text-bearing leaf as handed over by the host document walker."""

    leaf_id: str
    text: str
    container: str = ""         # enclosing element name, e.g. "p", "script"
    hidden: bool = False
    inside_link: bool = False
    role: str = ""              # ARIA role of the enclosing landmark, if any


@dataclass(frozen=True)
class Segment:
    """One leaf's text and its [start, end) range in the buffer."""

    index: int
    leaf_id: str
    text: str
    start: int
    end: int
    inside_link: bool = False

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class SegmentSlice:
    """The part of a buffer span that falls inside a single segment."""

    segment: Segment
    overlap_start: int
    overlap_end: int

    @property
    def relative_start(self) -> int:
        return self.overlap_start - self.segment.start

    @property
    def relative_end(self) -> int:
        return self.overlap_end - self.segment.start

    def to_dict(self) -> dict:
        return {
            "leaf_id": self.segment.leaf_id,
            "index": self.segment.index,
            "relative_start": self.relative_start,
            "relative_end": self.relative_end,
        }


@dataclass(frozen=True)
class PageContext:
    """Capitalized words seen in link text and in page chrome (header, footer, nav)."""

    words_in_links: FrozenSet[str] = frozenset()
    words_in_headers_footers: FrozenSet[str] = frozenset()


@dataclass
class TextMap:
    """Concatenated buffer plus ordered, non-overlapping segments."""

    full_text: str = ""
    segments: Tuple[Segment, ...] = ()
    page_context: PageContext = field(default_factory=PageContext)
    _starts: List[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.segments = tuple(self.segments)
        self._starts = [s.start for s in self.segments]

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def is_empty(self) -> bool:
        return not self.segments

    def segment_for_position(self, pos: int) -> Optional[Segment]:
        """Segment containing buffer offset *pos*, or None (separator / out of range)."""
        idx = bisect_right(self._starts, pos) - 1
        if idx < 0:
            return None
        seg = self.segments[idx]
        return seg if seg.start <= pos < seg.end else None

    def segments_for_range(self, start: int, end: int) -> List[SegmentSlice]:
        """
        Slices of every segment intersecting [start, end).

        A span crossing a separator yields one slice per touched segment,
        in buffer order. Empty or out-of-range spans yield [].
        """
        if end <= start or not self.segments:
            return []

        idx = max(bisect_right(self._starts, start) - 1, 0)
        slices: List[SegmentSlice] = []
        for seg in self.segments[idx:]:
            if seg.start >= end:
                break
            if seg.end <= start:
                continue
            slices.append(
                SegmentSlice(
                    segment=seg,
                    overlap_start=max(start, seg.start),
                    overlap_end=min(end, seg.end),
                )
            )
        return slices

    def resolve(self, start: int, end: int) -> List[SegmentSlice]:
        """Like segments_for_range but raises UnresolvedSpanError on no match."""
        slices = self.segments_for_range(start, end)
        if not slices:
            raise UnresolvedSpanError(start, end)
        return slices
