"""
Deterministic Overlap Resolver.

Turns overlapping detections into a non-overlapping set with fixed rules:
1. Items in different scopes (segments) never conflict
2. Higher type priority wins
3. Same priority  → higher confidence wins
4. Same confidence → longer span wins
5. Full tie        → the earlier item is kept

Used both for raw candidates (debug path) and for entity occurrences
during dictionary refinement. Works on anything exposing
type / start / end / confidence.
"""
import logging
from typing import Callable, Dict, Hashable, Iterable, List, Optional, TypeVar

from piiscan.config.constants import DEFAULT_TYPE_PRIORITIES

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _default_scope(item) -> Hashable:
    return getattr(item, "scope", 0)


def _scope_order(scope: Hashable):
    return (type(scope).__name__, scope)


def _beats(challenger, incumbent, priorities: Dict[str, int]) -> bool:
    """True if *challenger* should replace the overlapping *incumbent*."""
    c_prio = priorities.get(challenger.type, 0)
    i_prio = priorities.get(incumbent.type, 0)
    if c_prio != i_prio:
        return c_prio > i_prio
    if challenger.confidence != incumbent.confidence:
        return challenger.confidence > incumbent.confidence
    return (challenger.end - challenger.start) > (incumbent.end - incumbent.start)


def resolve(
    items: Iterable[T],
    scope_key: Callable[[T], Hashable] = _default_scope,
    priorities: Optional[Dict[str, int]] = None,
) -> List[T]:
    """
    Resolve overlaps independently inside every scope.

    Args:
        items: Detections (may overlap, any order).
        scope_key: Maps an item to its conflict scope.
        priorities: Type → priority; missing types rank 0.

    Returns:
        Non-overlapping items ordered by scope, then start.
    """
    priorities = DEFAULT_TYPE_PRIORITIES if priorities is None else priorities

    partitions: Dict[Hashable, List[tuple]] = {}
    for position, item in enumerate(items):
        partitions.setdefault(scope_key(item), []).append((position, item))

    resolved: List[T] = []
    for scope in sorted(partitions, key=_scope_order):
        ordered = sorted(
            partitions[scope],
            key=lambda p: (
                p[1].start,
                -priorities.get(p[1].type, 0),
                -p[1].confidence,
                -(p[1].end - p[1].start),
                p[0],
            ),
        )

        kept: List[T] = []
        for _, item in ordered:
            if not kept or item.start >= kept[-1].end:
                kept.append(item)
                continue

            last = kept[-1]
            if _beats(item, last, priorities):
                logger.debug("Overlap: %s replaces %s", item, last)
                kept[-1] = item
            else:
                logger.debug("Overlap: %s discarded in favour of %s", item, last)

        resolved.extend(kept)

    return resolved


def pick_primary(candidates: Iterable[T], priorities: Optional[Dict[str, int]] = None) -> Optional[T]:
    """
    Choose the representative among candidates sharing the same text.

    Longer text first, then higher type priority, then higher confidence;
    on a full tie the first candidate wins.
    """
    priorities = DEFAULT_TYPE_PRIORITIES if priorities is None else priorities

    best = None
    best_key = None
    for candidate in candidates:
        key = (len(candidate.text), priorities.get(candidate.type, 0), candidate.confidence)
        if best is None or key > best_key:
            best, best_key = candidate, key
    return best
