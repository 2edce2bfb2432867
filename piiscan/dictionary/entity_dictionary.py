"""
Entity Dictionary — groups candidates by text, then refines the set.

Two phases:
    build()   one entity per distinct text, one occurrence per candidate
    refine()  overlap resolution over occurrences (per segment),
              type-aware threshold filter, related-entity linking

refine() is idempotent: a refined dictionary is left unchanged by a
second call.
"""
import logging
from dataclasses import dataclass
from typing import Dict, Hashable, Iterable, Iterator, List, Optional

from piiscan.config.detection_config import DetectionConfig
from piiscan.detection.metrics import record_overlap_discards, record_threshold_drop
from piiscan.entity_extraction.overlap_resolver import pick_primary, resolve
from piiscan.entity_extraction.pattern_matcher import normalize_type
from piiscan.models.candidate import Candidate
from piiscan.models.entity import Entity, Occurrence
from piiscan.models.text_map import TextMap

logger = logging.getLogger(__name__)


@dataclass
class _OccurrenceRef:
    """An occurrence seen through its entity's type and confidence."""

    type: str
    start: int
    end: int
    confidence: float
    scope: Hashable
    occurrence: Occurrence

    def __repr__(self) -> str:
        return f"{self.type}[{self.start},{self.end}]@{self.scope}"


class EntityDictionary:
    """Distinct PII texts of one scan with their occurrences."""

    def __init__(self, config: Optional[DetectionConfig] = None):
        self.config = config or DetectionConfig()
        self._entities: Dict[str, Entity] = {}

    # ------------------------------------------------------------------
    # Phase 1: build
    # ------------------------------------------------------------------

    def build(self, candidates: Iterable[Candidate], text_map: TextMap) -> "EntityDictionary":
        """
        Group *candidates* by exact text into entities.

        The representative candidate of a group (longer text, then higher
        type priority, then higher confidence) decides type, confidence and
        role. Every candidate becomes one occurrence, mapped to segments.

        Raises:
            UnresolvedSpanError: a candidate span maps to no segment.
        """
        groups: Dict[str, List[Candidate]] = {}
        for candidate in candidates:
            groups.setdefault(candidate.text, []).append(candidate)

        self._entities = {}
        for number, (text, group) in enumerate(groups.items(), start=1):
            primary = pick_primary(group, self.config.type_priorities)
            entity = Entity(
                id=f"pii-{number}",
                type=primary.type,
                text=text,
                confidence=primary.confidence,
                threshold=self.config.threshold_for(primary.type),
                role=getattr(primary, "role", None),
                origin_signals=dict(primary.origin_signals),
            )
            for candidate in group:
                slices = text_map.resolve(candidate.start, candidate.end)
                entity.occurrences.append(
                    Occurrence(
                        start=candidate.start,
                        end=candidate.end,
                        scope=slices[0].segment.index,
                        segments=tuple(slices),
                    )
                )
            self._entities[entity.id] = entity

        logger.info(
            "Dictionary built: %d entities from %d candidates",
            len(self._entities),
            sum(len(g) for g in groups.values()),
        )
        return self

    # ------------------------------------------------------------------
    # Phase 2: refine
    # ------------------------------------------------------------------

    def refine(self) -> "EntityDictionary":
        """Resolve overlapping occurrences, then drop below-threshold entities."""
        self._resolve_overlaps()
        self._apply_thresholds()
        self._link_related_entities()
        return self

    def _resolve_overlaps(self) -> None:
        refs = [
            _OccurrenceRef(
                type=entity.type,
                start=occ.start,
                end=occ.end,
                confidence=entity.confidence,
                scope=occ.scope,
                occurrence=occ,
            )
            for entity in self._entities.values()
            for occ in entity.occurrences
        ]
        survivors = resolve(refs, scope_key=lambda r: r.scope, priorities=self.config.type_priorities)
        surviving = {id(r.occurrence) for r in survivors}
        record_overlap_discards("occurrences", len(refs) - len(survivors))

        for entity_id in list(self._entities):
            entity = self._entities[entity_id]
            entity.occurrences = [o for o in entity.occurrences if id(o) in surviving]
            if not entity.occurrences:
                logger.debug("Entity %s lost every occurrence to overlaps", entity)
                del self._entities[entity_id]

    def _apply_thresholds(self) -> None:
        for entity_id in list(self._entities):
            entity = self._entities[entity_id]
            entity.threshold = self.config.threshold_for(entity.type)
            if not entity.meets_threshold:
                logger.debug(
                    "Entity %s below threshold (%.2f < %.2f)",
                    entity, entity.confidence, entity.threshold,
                )
                record_threshold_drop(entity.type)
                del self._entities[entity_id]

    def _link_related_entities(self) -> None:
        """Reserved for linking related mentions ("John Doe" / "Doe"); leaves links empty."""
        return None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def all(self) -> List[Entity]:
        return list(self._entities.values())

    def get(self, entity_id: str) -> Optional[Entity]:
        return self._entities.get(entity_id)

    def by_type(self, pii_type: str) -> List[Entity]:
        wanted = normalize_type(pii_type)
        return [e for e in self._entities.values() if e.type == wanted]

    def enabled(self, enabled_types: Optional[Iterable[str]] = None) -> List[Entity]:
        """Entities whose type is in *enabled_types* (UI spellings accepted); None means all."""
        if enabled_types is None:
            return self.all()
        wanted = {normalize_type(t) for t in enabled_types}
        return [e for e in self._entities.values() if e.type in wanted]

    def stats(self) -> dict:
        by_type: Dict[str, int] = {}
        for entity in self._entities.values():
            by_type[entity.type] = by_type.get(entity.type, 0) + 1
        return {
            "total": len(self._entities),
            "by_type": by_type,
            "occurrences": sum(len(e.occurrences) for e in self._entities.values()),
        }

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities.values()))
