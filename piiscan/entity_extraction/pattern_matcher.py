"""
Pattern Extractor — high-precision structured PII recognizers.

One compiled pattern (or pattern + validator) per type. Each recognizer
returns non-overlapping matches for its own type only; overlaps between
types are left to the overlap resolver, so the "17" inside "Jan 17, 2026"
is still reported as a quantity here.

Validation:
    phone       → phonenumbers (region, number type, validity; invalid kept)
    creditCard  → Luhn checksum via python-stdnum (failures dropped)
    location    → keyword pattern + world-location gazetteer
"""
import logging
import re
from typing import Callable, Dict, Iterable, List, Optional, Pattern

import phonenumbers
from phonenumbers import PhoneNumberType
from stdnum import luhn

from piiscan.config.constants import (
    CURRENCY_CODES,
    CURRENCY_SYMBOLS,
    GAZETTEER_LOCATION_CONFIDENCE,
    PATTERN_CONFIDENCE,
    PATTERN_TYPES,
    TYPE_ALIASES,
)
from piiscan.config.detection_config import DetectionConfig
from piiscan.data.locations import LocationGazetteer, get_location_gazetteer
from piiscan.models.candidate import PatternCandidate

logger = logging.getLogger(__name__)

# ==========================================================================
# Compiled patterns
# ==========================================================================
_MONTHS = (
    r"January|February|March|April|May|June|July|August|September|October|November|December"
    r"|Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Sept|Oct|Nov|Dec"
)

PATTERNS: Dict[str, Pattern] = {
    "email": re.compile(r"\b[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}\b"),
    "phone": re.compile(r"(\+\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}\b"),
    "money": re.compile(
        r"[$€£¥₹]\s*\d{1,3}(?:\s*,\s*\d{3})*(?:\s*\.\s*\d{2,})?"
        r"|\d{1,3}(?:\s*,\s*\d{3})*(?:\s*\.\s*\d{2,})?\s*(?:" + "|".join(CURRENCY_CODES) + r")\b",
        re.IGNORECASE,
    ),
    "url": re.compile(
        r"https?://(?:www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b[-a-zA-Z0-9()@:%_+.~#?&/=]*"
        r"|www\.[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b",
        re.IGNORECASE,
    ),
    "ipv4": re.compile(
        r"\b(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}"
        r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\b"
    ),
    "ipv6": re.compile(r"\b(?:[A-F0-9]{1,4}:){7}[A-F0-9]{1,4}\b", re.IGNORECASE),
    "creditCard": re.compile(r"\b(?:\d{4}[-\s]?){3}\d{4}\b"),
    # Month names are matched case-sensitively so the verb "may" is not a date.
    "date": re.compile(
        r"\b(?:\d{1,2}[-/]\d{1,2}[-/]\d{2,4}"
        r"|\d{4}[-/]\d{1,2}[-/]\d{1,2}"
        r"|(?:" + _MONTHS + r")(?:\.?\s+\d{1,2}(?:,?\s+\d{4})?)?"
        r"|(?:19|20)\d{2})\b"
    ),
    "address": re.compile(
        r"\b\d{1,5}\s+(?:[A-Z][a-z]+\s*){1,4}"
        r"(?i:Street|St|Avenue|Ave|Road|Rd|Boulevard|Blvd|Lane|Ln|Drive|Dr|Court|Ct|Circle|Cir|Way|Place|Pl)\b"
    ),
    "ssn": re.compile(r"\b\d{3}-\d{2}-\d{4}\b"),
    "quantity": re.compile(
        r"(?:(?:\btotal\b|\bcount\b|\border\b|\bitem\b|\bquantity\b|\bamount\b|\bnumber\b)[:\s]+)?"
        r"(?<!\.)\b\d{1,3}(?:,\d{3})*(?:\.\d+)?"
        r"(?:\s*(?:items|units|pieces|qty|count|kg|lbs|oz|g|ml|l|meters|feet|inches|cm|mm))?\b",
        re.IGNORECASE,
    ),
    "location": re.compile(
        r"\b(?:[A-Z][a-z]+\s+){0,3}"
        r"(?:Bay|Valley|Area|Region|Islands?|Coast|Peninsula|County|Province|District|Metropolitan"
        r"|Metro|Territory|Highlands?|Plains?|Mountains?|Hills?|Ocean|Sea|River|Lake|Gulf|Desert"
        r"|Forest|Falls|Canyon|Peak|Reef|Strait|Channel|Basin|Plateau|Ridge|Grove|Creek|Range)\b"
    ),
}

_CAPITALIZED_RUN = re.compile(r"\b[A-Z][a-z]+(?:\s+[A-Z][a-z]+)*\b")
_WORD = re.compile(r"[A-Z][a-z]+")
_NUMBER = re.compile(r"\d{1,3}(?:\s*,\s*\d{3})*(?:\s*\.\s*\d+)?")
_CURRENCY_SYMBOL = re.compile(r"[$€£¥₹]")
_CURRENCY_CODE = re.compile(r"\b(?:" + "|".join(CURRENCY_CODES) + r")\b", re.IGNORECASE)
_QUANTITY_UNIT = re.compile(
    r"\b(?:items|units|pieces|qty|count|kg|lbs|oz|g|ml|l|meters|feet|inches|cm|mm)\b", re.IGNORECASE
)
_URL_TRAILING = ".,;:!?"

_PHONE_TYPE_NAMES: Dict[int, str] = {
    getattr(PhoneNumberType, name): name
    for name in (
        "FIXED_LINE", "MOBILE", "FIXED_LINE_OR_MOBILE", "TOLL_FREE", "PREMIUM_RATE",
        "SHARED_COST", "VOIP", "PERSONAL_NUMBER", "PAGER", "UAN", "VOICEMAIL", "UNKNOWN",
    )
}

# Leading digits → card network
_CARD_BRANDS = [
    (re.compile(r"^4"), "visa"),
    (re.compile(r"^(?:5[1-5]|2(?:2[2-9]|[3-6]\d|7[01]|720))"), "mastercard"),
    (re.compile(r"^3[47]"), "amex"),
    (re.compile(r"^(?:6011|65|64[4-9])"), "discover"),
    (re.compile(r"^35"), "jcb"),
]


def normalize_type(name: str) -> str:
    """Map a UI spelling ("emails", "ips") to the internal type name."""
    return TYPE_ALIASES.get(name, name)


def _parse_number(raw: str) -> float:
    cleaned = re.sub(r"[\s,]", "", raw)
    return float(cleaned) if cleaned else 0.0


def _decimal_places(raw: str) -> int:
    compact = re.sub(r"\s", "", raw)
    return len(compact.split(".", 1)[1]) if "." in compact else 0


def money_metadata(value: str) -> dict:
    """Currency, numeric value and formatting of a money match."""
    symbol = _CURRENCY_SYMBOL.search(value)
    code = _CURRENCY_CODE.search(value)
    number = _NUMBER.search(value)

    if symbol:
        currency = CURRENCY_SYMBOLS[symbol.group(0)]
        symbol_position = "before" if number is None or symbol.start() < number.start() else "after"
    elif code:
        currency = code.group(0).upper()
        symbol_position = "after"
    else:
        currency = "USD"
        symbol_position = "before"

    raw_number = number.group(0) if number else ""
    return {
        "currency": currency,
        "symbol": symbol.group(0) if symbol else None,
        "numeric_value": _parse_number(raw_number),
        "has_commas": "," in value,
        "has_symbol": bool(symbol or code),
        "symbol_position": symbol_position,
        "decimal_places": _decimal_places(raw_number),
    }


def quantity_metadata(value: str) -> dict:
    """Unit, numeric value and formatting of a quantity match."""
    digits = re.search(r"\d{1,3}(?:,\d{3})*(?:\.\d+)?", value)
    unit = _QUANTITY_UNIT.search(value[digits.end():]) if digits else None
    raw_number = digits.group(0) if digits else ""
    return {
        "unit": unit.group(0) if unit else "",
        "numeric_value": _parse_number(raw_number),
        "has_commas": "," in raw_number,
        "decimal_places": _decimal_places(raw_number),
    }


def phone_metadata(value: str, region: str) -> dict:
    """Validity, region and line type from phonenumbers; invalid numbers are flagged."""
    cleaned = " ".join(value.split())
    try:
        number = phonenumbers.parse(cleaned, region)
    except phonenumbers.NumberParseException as e:
        return {"is_valid": False, "is_international": cleaned.startswith("+"), "parse_error": str(e)}

    is_valid = phonenumbers.is_valid_number(number)
    metadata = {
        "is_valid": is_valid,
        "is_international": cleaned.startswith("+"),
        "country_calling_code": number.country_code,
        "national_number": str(number.national_number),
    }
    if is_valid:
        metadata["region"] = phonenumbers.region_code_for_number(number)
        metadata["number_type"] = _PHONE_TYPE_NAMES.get(phonenumbers.number_type(number), "UNKNOWN")
    return metadata


def card_brand(digits: str) -> str:
    for pattern, brand in _CARD_BRANDS:
        if pattern.match(digits):
            return brand
    return "unknown"


class PatternExtractor:
    """
    Runs the structured recognizers over one piece of text.

    Candidates are produced in buffer coordinates: a recognizer working on a
    segment's text adds *offset* (the segment start) to every match and tags
    it with *scope* (the segment index).
    """

    def __init__(
        self,
        config: Optional[DetectionConfig] = None,
        gazetteer: Optional[LocationGazetteer] = None,
    ):
        self.config = config or DetectionConfig()
        self.gazetteer = gazetteer or get_location_gazetteer()
        self.custom_patterns: Dict[str, Pattern] = {}
        self._finders: Dict[str, Callable[[str], Iterable[tuple]]] = {
            "email": self._find_emails,
            "phone": self._find_phones,
            "money": self._find_money,
            "quantity": self._find_quantities,
            "url": self._find_urls,
            "ipAddress": self._find_ip_addresses,
            "ssn": lambda text: self._find_plain("ssn", text),
            "creditCard": self._find_credit_cards,
            "date": lambda text: self._find_plain("date", text),
            "address": lambda text: self._find_plain("address", text),
            "location": self._find_locations,
        }

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def extract(
        self,
        text: str,
        types: Optional[Iterable[str]] = None,
        scope=0,
        offset: int = 0,
    ) -> List[PatternCandidate]:
        """
        Run every requested recognizer (all of them, plus custom patterns, by default).

        Args:
            text: Text to scan (usually one segment).
            types: Type names (internal or UI spellings); None means all.
            scope: Scope key stamped on every candidate.
            offset: Added to every match position.

        Returns:
            Candidates sorted by start position.
        """
        if not text:
            return []

        wanted = PATTERN_TYPES + ["custom"] if types is None else [normalize_type(t) for t in types]

        candidates: List[PatternCandidate] = []
        for pii_type in wanted:
            candidates.extend(self.match_type(text, pii_type, scope=scope, offset=offset))

        candidates.sort(key=lambda c: c.start)
        return candidates

    def match_type(self, text: str, pii_type: str, scope=0, offset: int = 0) -> List[PatternCandidate]:
        """Matches of a single type; an unknown type yields [] with a warning."""
        pii_type = normalize_type(pii_type)

        if pii_type == "custom":
            return self._match_custom(text, scope, offset)

        finder = self._finders.get(pii_type)
        if finder is None:
            logger.warning("No pattern found for type: %s", pii_type)
            return []

        return [
            self._candidate(pii_type, value, start, scope, offset, metadata, confidence)
            for value, start, metadata, confidence in finder(text)
        ]

    def first_match(self, text: str, pii_type: str) -> Optional[PatternCandidate]:
        matches = self.match_type(text, pii_type)
        return matches[0] if matches else None

    def test(self, text: str, pii_type: str) -> bool:
        return bool(self.match_type(text, pii_type))

    def find_locations(self, text: str) -> List[PatternCandidate]:
        """Hybrid location detection (keyword pattern first, then gazetteer)."""
        return self.match_type(text, "location")

    @staticmethod
    def validate_pattern(pattern: str) -> Optional[str]:
        """Return the compile error message for *pattern*, or None if it is valid."""
        try:
            re.compile(pattern)
        except re.error as e:
            return str(e)
        return None

    def add_custom_pattern(self, name: str, pattern: str) -> bool:
        """Register a host-supplied regex; invalid patterns are logged and skipped."""
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            logger.warning("Invalid custom pattern '%s' (%s): %s", name, pattern, e)
            return False
        self.custom_patterns[name] = compiled
        logger.info("Custom pattern registered: %s", name)
        return True

    def remove_custom_pattern(self, name: str) -> None:
        self.custom_patterns.pop(name, None)

    # ------------------------------------------------------------------
    # Recognizers: each yields (value, start, metadata, confidence)
    # ------------------------------------------------------------------

    def _candidate(self, pii_type, value, start, scope, offset, metadata, confidence=None) -> PatternCandidate:
        if confidence is None:
            confidence = PATTERN_CONFIDENCE.get(pii_type, PATTERN_CONFIDENCE["custom"])
        return PatternCandidate(
            type=pii_type,
            text=value,
            start=offset + start,
            end=offset + start + len(value),
            confidence=confidence,
            scope=scope,
            origin_signals={f"pattern:{pii_type}": confidence},
            metadata=metadata,
        )

    def _find_plain(self, key: str, text: str):
        for m in PATTERNS[key].finditer(text):
            yield m.group(0), m.start(), {}, None

    def _find_emails(self, text: str):
        for m in PATTERNS["email"].finditer(text):
            value = m.group(0)
            yield value, m.start(), {"domain": value.split("@", 1)[1]}, None

    def _find_phones(self, text: str):
        for m in PATTERNS["phone"].finditer(text):
            value = m.group(0)
            yield value, m.start(), phone_metadata(value, self.config.phone_region), None

    def _find_money(self, text: str):
        for m in PATTERNS["money"].finditer(text):
            value = m.group(0)
            yield value, m.start(), money_metadata(value), None

    def _find_quantities(self, text: str):
        for m in PATTERNS["quantity"].finditer(text):
            value = m.group(0)
            yield value, m.start(), quantity_metadata(value), None

    def _find_urls(self, text: str):
        for m in PATTERNS["url"].finditer(text):
            value = m.group(0).rstrip(_URL_TRAILING)
            if value:
                yield value, m.start(), {}, None

    def _find_ip_addresses(self, text: str):
        for version, key in ((4, "ipv4"), (6, "ipv6")):
            for m in PATTERNS[key].finditer(text):
                yield m.group(0), m.start(), {"version": version}, None

    def _find_credit_cards(self, text: str):
        for m in PATTERNS["creditCard"].finditer(text):
            value = m.group(0)
            digits = re.sub(r"[\s-]", "", value)
            if not luhn.is_valid(digits):
                logger.debug("Card-like number failed Luhn check, skipped")
                continue
            yield value, m.start(), {"card_type": card_brand(digits), "is_valid": True}, None

    def _find_locations(self, text: str):
        seen: List[range] = []

        def _is_free(start: int, end: int) -> bool:
            return all(end <= r.start or start >= r.stop for r in seen)

        found = []
        for m in PATTERNS["location"].finditer(text):
            seen.append(range(m.start(), m.end()))
            found.append((m.group(0), m.start(), {"match_type": "pattern"}, PATTERN_CONFIDENCE["location"]))

        for m in _CAPITALIZED_RUN.finditer(text):
            phrase, start, end = m.group(0), m.start(), m.end()
            if not _is_free(start, end):
                continue
            if self.gazetteer.is_known_location(phrase):
                seen.append(range(start, end))
                found.append((phrase, start, {"match_type": "gazetteer"}, GAZETTEER_LOCATION_CONFIDENCE))
            elif " " in phrase:
                for w in _WORD.finditer(phrase):
                    w_start, w_end = start + w.start(), start + w.end()
                    if self.gazetteer.is_known_location(w.group(0)) and _is_free(w_start, w_end):
                        seen.append(range(w_start, w_end))
                        found.append(
                            (w.group(0), w_start, {"match_type": "gazetteer"}, GAZETTEER_LOCATION_CONFIDENCE)
                        )

        found.sort(key=lambda item: item[1])
        return found

    def _match_custom(self, text: str, scope, offset: int) -> List[PatternCandidate]:
        candidates = []
        for name, compiled in self.custom_patterns.items():
            for m in compiled.finditer(text):
                if m.end() > m.start():
                    candidates.append(
                        self._candidate("custom", m.group(0), m.start(), scope, offset, {"pattern_name": name})
                    )
        return candidates
