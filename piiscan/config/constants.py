"""
Constants used across the detection pipeline.
Versioned and pinned for determinism.
"""
from typing import Dict, FrozenSet, List

# =============================================================================
# PII type taxonomy (closed enum)
# =============================================================================
PII_TYPES: List[str] = [
    "email",
    "phone",
    "money",
    "quantity",
    "url",
    "ipAddress",
    "ssn",
    "creditCard",
    "date",
    "address",
    "location",
    "properNoun",
]

PATTERN_TYPES: List[str] = [t for t in PII_TYPES if t != "properNoun"]

# Types whose candidates feed the "near other PII" signal of the scorer.
NEARBY_PII_TYPES: FrozenSet[str] = frozenset({"email", "phone"})

# UI / settings spellings â internal type name
TYPE_ALIASES: Dict[str, str] = {
    "email": "email",
    "emails": "email",
    "phone": "phone",
    "phones": "phone",
    "money": "money",
    "quantity": "quantity",
    "quantities": "quantity",
    "url": "url",
    "urls": "url",
    "ip": "ipAddress",
    "ips": "ipAddress",
    "ipAddress": "ipAddress",
    "ipAddresses": "ipAddress",
    "ssn": "ssn",
    "ssns": "ssn",
    "creditCard": "creditCard",
    "creditCards": "creditCard",
    "date": "date",
    "dates": "date",
    "address": "address",
    "addresses": "address",
    "location": "location",
    "locations": "location",
    "properNoun": "properNoun",
    "properNouns": "properNoun",
}

# =============================================================================
# Overlap resolution priorities (higher wins)
# =============================================================================
DEFAULT_TYPE_PRIORITIES: Dict[str, int] = {
    "date": 90,
    "email": 85,
    "phone": 80,
    "ssn": 80,
    "creditCard": 80,
    "ipAddress": 75,
    "money": 70,
    "quantity": 60,
    "address": 50,
    "url": 40,
    "location": 30,
    "properNoun": 10,
}

# =============================================================================
# Confidence thresholds
# =============================================================================
DEFAULT_PROPER_NOUN_THRESHOLD: float = 0.75
DEFAULT_PATTERN_THRESHOLD: float = 0.5
UNKNOWN_TYPE_THRESHOLD: float = 0.0
DEFAULT_MIN_CONFIDENCE: float = 0.5

# =============================================================================
# Fixed confidences for structured recognizers
# =============================================================================
PATTERN_CONFIDENCE: Dict[str, float] = {
    "email": 1.0,
    "phone": 1.0,
    "money": 1.0,
    "quantity": 1.0,
    "url": 1.0,
    "ipAddress": 1.0,
    "ssn": 1.0,
    "creditCard": 1.0,
    "date": 0.8,
    "address": 0.7,
    "location": 0.9,
    "custom": 0.8,
}
GAZETTEER_LOCATION_CONFIDENCE: float = 0.95

# =============================================================================
# Heuristic scorer weights (sum of fired signals, clamped to [0, 1])
# =============================================================================
DEFAULT_SCORING_WEIGHTS: Dict[str, float] = {
    "capitalization": 0.3,
    "unknown_words": 0.3,
    "context_clue": 0.4,
    "multi_word": 0.2,
    "not_sentence_start": 0.1,
    "near_pii": 0.25,
    "email_domain_match": 0.3,
    "inside_link": 0.25,
    "known_location": 0.5,
    "department_name": -0.9,
    "job_description_prefix": -0.25,
    "non_noun_pos": -0.5,
    "appears_in_page_links": 0.3,
    "appears_in_header_footer": -0.5,
}

UNKNOWN_WORD_RATIO_TRIGGER: float = 0.5
UNLOADED_DICTIONARY_RATIO: float = 0.5

DEFAULT_NEARBY_PII_WINDOW: int = 50
MIN_NEARBY_PII_WINDOW: int = 10
MAX_NEARBY_PII_WINDOW: int = 100

# =============================================================================
# Proper-noun vocabularies
# =============================================================================
HONORIFICS: List[str] = ["Mr", "Mrs", "Ms", "Dr", "Prof"]

JOB_TITLES: List[str] = [
    "CEO", "CTO", "CFO", "VP", "SVP", "EVP",
    "President", "Director", "Manager", "Chief", "Senior", "Junior", "Lead",
]

# Suffixes that make a run a company name (also stripped for the domain match)
COMPANY_SUFFIXES: List[str] = [
    "Inc", "Corp", "LLC", "Ltd", "Limited", "Company", "Co",
    "Corporation", "GmbH", "SA", "PLC", "AG",
]

# Trailing organizational words the span pattern may absorb
ORGANIZATION_SUFFIXES: List[str] = COMPANY_SUFFIXES + [
    "Group", "Partners", "Associates", "Ventures", "Technologies", "Tech",
    "Systems", "Solutions", "Consulting", "Services", "International", "Intl",
]

# Leading words stripped from a capitalized run before scoring
FILLER_WORDS: FrozenSet[str] = frozenset({
    "By", "In", "On", "At", "For", "With", "From", "To", "As", "Of",
    "The", "A", "An",
    "Meet", "See", "Contact", "Call", "Visit", "Email", "Ask",
})

# Verbs that may precede a department name ("Contact Human Resources")
DEPARTMENT_LEAD_VERBS: List[str] = ["call", "visit", "contact", "reach", "see"]

DEPARTMENT_PREFIXES: FrozenSet[str] = frozenset({
    "human resources", "hr", "marketing", "sales", "finance", "accounting",
    "engineering", "operations", "legal", "it", "information technology",
    "customer service", "customer support", "support", "research",
    "research and development", "r&d", "product", "design", "procurement",
    "purchasing", "compliance", "security", "facilities", "administration",
    "public relations", "communications", "quality assurance", "qa",
    "logistics", "payroll", "recruiting", "talent acquisition", "it support",
    "business development", "investor relations", "risk management",
})

DEPARTMENT_SUFFIXES: FrozenSet[str] = frozenset({
    "department", "dept", "team", "division", "group", "office", "unit",
    "desk", "services", "center", "centre",
})

STANDALONE_TITLE_SENIORITY: List[str] = [
    "Senior", "Junior", "Lead", "Chief", "Principal", "Staff", "Associate",
]
STANDALONE_TITLE_ROLES: List[str] = [
    "Engineer", "Developer", "Manager", "Designer", "Analyst", "Writer",
    "Reporter", "Editor", "Architect", "Scientist", "Consultant",
]

# Adjective endings; a capitalized word carrying one is penalized as a non-noun
ADJECTIVE_SUFFIXES: List[str] = [
    "able", "ible", "al", "ful", "ic", "ical", "ive", "less",
    "ous", "ious", "ish", "ese", "an", "ian", "ern", "ly",
]
# Short suffixes need longer words ("Adrian" is a name, "Italian" is not)
ADJECTIVE_SUFFIX_MIN_LENGTH: Dict[str, int] = {
    "an": 7, "ian": 7, "al": 6, "ic": 6, "ish": 6, "ese": 6, "ern": 6,
}
MIN_ADJECTIVE_LENGTH: int = 4

# One capitalized word, internal apostrophe or hyphen allowed (O'Brien, Jean-Luc)
CAPITALIZED_WORD: str = r"[A-Z](?:[a-z]+(?:['’-][A-Z]?[a-z]+)?|['’][A-Z][a-z]+)"

# =============================================================================
# Document segmentation
# =============================================================================
SEGMENT_SEPARATOR: str = " "

SKIPPED_CONTAINERS: FrozenSet[str] = frozenset({
    "script", "style", "noscript", "iframe", "svg",
    "label", "button", "th", "dt", "nav", "title",
    "h1", "header", "footer", "aside",
})
SKIPPED_ROLES: FrozenSet[str] = frozenset({"navigation", "banner"})

# Page chrome whose words count against a candidate
HEADER_FOOTER_CONTAINERS: FrozenSet[str] = frozenset({"header", "footer", "nav"})
HEADER_FOOTER_ROLES: FrozenSet[str] = frozenset({"banner", "contentinfo", "navigation"})
LINK_CONTAINER: str = "a"

# =============================================================================
# Phone metadata
# =============================================================================
DEFAULT_PHONE_REGION: str = "US"

# =============================================================================
# Currency symbols & codes
# =============================================================================
CURRENCY_SYMBOLS: Dict[str, str] = {
    "$": "USD",
    "â¬": "EUR",
    "Â£": "GBP",
    "Â¥": "JPY",
    "â¹": "INR",
}
CURRENCY_CODES: List[str] = ["USD", "EUR", "GBP", "JPY", "INR"]
