"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

from piiscan.config.constants import (
    DEFAULT_NEARBY_PII_WINDOW,
    DEFAULT_PHONE_REGION,
    DEFAULT_PROPER_NOUN_THRESHOLD,
)

load_dotenv()


# --- Heuristic scorer ---
PROPER_NOUN_THRESHOLD: float = float(
    os.getenv("PIISCAN_PROPER_NOUN_THRESHOLD", str(DEFAULT_PROPER_NOUN_THRESHOLD))
)
NEARBY_PII_WINDOW: int = int(os.getenv("PIISCAN_NEARBY_PII_WINDOW", str(DEFAULT_NEARBY_PII_WINDOW)))

# --- Pattern recognizers ---
PHONE_REGION: str = os.getenv("PIISCAN_PHONE_REGION", DEFAULT_PHONE_REGION)

# --- Dictionaries ---
# Optional newline-separated word list replacing the bundled common words.
COMMON_WORDS_FILE: str = os.getenv("PIISCAN_COMMON_WORDS_FILE", "")

# --- Observability ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
METRICS_ENABLED: bool = os.getenv("PIISCAN_METRICS_ENABLED", "true").lower() == "true"
