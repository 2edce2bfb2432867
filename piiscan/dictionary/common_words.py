"""
Common-word dictionary — distinguishes ordinary capitalized words from names.

Loaded once per process (bundled list, or the newline-separated file named by
PIISCAN_COMMON_WORDS_FILE) and read-only afterwards. Until it is loaded,
callers see is_loaded == False and the scorer falls back to a neutral
unknown-word ratio.
"""
import asyncio
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Set

from piiscan.config import settings
from piiscan.data.common_words import COMMON_WORDS

logger = logging.getLogger(__name__)


class CommonWordDictionary:
    """Case-insensitive common-word lookup with lazy loading."""

    def __init__(self, words: Optional[Iterable[str]] = None, source_file: Optional[str] = None):
        self._seed = words
        self._source_file = source_file if source_file is not None else settings.COMMON_WORDS_FILE
        self._words: Set[str] = set()
        self.is_loaded = False

    def load(self) -> "CommonWordDictionary":
        """Load the word list if not loaded yet. Raises OSError for an unreadable file."""
        if self.is_loaded:
            return self

        if self._seed is not None:
            words = self._seed
        elif self._source_file:
            path = Path(self._source_file)
            with open(path, encoding="utf-8") as f:
                words = [line.strip() for line in f if line.strip() and not line.startswith("#")]
            logger.info("Common words read from %s", path)
        else:
            words = COMMON_WORDS

        self._words = {w.lower() for w in words}
        self.is_loaded = True
        logger.info("Common-word dictionary loaded: %d words", len(self._words))
        return self

    async def initialize(self) -> "CommonWordDictionary":
        """Async variant of load() for hosts running an event loop."""
        if not self.is_loaded:
            await asyncio.to_thread(self.load)
        return self

    def is_common(self, word: str) -> bool:
        """True if *word* is a known common word. Always False before load()."""
        if not self.is_loaded or not word:
            return False
        return word.lower().strip(".,;:!?'\"()") in self._words

    def is_common_phrase(self, phrase: str) -> bool:
        """True if every word of *phrase* is common."""
        words = phrase.split()
        return bool(words) and all(self.is_common(w) for w in words)

    def stats(self) -> Dict[str, object]:
        return {"loaded": self.is_loaded, "size": len(self._words)}

    def __len__(self) -> int:
        return len(self._words)


# Global instance, loaded on first access
_common_words: Optional[CommonWordDictionary] = None


def get_common_word_dictionary() -> CommonWordDictionary:
    """Get the process-wide common-word dictionary, loading it on first use."""
    global _common_words
    if _common_words is None:
        _common_words = CommonWordDictionary().load()
    return _common_words
