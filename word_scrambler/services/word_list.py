"""
Word List Service

Loads the newline-delimited root word resource and picks root words from it.
"""

import random
from dataclasses import dataclass
from typing import List, Optional

from ..config.game_settings import FALLBACK_ROOT_WORD
from ..models.errors import WordListUnavailableError
from ..utils.game_logger import game_logger


@dataclass(frozen=True)
class WordListLoad:
    """Result of reading the root word resource."""
    words: List[str]
    source: str
    used_fallback: bool = False


def parse_word_list(text: str) -> List[str]:
    """Split newline-delimited text into trimmed, lower-cased, non-blank entries."""
    return [line.strip().lower() for line in text.splitlines() if line.strip()]


def load_word_list(path: str) -> WordListLoad:
    """
    Load root words from a plain text file, one word per line.

    Args:
        path: Location of the word list resource

    Returns:
        WordListLoad: The entries, or the single fallback root word when the
        file is readable but holds no entries

    Raises:
        WordListUnavailableError: If the file is missing or cannot be decoded
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            words = parse_word_list(f.read())
    except (OSError, UnicodeDecodeError) as e:
        raise WordListUnavailableError(f"Couldn't load word list from {path}: {e}") from e

    if not words:
        game_logger.logger.warning(
            f"Word list {path} is empty, falling back to '{FALLBACK_ROOT_WORD}'"
        )
        return WordListLoad(words=[FALLBACK_ROOT_WORD], source=path, used_fallback=True)

    return WordListLoad(words=words, source=path)


class WordListProvider:
    """Supplies root words, chosen uniformly at random from a fixed list."""

    def __init__(self, words: List[str], rng: Optional[random.Random] = None):
        self.words = list(words)
        self.rng = rng or random.Random()

    @classmethod
    def from_file(cls, path: str, rng: Optional[random.Random] = None) -> "WordListProvider":
        load = load_word_list(path)
        return cls(load.words, rng)

    def __len__(self) -> int:
        return len(self.words)

    def choose(self) -> str:
        """
        Pick one root word.

        Raises:
            WordListUnavailableError: If the provider holds no words
        """
        if not self.words:
            raise WordListUnavailableError("Word list is empty; cannot choose a root word")
        return self.rng.choice(self.words)
