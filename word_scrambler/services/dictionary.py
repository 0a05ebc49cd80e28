"""
Dictionary Service

Answers whether a string is a recognized word in a given language.
Two backends are available: the wordfreq corpus (default) and a plain
word file for offline or test setups.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Set

from wordfreq import tokenize, word_frequency

from ..config.game_settings import DEFAULT_LANGUAGE, MIN_WORD_FREQUENCY, WORD_VOWELS
from ..models.errors import ConfigurationError, WordListUnavailableError


class DictionaryChecker(ABC):
    """Capability interface for dictionary lookups."""

    @abstractmethod
    def is_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        """Return True if ``word`` is a recognized word in ``language``."""


class WordListDictionary(DictionaryChecker):
    """Membership test against a fixed set of words (single language)."""

    def __init__(self, words: Iterable[str], language: str = DEFAULT_LANGUAGE):
        self.language = language
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: str, language: str = DEFAULT_LANGUAGE) -> "WordListDictionary":
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return cls(f.read().splitlines(), language)
        except (OSError, UnicodeDecodeError) as e:
            raise WordListUnavailableError(f"Couldn't load dictionary from {path}: {e}") from e

    def __len__(self) -> int:
        return len(self._words)

    def is_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word or language != self.language:
            return False
        return word.lower() in self._words


class WordfreqDictionary(DictionaryChecker):
    """
    Uses the wordfreq corpus as a spelling oracle.

    A string counts as a word when it tokenizes to exactly itself (so phrases
    and punctuation are rejected) and its frequency reaches ``min_frequency``.
    wordfreq also counts initialisms such as "km" or "ml"; in English those are
    rejected by requiring at least one vowel.
    """

    def __init__(self, min_frequency: float = MIN_WORD_FREQUENCY):
        self.min_frequency = min_frequency

    def is_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if not word:
            return False
        word = word.lower()
        if tokenize(word, language) != [word]:
            return False
        if language == 'en' and not any(letter in WORD_VOWELS for letter in word):
            return False
        frequency = word_frequency(word, language)
        return frequency > 0 and frequency >= self.min_frequency


def build_dictionary(config_class) -> DictionaryChecker:
    """
    Create the dictionary backend named by configuration.

    Args:
        config_class: Configuration class with DICTIONARY_* settings

    Raises:
        ConfigurationError: If the backend is unknown or incompletely configured
    """
    backend = (config_class.DICTIONARY_BACKEND or '').lower()
    language = getattr(config_class, 'DICTIONARY_LANGUAGE', DEFAULT_LANGUAGE)

    if backend == 'wordfreq':
        return WordfreqDictionary(
            getattr(config_class, 'DICTIONARY_MIN_FREQUENCY', MIN_WORD_FREQUENCY)
        )

    if backend == 'wordlist':
        path: Optional[str] = getattr(config_class, 'DICTIONARY_PATH', None)
        if not path:
            raise ConfigurationError("DICTIONARY_PATH is required for the wordlist dictionary backend")
        return WordListDictionary.from_file(path, language)

    raise ConfigurationError(
        f"Unknown dictionary backend '{backend}'. Must be \"wordfreq\" or \"wordlist\""
    )
