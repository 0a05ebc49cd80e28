"""
Game Configuration Constants Module

This module defines the game constants and the word list tooling used at
startup. Root words themselves are loaded by the word list service from the
bundled start.txt resource (or WORD_LIST_PATH).
"""

import os
from typing import Dict, List, Final

DEFAULT_LANGUAGE: Final[str] = "en"
"""
Language tag passed to the dictionary checker for every lookup.
"""

FALLBACK_ROOT_WORD: Final[str] = "silkworm"
"""
Root word used when the word list resource is readable but holds no entries.
"""

MIN_WORD_FREQUENCY: Final[float] = 1e-7
"""
Smallest wordfreq frequency (occurrences per word of text) that counts as a real word.
"""

WORD_VOWELS: Final[str] = "aeiouy"
"""
Letters of which every dictionary word needs at least one; rules out initialisms like "km".
"""

START_WORDS_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'start.txt'
)
"""
Bundled newline-delimited list of candidate root words.
"""


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a root word list.

    This function performs validation to ensure:
    1. Presence validation: The list holds at least one word
    2. Character validation: Only alphabetic characters allowed
    3. Format validation: Consistent lowercase formatting
    4. Uniqueness validation: No duplicate entries

    Args:
        words: Normalized root words as returned by the word list loader

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    # Validate uniqueness (no duplicates)
    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> Dict:
    """
    Analyzes a root word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_length: Average letters per word
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Top five letters by frequency
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_length": round(sum(len(word) for word in words) / len(words), 2),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
