"""
Tests for the word list and dictionary services.
"""

import random

import pytest

from word_scrambler.config import TestingConfig
from word_scrambler.config.game_settings import (
    FALLBACK_ROOT_WORD, START_WORDS_FILE, get_word_statistics, validate_word_list_integrity
)
from word_scrambler.models.errors import ConfigurationError, WordListUnavailableError
from word_scrambler.services import dictionary as dictionary_module
from word_scrambler.services.dictionary import (
    WordfreqDictionary, WordListDictionary, build_dictionary
)
from word_scrambler.services.word_list import WordListProvider, load_word_list, parse_word_list


class TestWordList:
    """Tests for loading and choosing root words."""

    def test_parse_drops_blank_lines(self):
        assert parse_word_list("Silkworm\n\n  absolute \r\ncalendar\n") == [
            "silkworm", "absolute", "calendar"
        ]

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "start.txt"
        path.write_text("backpack\ndinosaur\n", encoding="utf-8")

        load = load_word_list(str(path))

        assert load.words == ["backpack", "dinosaur"]
        assert load.source == str(path)
        assert not load.used_fallback

    def test_missing_file_is_fatal(self, tmp_path):
        with pytest.raises(WordListUnavailableError):
            load_word_list(str(tmp_path / "missing.txt"))

    def test_empty_file_uses_fallback(self, tmp_path):
        path = tmp_path / "start.txt"
        path.write_text("\n  \n", encoding="utf-8")

        load = load_word_list(str(path))

        assert load.words == [FALLBACK_ROOT_WORD]
        assert load.used_fallback

    def test_bundled_list_is_valid(self):
        load = load_word_list(START_WORDS_FILE)

        assert "silkworm" in load.words
        assert validate_word_list_integrity(load.words)

    def test_choose_covers_every_entry(self):
        words = ["absolute", "backpack", "calendar"]
        provider = WordListProvider(words, rng=random.Random(11))

        chosen = {provider.choose() for _ in range(200)}

        assert chosen == set(words)

    def test_from_file(self, tmp_path):
        path = tmp_path / "start.txt"
        path.write_text("keyboard\n", encoding="utf-8")

        provider = WordListProvider.from_file(str(path))

        assert len(provider) == 1
        assert provider.choose() == "keyboard"


class TestGameSettings:
    """Tests for word list integrity checks and statistics."""

    def test_empty_list_invalid(self):
        with pytest.raises(ValueError):
            validate_word_list_integrity([])

    @pytest.mark.parametrize("words", [["silk worm"], ["Silkworm"], ["silk", "silk"]])
    def test_invalid_entries(self, words):
        with pytest.raises(ValueError):
            validate_word_list_integrity(words)

    def test_statistics(self):
        stats = get_word_statistics(["mall", "silk"])

        assert stats["total_words"] == 2
        assert stats["avg_length"] == 4
        assert stats["letter_frequency"]["l"] == 3
        assert stats["most_common_letters"][0] == ("l", 3)


class TestWordListDictionary:
    """Tests for the word file dictionary backend."""

    def test_membership_ignores_case(self):
        checker = WordListDictionary(["Silk", "worm"])

        assert checker.is_word("silk")
        assert checker.is_word("WORM")
        assert not checker.is_word("slik")

    def test_empty_string_is_not_a_word(self):
        assert not WordListDictionary(["silk"]).is_word("")

    def test_other_language_unknown(self):
        assert not WordListDictionary(["silk"], language="en").is_word("silk", "fr")

    def test_from_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("silk\nworm\n\n", encoding="utf-8")

        checker = WordListDictionary.from_file(str(path))

        assert len(checker) == 2
        assert checker.is_word("worm")

    def test_missing_file(self, tmp_path):
        with pytest.raises(WordListUnavailableError):
            WordListDictionary.from_file(str(tmp_path / "missing.txt"))


class TestWordfreqDictionary:
    """Tests for the wordfreq backend."""

    def test_common_word(self):
        assert WordfreqDictionary().is_word("silk", "en")

    def test_empty_and_phrases_rejected(self):
        checker = WordfreqDictionary()

        assert not checker.is_word("")
        assert not checker.is_word("silk worm")

    def test_zero_frequency_rejected(self, monkeypatch):
        monkeypatch.setattr(dictionary_module, "word_frequency", lambda word, lang: 0.0)

        assert not WordfreqDictionary(min_frequency=0).is_word("silk")

    def test_rare_word_below_cutoff(self, monkeypatch):
        monkeypatch.setattr(dictionary_module, "word_frequency", lambda word, lang: 5e-8)

        assert not WordfreqDictionary(min_frequency=1e-7).is_word("silk")
        assert WordfreqDictionary(min_frequency=1e-8).is_word("silk")

    @pytest.mark.parametrize("letters", [
        "sw", "km", "ml", "rm", "lk", "ks", "ws", "mw", "wsl", "mk", "sk", "rw", "lmk", "kw",
    ])
    def test_initialisms_rejected(self, letters):
        """Letter runs from 'silkworm' that wordfreq knows as abbreviations are not words."""
        assert not WordfreqDictionary().is_word(letters, "en")

    @pytest.mark.parametrize("word", ["silk", "worm", "milk", "work", "owl", "silkworm"])
    def test_words_in_silkworm(self, word):
        assert WordfreqDictionary().is_word(word, "en")


class TestBuildDictionary:
    """Tests for choosing the backend from configuration."""

    def test_wordfreq_backend(self):
        class Settings(TestingConfig):
            DICTIONARY_BACKEND = 'wordfreq'
            DICTIONARY_MIN_FREQUENCY = 1e-6

        checker = build_dictionary(Settings)

        assert isinstance(checker, WordfreqDictionary)
        assert checker.min_frequency == 1e-6

    def test_wordlist_backend(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("silk\n", encoding="utf-8")

        class Settings(TestingConfig):
            DICTIONARY_BACKEND = 'wordlist'
            DICTIONARY_PATH = str(path)

        checker = build_dictionary(Settings)

        assert isinstance(checker, WordListDictionary)
        assert checker.is_word("silk")

    def test_wordlist_backend_requires_path(self):
        class Settings(TestingConfig):
            DICTIONARY_BACKEND = 'wordlist'
            DICTIONARY_PATH = None

        with pytest.raises(ConfigurationError):
            build_dictionary(Settings)

    def test_unknown_backend(self):
        class Settings(TestingConfig):
            DICTIONARY_BACKEND = 'hunspell'

        with pytest.raises(ConfigurationError):
            build_dictionary(Settings)
