"""
Pytest fixtures for Word Scrambler tests.
"""

import random

import pytest

from word_scrambler import create_app
from word_scrambler.config import TestingConfig
from word_scrambler.services import game_service as game_service_module
from word_scrambler.services.dictionary import DictionaryChecker, WordListDictionary
from word_scrambler.services.game_service import initialize_game_service
from word_scrambler.services.game_session import GameSession
from word_scrambler.services.word_list import WordListProvider

DICTIONARY_WORDS = [
    "silkworm", "silk", "worm", "milk", "work", "slim", "owl", "skim", "i",
    "mall", "all", "ll",
]


class RecordingDictionary(DictionaryChecker):
    """Dictionary stub that remembers every lookup it was asked for."""

    def __init__(self, words):
        self.inner = WordListDictionary(words)
        self.lookups = []

    def is_word(self, word, language="en"):
        self.lookups.append((word, language))
        return self.inner.is_word(word, language)


@pytest.fixture
def dictionary() -> RecordingDictionary:
    """Small English dictionary covering words found in 'silkworm'."""
    return RecordingDictionary(DICTIONARY_WORDS)


@pytest.fixture
def word_list() -> WordListProvider:
    """Word list that always yields 'silkworm'."""
    return WordListProvider(["silkworm"], rng=random.Random(7))


@pytest.fixture
def session(word_list, dictionary) -> GameSession:
    """A started game on root word 'silkworm'."""
    game = GameSession(word_list, dictionary)
    game.start_new_game()
    return game


@pytest.fixture
def game_service(word_list, dictionary):
    """Global game service wired to the test word list and dictionary."""
    service = initialize_game_service(word_list, dictionary)
    yield service
    game_service_module._game_service = None


@pytest.fixture
def app(game_service):
    """Flask app and Socket.IO server using the testing configuration."""
    flask_app, socketio = create_app(TestingConfig)
    return flask_app, socketio


@pytest.fixture
def client(app):
    flask_app, _ = app
    return flask_app.test_client()


@pytest.fixture
def socket_client(app):
    flask_app, socketio = app
    test_client = socketio.test_client(flask_app)
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
