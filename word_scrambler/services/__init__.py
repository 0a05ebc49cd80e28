"""
Services Package

Contains all business logic and service classes.
"""

from .dictionary import DictionaryChecker, WordfreqDictionary, WordListDictionary, build_dictionary
from .game_service import GameService, get_game_service, initialize_game_service
from .game_session import GameSession
from .word_list import WordListLoad, WordListProvider, load_word_list

__all__ = [
    'DictionaryChecker', 'WordfreqDictionary', 'WordListDictionary', 'build_dictionary',
    'GameService', 'get_game_service', 'initialize_game_service',
    'GameSession',
    'WordListLoad', 'WordListProvider', 'load_word_list'
]
