"""
Game Service

Keeps every active game session in memory, keyed by game id.
"""

import uuid
from typing import Dict, Optional

from ..config.game_settings import DEFAULT_LANGUAGE
from ..models.game import GameState, SubmissionResult
from ..utils.game_logger import game_logger
from .dictionary import DictionaryChecker
from .game_session import GameSession, SessionListener
from .word_list import WordListProvider


class GameService:
    """
    Core game service managing multiple independent game sessions.

    This class handles:
    - Session creation with unique game IDs
    - Routing word submissions to the right session
    - Restarting ("Generate New Word") and deleting sessions
    """

    def __init__(self,
                 word_list: WordListProvider,
                 dictionary: DictionaryChecker,
                 language: str = DEFAULT_LANGUAGE):
        self.word_list = word_list
        self.dictionary = dictionary
        self.language = language
        self.games: Dict[str, GameSession] = {}

    @property
    def active_games(self) -> int:
        return len(self.games)

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected root word.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())
        session = GameSession(self.word_list, self.dictionary, self.language)
        session.start_new_game()
        self.games[game_id] = session

        game_logger.log_game_event(
            game_id, 'game_started', 'system', root_word=session.root_word
        )
        return game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session.

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.snapshot(game_id)

    def submit_word(self, game_id: str, word: str) -> Optional[SubmissionResult]:
        """
        Submits a word to a game session.

        Returns:
            SubmissionResult, or None if the game does not exist
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        result = session.submit_word(word)
        if result.is_accepted:
            game_logger.log_game_event(
                game_id, 'word_accepted', 'system',
                word=result.word, root_word=session.root_word,
                word_count=len(session.used_words)
            )
        else:
            game_logger.log_game_event(
                game_id, 'word_rejected', 'system',
                word=result.word, root_word=session.root_word,
                reason=result.reason.value
            )
        return result

    def restart_game(self, game_id: str) -> Optional[GameState]:
        """Draws a new root word for an existing session and clears its words."""
        session = self.games.get(game_id)
        if session is None:
            return None

        session.start_new_game()
        game_logger.log_game_event(
            game_id, 'game_started', 'system', root_word=session.root_word, restarted=True
        )
        return session.snapshot(game_id)

    def subscribe(self, game_id: str, listener: SessionListener):
        """Attach a state-change listener to a session; returns the unsubscribe callable or None."""
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.subscribe(listener)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        session = self.games.pop(game_id, None)
        if session is not None:
            session.clear_listeners()
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_list: WordListProvider,
                            dictionary: DictionaryChecker,
                            language: str = DEFAULT_LANGUAGE) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(word_list, dictionary, language)
    return _game_service
