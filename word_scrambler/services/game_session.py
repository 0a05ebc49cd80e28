"""
Game Session

Contains the core game logic: one root word, the words found in it so far,
and the word submission transaction.
"""

from typing import Callable, List, Optional

from ..config.game_settings import DEFAULT_LANGUAGE
from ..models.errors import WordListUnavailableError
from ..models.game import GameState, RejectionReason, SubmissionResult, UsedWord
from ..utils.game_logger import game_logger
from .dictionary import DictionaryChecker
from .word_list import WordListProvider

SessionListener = Callable[["GameSession"], None]


class GameSession:
    """
    A single game: find words that can be spelled from the root word.

    This class handles:
    - Root word selection from the word list provider
    - Submission checks (non-empty, original, possible, real), in that order
    - The most-recent-first list of accepted words
    - Notifying listeners after every state change
    """

    def __init__(self,
                 word_list: WordListProvider,
                 dictionary: DictionaryChecker,
                 language: str = DEFAULT_LANGUAGE):
        self.word_list = word_list
        self.dictionary = dictionary
        self.language = language
        self.root_word = ""
        self.used_words: List[str] = []
        self._listeners: List[SessionListener] = []

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """
        Register a callback invoked with this session after each state change.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def clear_listeners(self) -> None:
        self._listeners.clear()

    def _notify(self) -> None:
        # Listener failures are logged; the state change stands
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                game_logger.logger.exception(
                    f"Session listener {listener!r} failed (root word '{self.root_word}')"
                )

    def start_new_game(self) -> str:
        """
        Pick a new root word and clear the accepted words.

        Returns:
            str: The new root word (lower-cased)

        Raises:
            WordListUnavailableError: If the word list provider has nothing to offer
        """
        root_word = self.word_list.choose().strip().lower()
        if not root_word:
            raise WordListUnavailableError("Word list produced an empty root word")

        self.used_words = []
        self.root_word = root_word
        self._notify()
        return root_word

    @staticmethod
    def normalize(candidate) -> str:
        if not isinstance(candidate, str):
            return ""
        return candidate.strip().lower()

    def is_original(self, word: str) -> bool:
        """Checks whether the word has not been accepted before."""
        return word not in self.used_words

    def is_possible(self, word: str) -> bool:
        """
        Checks whether the word can be spelled from the root word's letters.

        Each letter of the root word may be consumed at most once.
        """
        available = list(self.root_word)
        for letter in word:
            if letter not in available:
                return False
            available.remove(letter)
        return True

    def is_real(self, word: str) -> bool:
        """Checks the word against the dictionary."""
        return self.dictionary.is_word(word, self.language)

    def submit_word(self, candidate: str) -> SubmissionResult:
        """
        Validates a candidate word and records it when every check passes.

        Args:
            candidate: Raw text entered by the player

        Returns:
            SubmissionResult: Accepted, or rejected with the first failing reason
        """
        word = self.normalize(candidate)

        if not word:
            return SubmissionResult.rejected(word, RejectionReason.EMPTY_INPUT)

        if not self.is_original(word):
            return SubmissionResult.rejected(word, RejectionReason.ALREADY_USED)

        if not self.is_possible(word):
            return SubmissionResult.rejected(word, RejectionReason.NOT_POSSIBLE)

        if not self.is_real(word):
            return SubmissionResult.rejected(word, RejectionReason.NOT_A_REAL_WORD)

        self.used_words.insert(0, word)
        self._notify()
        return SubmissionResult.accepted(word)

    def snapshot(self, game_id: Optional[str] = None) -> GameState:
        """Returns a client-facing copy of the current state."""
        return GameState(
            game_id=game_id or "",
            root_word=self.root_word,
            title=f"Words in: {self.root_word}",
            used_words=[UsedWord(word=word, letter_count=len(word)) for word in self.used_words],
            word_count=len(self.used_words)
        )
