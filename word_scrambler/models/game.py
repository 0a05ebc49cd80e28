"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


class RejectionReason(Enum):
    """Why a submitted word was turned down, with the alert text shown to the player."""
    EMPTY_INPUT = "EMPTY_INPUT"
    ALREADY_USED = "ALREADY_USED"
    NOT_POSSIBLE = "NOT_POSSIBLE"
    NOT_A_REAL_WORD = "NOT_A_REAL_WORD"

    @property
    def title(self) -> str:
        return _REJECTION_ALERTS[self][0]

    @property
    def message(self) -> str:
        return _REJECTION_ALERTS[self][1]


_REJECTION_ALERTS = {
    RejectionReason.EMPTY_INPUT: ("Cannot enter a letter", "Has to be a word"),
    RejectionReason.ALREADY_USED: ("Word Already Used!", "Be more original"),
    RejectionReason.NOT_POSSIBLE: (
        "Word not recognised",
        "This word has to be contained within the rootWord!"
    ),
    RejectionReason.NOT_A_REAL_WORD: ("No such word", "This word doesn't exist"),
}


@dataclass(frozen=True)
class SubmissionResult:
    """
    Outcome of a word submission: either accepted, or rejected with a reason.

    ``word`` is the normalized (trimmed, lower-cased) candidate.
    """
    word: str
    reason: Optional[RejectionReason] = None

    @classmethod
    def accepted(cls, word: str) -> "SubmissionResult":
        return cls(word=word)

    @classmethod
    def rejected(cls, word: str, reason: RejectionReason) -> "SubmissionResult":
        return cls(word=word, reason=reason)

    @property
    def is_accepted(self) -> bool:
        return self.reason is None

    def to_dict(self) -> Dict:
        """JSON-friendly form used by the HTTP and WebSocket layers."""
        if self.is_accepted:
            return {'accepted': True, 'word': self.word}
        return {
            'accepted': False,
            'word': self.word,
            'reason': self.reason.value,
            'title': self.reason.title,
            'message': self.reason.message
        }


@dataclass
class UsedWord:
    """A single accepted word as displayed in the list, with its letter count."""
    word: str
    letter_count: int


@dataclass
class GameState:
    """Client-facing snapshot of one game session."""
    game_id: str
    root_word: str
    title: str
    used_words: List[UsedWord] = field(default_factory=list)
    word_count: int = 0
