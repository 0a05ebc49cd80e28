"""
Data Models Package

Contains all data models, result types and error types used throughout the application.
"""

from .game import GameState, RejectionReason, SubmissionResult, UsedWord
from .errors import ConfigurationError, WordListUnavailableError, WordScramblerError

__all__ = [
    'GameState', 'RejectionReason', 'SubmissionResult', 'UsedWord',
    'ConfigurationError', 'WordListUnavailableError', 'WordScramblerError'
]
