"""
Error Types

Exceptions for conditions the game cannot recover from. Rejected submissions
are not errors: they are returned as SubmissionResult values.
"""


class WordScramblerError(Exception):
    """Base class for all application errors."""


class WordListUnavailableError(WordScramblerError):
    """The root word list could not be obtained; the game cannot start."""


class ConfigurationError(WordScramblerError):
    """Settings name an unknown backend or omit a required value."""
