"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game constants and word list tooling
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_LANGUAGE, FALLBACK_ROOT_WORD, START_WORDS_FILE,
    validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game constants
    'DEFAULT_LANGUAGE', 'FALLBACK_ROOT_WORD', 'START_WORDS_FILE',
    'validate_word_list_integrity', 'get_word_statistics'
]
