"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import DEFAULT_LANGUAGE, MIN_WORD_FREQUENCY, START_WORDS_FILE

# Load environment variables from config.env (if present)
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""
    
    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False
    
    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))
    
    # Word Source Settings
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH', START_WORDS_FILE)
    DICTIONARY_BACKEND = os.getenv('DICTIONARY_BACKEND', 'wordfreq').lower()
    DICTIONARY_PATH = os.getenv('DICTIONARY_PATH')
    DICTIONARY_LANGUAGE = os.getenv('DICTIONARY_LANGUAGE', DEFAULT_LANGUAGE)
    DICTIONARY_MIN_FREQUENCY = float(os.getenv('DICTIONARY_MIN_FREQUENCY', MIN_WORD_FREQUENCY))
    
    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    DICTIONARY_BACKEND = 'wordlist'


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
