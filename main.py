"""
Word Scrambler Game Server - Main Entry Point

This is the main entry point for the Word Scrambler game server.
It initializes all services and starts the Flask-SocketIO application.
"""

import sys
from word_scrambler import create_app
from word_scrambler.config import Config, validate_word_list_integrity, get_word_statistics
from word_scrambler.models.errors import ConfigurationError, WordListUnavailableError
from word_scrambler.services.dictionary import build_dictionary
from word_scrambler.services.game_service import initialize_game_service
from word_scrambler.services.word_list import WordListProvider, load_word_list
from word_scrambler.utils.game_logger import game_logger


def initialize_services(config_class=Config):
    """
    Load the word list and dictionary and create the global game service.

    Raises:
        WordListUnavailableError: If no root words can be obtained
        ConfigurationError: If the dictionary backend is misconfigured
    """
    word_load = load_word_list(config_class.WORD_LIST_PATH)
    try:
        validate_word_list_integrity(word_load.words)
    except ValueError as e:
        # Odd entries are still playable; report them and carry on
        game_logger.logger.warning(f"Word list integrity check: {e}")

    stats = get_word_statistics(word_load.words)
    game_logger.logger.info(
        f"Loaded {stats['total_words']} root words from {word_load.source} "
        f"(fallback={word_load.used_fallback}, avg_length={stats['avg_length']})"
    )

    dictionary = build_dictionary(config_class)
    return initialize_game_service(
        WordListProvider(word_load.words), dictionary, config_class.DICTIONARY_LANGUAGE
    )


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")
        initialize_services(Config)
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word Scrambler Server Starting")

        print(f"\nStarting Word Scrambler Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Dictionary backend: {Config.DICTIONARY_BACKEND} ({Config.DICTIONARY_LANGUAGE})")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except (WordListUnavailableError, ConfigurationError) as e:
        # The game cannot run without a root word or a dictionary
        print(f"Fatal: {e}")
        game_logger.logger.critical(f"Fatal configuration error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Scrambler Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
