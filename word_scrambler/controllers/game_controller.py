"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from flask import Blueprint, request, jsonify
from ..services.game_service import get_game_service
from ..utils.decorators import require_game
from ..utils.game_logger import game_logger
from ..utils.helpers import serialize_state
from ..websocket.handlers import release_game_room

game_bp = Blueprint('game', __name__)


@game_bp.route('/new_game', methods=['POST'])
def new_game():
    """Create a new game session with a random root word."""
    try:
        game_service = get_game_service()
        if not game_service:
            return jsonify({
                'success': False,
                'error': 'Game service unavailable'
            }), 500

        game_logger.log_user_action(request, 'new_game')

        game_id = game_service.create_new_game()
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            'game_id': game_id,
            'state': serialize_state(state)
        }

        game_logger.log_server_response(
            request, 'new_game', True, response_data, game_id,
            root_word_length=len(state.root_word)
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'new_game')

        error_response = {
            'success': False,
            'error': str(e)
        }

        game_logger.log_server_response(request, 'new_game', False, error_response)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@require_game
def get_state(game_id, game_service=None):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = game_service.get_game_state(game_id)
        response_data = {
            'success': True,
            'state': serialize_state(state)
        }

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            word_count=state.word_count
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'get_state', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'get_state', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/word', methods=['POST'])
@require_game
def submit_word(game_id, game_service=None):
    """
    Submit a word found in the root word.

    A rejected word is a normal game outcome, so it is answered with 200 and
    ``accepted: false`` plus the alert title and message to show the player.
    """
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'word' not in data:
            error_response = {
                'success': False,
                'error': 'Word is required'
            }
            game_logger.log_server_response(request, 'submit_word', False, error_response, game_id)
            return jsonify(error_response), 400

        word = data['word']

        game_logger.log_user_action(request, 'submit_word', game_id, word=word)

        result = game_service.submit_word(game_id, word)
        state = game_service.get_game_state(game_id)

        response_data = {
            'success': True,
            **result.to_dict(),
            'state': serialize_state(state)
        }

        game_logger.log_server_response(
            request, 'submit_word', True, response_data, game_id,
            accepted=result.is_accepted, word=result.word
        )

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'submit_word', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'submit_word', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>/restart', methods=['POST'])
@require_game
def restart_game(game_id, game_service=None):
    """Generate a new root word for the game and clear the found words."""
    try:
        game_logger.log_user_action(request, 'restart_game', game_id)

        state = game_service.restart_game(game_id)
        response_data = {
            'success': True,
            'state': serialize_state(state)
        }

        game_logger.log_server_response(request, 'restart_game', True, response_data, game_id)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'restart_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'restart_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@require_game
def delete_game(game_id, game_service=None):
    """Delete a game session."""
    try:
        game_logger.log_user_action(request, 'delete_game', game_id)

        success = game_service.delete_game(game_id)
        release_game_room(game_id)
        response_data = {
            'success': success
        }

        game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

        if success:
            game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'delete_game', game_id)
        error_response = {
            'success': False,
            'error': str(e)
        }
        game_logger.log_server_response(request, 'delete_game', False, error_response, game_id)
        return jsonify(error_response), 500


@game_bp.route('/dictionary/check', methods=['GET'])
def check_word():
    """Look a word up in the configured dictionary."""
    game_service = get_game_service()
    if not game_service:
        return jsonify({
            'success': False,
            'error': 'Game service unavailable'
        }), 500

    word = (request.args.get('word') or '').strip().lower()
    game_logger.log_user_action(request, 'check_word', word=word)

    valid = game_service.dictionary.is_word(word, game_service.language)
    response_data = {
        'success': True,
        'word': word,
        'valid': valid
    }

    game_logger.log_server_response(request, 'check_word', True, response_data)
    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy',
            'active_games': game_service.active_games if game_service else 0,
            'root_words': len(game_service.word_list) if game_service else 0,
            'log_stats': game_logger.get_log_stats()
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
