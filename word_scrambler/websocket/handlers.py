"""
WebSocket Event Handlers

Handles WebSocket events so a client can play and receive state updates in real time.
"""

from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.game_service import get_game_service
from ..utils.decorators import websocket_game_required
from ..utils.game_logger import game_logger
from ..utils.helpers import serialize_state

# game_id -> unsubscribe callable for the room broadcaster
room_subscriptions = {}


def game_room(game_id: str) -> str:
    return f"game_{game_id}"


def broadcast_game_state_update(game_id, socketio):
    """Broadcast the current state of a game to every client in its room."""
    game_service = get_game_service()
    if not game_service:
        return

    state = game_service.get_game_state(game_id)
    if state is None:
        return

    socketio.emit('game_state', serialize_state(state), room=game_room(game_id))


def release_game_room(game_id: str) -> bool:
    """Drop the room broadcaster of a game, e.g. once the game is deleted."""
    unsubscribe = room_subscriptions.pop(game_id, None)
    if unsubscribe is None:
        return False
    unsubscribe()
    return True


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def ensure_room_broadcast(game_service, game_id):
        # One listener per game pushes every state change to the room
        if game_id in room_subscriptions:
            return
        room_subscriptions[game_id] = game_service.subscribe(
            game_id, lambda session: broadcast_game_state_update(game_id, socketio)
        )

    @socketio.on('connect')
    def handle_connect():
        """Handle WebSocket connection."""
        game_logger.log_user_action(request, 'connect', transport='websocket')

    @socketio.on('join_game')
    @websocket_game_required
    def handle_join_game(data, game_service=None):
        """Join a game room for real-time updates."""
        game_id = data['game_id']
        join_room(game_room(game_id))
        ensure_room_broadcast(game_service, game_id)

        game_logger.log_user_action(request, 'join_game', game_id)
        emit('game_state', serialize_state(game_service.get_game_state(game_id)))

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a game room."""
        if isinstance(data, dict) and data.get('game_id'):
            leave_room(game_room(data['game_id']))

    @socketio.on('submit_word')
    @websocket_game_required
    def handle_submit_word(data, game_service=None):
        """Submit a word; the result goes to the sender, state changes to the room."""
        game_id = data['game_id']
        word = data.get('word', '')

        try:
            game_logger.log_user_action(request, 'submit_word', game_id, word=word, transport='websocket')

            result = game_service.submit_word(game_id, word)
            emit('word_result', {'game_id': game_id, **result.to_dict()})

        except Exception as e:
            game_logger.log_error(request, e, 'submit_word', game_id)
            emit('error', {'error': str(e)})

    @socketio.on('new_word')
    @websocket_game_required
    def handle_new_word(data, game_service=None):
        """Generate a new root word for the game."""
        game_id = data['game_id']

        try:
            game_logger.log_user_action(request, 'restart_game', game_id, transport='websocket')
            game_service.restart_game(game_id)

        except Exception as e:
            game_logger.log_error(request, e, 'restart_game', game_id)
            emit('error', {'error': str(e)})
