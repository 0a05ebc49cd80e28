"""
Helper Functions

Contains utility functions used throughout the application.
"""

from dataclasses import asdict
from typing import Dict

from ..models.game import GameState


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from a request (HTTP or Socket.IO)."""
    if request_obj is None:
        from flask import request
        request_obj = request

    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)
    }


def serialize_state(state: GameState) -> Dict:
    """Convert a GameState into a JSON-serializable dict."""
    return asdict(state)
