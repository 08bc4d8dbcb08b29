"""
WebSocket Event Handlers

Lets every viewport of a game follow it live. Clients join a per-game room
and receive the client game state after each accepted guess.
"""

from flask import current_app, request
from flask_socketio import emit, join_room, leave_room
from ..services.errors import GameError
from ..utils.game_logger import game_logger


def game_room(game_id):
    return f"game_{game_id}"


def broadcast_game_state_update(socketio, game_id, game_state):
    """Push a game state to everyone watching the game."""
    socketio.emit('game_state_update', {
        'gameId': game_id,
        'gameState': game_state
    }, room=game_room(game_id))

    if game_state['gameStatus'] != 'playing':
        socketio.emit('game_ended', {
            'gameId': game_id,
            'gameStatus': game_state['gameStatus'],
            'winnerIds': game_state['winnerIds']
        }, room=game_room(game_id))


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join a game room for real-time updates."""
        game_id = (data or {}).get('gameId')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        try:
            state = current_app.game_service.get_game(game_id)
        except GameError as e:
            emit('error', e.to_dict())
            return

        join_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} joined game {game_id}")

        emit('game_state_update', {
            'gameId': game_id,
            'gameState': state
        })

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a game room."""
        game_id = (data or {}).get('gameId')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        leave_room(game_room(game_id))
        game_logger.logger.info(f"WebSocket: {request.sid} left game {game_id}")
        emit('left_game', {'gameId': game_id})
