"""
Game Controller

Handles all game-related HTTP endpoints.
"""

import time

from flask import Blueprint, current_app, jsonify, request
from ..services.errors import GameError, ValidationError
from ..services.game_service import GameService
from ..utils.game_logger import game_logger
from ..websocket.handlers import broadcast_game_state_update

game_bp = Blueprint('game', __name__)


def get_game_service() -> GameService:
    """Get the game service attached to the running application."""
    return current_app.game_service


def _error_response(request_obj, action, error, game_id=None):
    """Turn an exception into a JSON error response and log it."""
    if isinstance(error, GameError):
        body, status = error.to_dict(), error.status_code
    else:
        body, status = {'error': 'Internal server error', 'kind': 'internal_error'}, 500

    game_logger.log_error(request_obj, error, action, game_id)
    game_logger.log_server_response(request_obj, action, False, body, game_id, status_code=status)
    return jsonify(body), status


@game_bp.route('/games', methods=['POST'])
def create_game():
    """Create a new game session."""
    try:
        config = request.get_json(silent=True)
        if config is None:
            config = {}

        game_logger.log_user_action(request, 'create_game', config=config)

        game_id, state = get_game_service().create_game(config)
        response_data = {
            'gameId': game_id,
            'gameState': state
        }

        game_logger.log_server_response(
            request, 'create_game', True, response_data, game_id,
            mode=state['mode'], word_length=state['wordLength'], max_rounds=state['maxRounds']
        )
        game_logger.log_game_event(
            game_id, 'game_created', request.remote_addr,
            mode=state['mode'], players=[p['name'] for p in state['players']]
        )

        return jsonify(response_data), 201

    except Exception as e:
        return _error_response(request, 'create_game', e)


@game_bp.route('/games/guess', methods=['POST'])
def submit_guess():
    """Submit a guess for evaluation."""
    game_id = None
    try:
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            raise ValidationError("Request body must be a JSON object")
        game_id = data.get('gameId')
        guess = data.get('guess')
        player_id = data.get('playerId')

        if not game_id or not guess:
            raise ValidationError("Game ID and guess are required")

        game_logger.log_user_action(
            request, 'submit_guess', game_id,
            guess=guess, player_id=player_id
        )

        service = get_game_service()
        result = service.submit_guess(game_id, guess, player_id)
        state = result['gameState']

        response_data = {
            'gameState': state,
            'scoredGuess': result['scoredGuess']
        }

        game_logger.log_server_response(
            request, 'submit_guess', True, response_data, game_id,
            round=state['currentRow'], game_status=state['gameStatus']
        )

        if result['resolved']:
            game_logger.log_game_event(
                game_id, 'absurdle_resolved', request.remote_addr,
                guesses_used=len(state['players'][0]['guesses'])
            )

        if state['gameStatus'] != 'playing':
            session = service.get_session(game_id)
            game_logger.log_game_event(
                game_id, f"game_{state['gameStatus']}", request.remote_addr,
                rounds_used=state['currentRow'], winner_ids=state['winnerIds'],
                answer=session.answer, final_guess=guess,
                game_age_seconds=round(time.time() - session.created_at, 1)
            )

        broadcast_game_state_update(current_app.socketio, game_id, state)

        return jsonify(response_data)

    except Exception as e:
        return _error_response(request, 'submit_guess', e, game_id)


@game_bp.route('/games/<game_id>', methods=['GET'])
def get_game(game_id):
    """Get current game state."""
    try:
        game_logger.log_user_action(request, 'get_state', game_id)

        state = get_game_service().get_game(game_id)
        response_data = {'gameState': state}

        game_logger.log_server_response(
            request, 'get_state', True, response_data, game_id,
            current_row=state['currentRow'], game_status=state['gameStatus']
        )

        return jsonify(response_data)

    except Exception as e:
        return _error_response(request, 'get_state', e, game_id)


@game_bp.route('/games/<game_id>/answer', methods=['GET'])
def get_game_answer(game_id):
    """Reveal the answer of a finished game."""
    try:
        game_logger.log_user_action(request, 'get_answer', game_id)

        answer = get_game_service().get_answer(game_id)
        if answer is None:
            error_response = {'error': 'Game not found or still in progress', 'kind': 'not_found'}
            game_logger.log_server_response(request, 'get_answer', False, error_response, game_id)
            return jsonify(error_response), 404

        response_data = {'answer': answer}
        game_logger.log_server_response(request, 'get_answer', True, {'answer_revealed': True}, game_id)
        game_logger.log_game_event(game_id, 'word_revealed', request.remote_addr)

        return jsonify(response_data)

    except Exception as e:
        return _error_response(request, 'get_answer', e, game_id)


@game_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        service = get_game_service()

        response_data = {
            'status': 'healthy',
            'activeGames': service.active_games,
            'wordCount': len(service.word_list),
            'logStats': game_logger.get_log_stats()
        }

        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        return jsonify({'status': 'error', 'error': str(e)}), 500
