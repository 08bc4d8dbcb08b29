"""
Wordle Game Server Application Package

Flask application serving classic Wordle, turn-based multiplayer Wordle and
Absurdle over a JSON API, with Socket.IO rooms for live game updates.
"""

from flask import Flask, jsonify
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, game_service=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        game_service: GameService to serve; built from config_class when omitted

    Returns:
        Tuple of (Flask application, SocketIO instance)
    """
    from .services.game_service import create_game_service

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app, origins=[config_class.FRONTEND_URL])
    socketio = SocketIO(app, cors_allowed_origins=[config_class.FRONTEND_URL],
                        logger=False, engineio_logger=False)

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    @app.errorhandler(404)
    def endpoint_not_found(error):
        return jsonify({'error': 'Endpoint not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store shared instances for use in other modules
    app.game_service = game_service if game_service is not None else create_game_service(config_class)
    app.socketio = socketio

    return app, socketio
