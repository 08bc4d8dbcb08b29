"""
Wordle Game Server - Main Entry Point

This is the main entry point for the Wordle game server.
It builds the game service and starts the Flask-SocketIO application.
"""

import os
from wordle import create_app
from wordle.config import config
from wordle.config.game_settings import get_word_statistics, validate_word_list_integrity
from wordle.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    config_class = config[os.getenv('FLASK_ENV', 'default')]

    try:
        print("Creating Flask application...")
        app, socketio = create_app(config_class)

        word_list = app.game_service.word_list
        validate_word_list_integrity(word_list)
        stats = get_word_statistics(word_list)
        print(f"✓ Game service initialized with {stats['total_words']} words {stats['words_by_length']}")

        game_logger.logger.info("Wordle Server Starting")

        print(f"\nStarting Wordle Game Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print(f"API base URL: http://{config_class.HOST}:{config_class.PORT}/api")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
