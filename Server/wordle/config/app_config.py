"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 3001))
    FRONTEND_URL = os.getenv('FRONTEND_URL', 'http://localhost:5173')

    # Game Settings
    DEFAULT_MAX_ROUNDS = int(os.getenv('DEFAULT_MAX_ROUNDS', 6))
    DEFAULT_WORD_LENGTH = int(os.getenv('DEFAULT_WORD_LENGTH', 5))
    MAX_ROUNDS_LIMIT = int(os.getenv('MAX_ROUNDS_LIMIT', 20))
    MAX_PLAYERS = int(os.getenv('MAX_PLAYERS', 4))
    WORD_LIST_PATH = os.getenv('WORD_LIST_PATH')  # None means the bundled wordles.json

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


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
