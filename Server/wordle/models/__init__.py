"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    GameMode,
    GameStatus,
    LetterStatus,
    Player,
    ScoredLetter,
    Session,
    serialize_guess,
    summarize_letters,
    to_client_state,
)

__all__ = [
    'GameMode', 'GameStatus', 'LetterStatus', 'Player', 'ScoredLetter',
    'Session', 'serialize_guess', 'summarize_letters', 'to_client_state'
]
