"""
Services Package

Contains the game engine: scoring, Absurdle selection, session storage and
the game state machine.
"""

from .errors import (
    ErrorKind, GameError, ValidationError, TurnError, StateError, NotFoundError, InternalError
)
from .scoring import score_guess, helpfulness, hit_weight_for
from .absurdle import Selection, select_feedback
from .session_store import SessionStore
from .game_service import GameService, create_game_service

__all__ = [
    'ErrorKind', 'GameError', 'ValidationError', 'TurnError', 'StateError',
    'NotFoundError', 'InternalError',
    'score_guess', 'helpfulness', 'hit_weight_for',
    'Selection', 'select_feedback',
    'SessionStore',
    'GameService', 'create_game_service'
]
