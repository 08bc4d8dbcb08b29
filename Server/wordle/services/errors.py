"""
Game Errors

Typed error kinds raised by the game engine. Controllers map them to HTTP
status codes through ``status_code`` instead of inspecting messages.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(Enum):
    VALIDATION = "validation_error"
    TURN = "turn_error"
    STATE = "state_error"
    NOT_FOUND = "not_found"
    INTERNAL = "internal_error"


class GameError(Exception):
    """Base class for all engine errors."""

    kind: ErrorKind = ErrorKind.INTERNAL
    status_code: int = 500

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details

    def to_dict(self) -> Dict[str, Any]:
        return {'error': self.message, 'kind': self.kind.value}


class ValidationError(GameError):
    """Malformed guess, unknown word or invalid game configuration."""
    kind = ErrorKind.VALIDATION
    status_code = 400


class TurnError(GameError):
    """A multiplayer guess was submitted by a player whose turn it is not."""
    kind = ErrorKind.TURN
    status_code = 400

    def __init__(self, expected_player_id: str, expected_player_name: str,
                 acting_player_id: Optional[str] = None):
        super().__init__(
            f"It's {expected_player_name}'s turn",
            expected_player_id=expected_player_id,
            acting_player_id=acting_player_id,
        )
        self.expected_player_id = expected_player_id
        self.expected_player_name = expected_player_name


class StateError(GameError):
    """The session no longer accepts guesses."""
    kind = ErrorKind.STATE
    status_code = 400


class NotFoundError(GameError):
    kind = ErrorKind.NOT_FOUND
    status_code = 404

    def __init__(self, game_id: str):
        super().__init__("Game not found", game_id=game_id)
        self.game_id = game_id


class InternalError(GameError):
    """An engine invariant was violated."""
    kind = ErrorKind.INTERNAL
    status_code = 500
