"""
Game Data Models

Contains all game-related data structures and enums.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Set


class LetterStatus(Enum):
    """Per-letter verdict of a scored guess."""
    HIT = "hit"
    PRESENT = "present"
    MISS = "miss"
    PENDING = "empty"


class GameMode(Enum):
    """Rule set of a session. Values are the wire names used by the API."""
    CLASSIC = "single"
    MULTIPLAYER = "multiplayer"
    ADVERSARIAL = "absurdle"


class GameStatus(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class ScoredLetter:
    """A single letter of a guess together with its verdict."""
    char: str
    verdict: LetterStatus

    def to_dict(self) -> Dict[str, str]:
        return {"char": self.char, "state": self.verdict.value}


@dataclass
class Player:
    """A participant in a session. Guesses are append-only."""
    id: str
    name: str
    guesses: List[List[ScoredLetter]] = field(default_factory=list)
    is_winner: bool = False


@dataclass
class Session:
    """
    Server-side game state.

    Holds the secret answer and, for absurdle games, the candidate pool.
    Neither is ever exposed to clients; use ``to_client_state`` for that.
    """
    id: str
    mode: GameMode
    players: List[Player]
    max_rounds: int
    word_length: int
    answer: Optional[str] = None  # None only while an absurdle game is unresolved
    candidate_pool: Optional[Set[str]] = None
    current_player_index: int = 0
    current_round: int = 0
    status: GameStatus = GameStatus.PLAYING
    winner_ids: List[str] = field(default_factory=list)
    created_at: float = field(default_factory=time.time)

    @property
    def current_player(self) -> Player:
        return self.players[self.current_player_index]

    @property
    def is_resolved(self) -> bool:
        return self.answer is not None


def serialize_guess(guess: List[ScoredLetter]) -> List[Dict[str, str]]:
    return [letter.to_dict() for letter in guess]


def summarize_letters(guesses: Iterable[List[ScoredLetter]]) -> Dict[str, str]:
    """
    Best verdict seen so far for every guessed letter (keyboard colouring).

    Status can only progress in priority order: hit > present > miss.
    """
    letter_status: Dict[str, str] = {}
    for guess in guesses:
        for letter in guess:
            current = letter_status.get(letter.char)
            if letter.verdict is LetterStatus.HIT:
                letter_status[letter.char] = LetterStatus.HIT.value
            elif letter.verdict is LetterStatus.PRESENT and current != LetterStatus.HIT.value:
                letter_status[letter.char] = LetterStatus.PRESENT.value
            elif letter.verdict is LetterStatus.MISS and current is None:
                letter_status[letter.char] = LetterStatus.MISS.value
    return letter_status


def to_client_state(session: Session, current_guess: str = "") -> Dict[str, Any]:
    """
    Builds the client-safe projection of a session.

    The answer and the candidate pool are never part of the projection.
    """
    return {
        "id": session.id,
        "mode": session.mode.value,
        "players": [
            {
                "id": player.id,
                "name": player.name,
                "guesses": [serialize_guess(guess) for guess in player.guesses],
                "isWinner": player.is_winner,
                "letterStatus": summarize_letters(player.guesses),
            }
            for player in session.players
        ],
        "currentPlayerIndex": session.current_player_index,
        "currentRow": session.current_round,
        "gameStatus": session.status.value,
        "winnerId": session.winner_ids[0] if session.winner_ids else None,
        "winnerIds": list(session.winner_ids),
        "maxRounds": session.max_rounds,
        "wordLength": session.word_length,
        "currentGuess": current_guess,
    }
