"""
Game Service

Contains the game state machine for classic Wordle, turn-based multiplayer
and Absurdle.
"""

import random
import uuid
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH, load_word_list
from ..models.game import (
    GameMode, GameStatus, Player, ScoredLetter, Session, serialize_guess, to_client_state
)
from .absurdle import select_feedback
from .errors import InternalError, NotFoundError, StateError, TurnError, ValidationError
from .scoring import score_guess
from .session_store import SessionStore

DEFAULT_PLAYER_NAME = "Player"


class GameService:
    """
    Game engine managing sessions held by a SessionStore.

    This class handles:
    - Game creation for all three modes
    - Guess validation against the dictionary
    - Scoring, including the Absurdle withholding strategy
    - Turn, round and win/loss bookkeeping
    - Client-safe projections that never reveal the answer
    """

    def __init__(self, word_list: Iterable[str], store: Optional[SessionStore] = None,
                 rng: Optional[random.Random] = None, default_max_rounds: int = MAX_ROUNDS,
                 default_word_length: int = WORD_LENGTH, max_rounds_limit: int = 20,
                 max_players: int = 4):
        self.word_list = [word.upper() for word in word_list]
        self.dictionary = frozenset(self.word_list)
        self.store = store if store is not None else SessionStore()
        self.rng = rng or random.Random()
        self.default_max_rounds = default_max_rounds
        self.default_word_length = default_word_length
        self.max_rounds_limit = max_rounds_limit
        self.max_players = max_players

    def words_of_length(self, length: int) -> List[str]:
        return [word for word in self.word_list if len(word) == length]

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def _read_positive_int(self, config: Dict[str, Any], key: str, default: int) -> int:
        value = config.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValidationError(f"{key} must be a positive integer", field=key, value=value)
        return value

    def _build_players(self, mode: GameMode, player_names: Any) -> List[Player]:
        if mode is not GameMode.MULTIPLAYER:
            return [Player(id=str(uuid.uuid4()), name=DEFAULT_PLAYER_NAME)]

        if not isinstance(player_names, list) or not all(isinstance(name, str) for name in player_names):
            raise ValidationError("Player names are required for multiplayer mode", field="playerNames")
        if not 2 <= len(player_names) <= self.max_players:
            raise ValidationError(
                f"Multiplayer mode needs between 2 and {self.max_players} players",
                field="playerNames", count=len(player_names)
            )
        return [
            Player(id=str(uuid.uuid4()), name=name.strip() or DEFAULT_PLAYER_NAME)
            for name in player_names
        ]

    def create_game(self, config: Optional[Dict[str, Any]] = None) -> Tuple[str, Dict[str, Any]]:
        """
        Creates a new game session.

        Classic and multiplayer games pick a random answer upfront. Absurdle
        picks nothing and starts with every word of the right length as a
        candidate.

        Args:
            config: Dict with maxRounds, wordLength, mode and, for multiplayer,
                playerNames. Missing keys fall back to the service defaults.

        Returns:
            Tuple of (game_id, client game state)

        Raises:
            ValidationError: If the configuration is malformed
        """
        config = config or {}
        if not isinstance(config, dict):
            raise ValidationError("Game configuration must be an object")

        max_rounds = self._read_positive_int(config, 'maxRounds', self.default_max_rounds)
        if max_rounds > self.max_rounds_limit:
            raise ValidationError(
                f"maxRounds cannot exceed {self.max_rounds_limit}", field='maxRounds', value=max_rounds
            )
        word_length = self._read_positive_int(config, 'wordLength', self.default_word_length)

        try:
            mode = GameMode(config.get('mode', GameMode.CLASSIC.value))
        except ValueError:
            raise ValidationError(
                'Invalid game mode. Must be "single", "multiplayer" or "absurdle"',
                field='mode', value=config.get('mode')
            ) from None

        candidates = self.words_of_length(word_length)
        if not candidates:
            raise ValidationError(
                f"No {word_length}-letter words available", field='wordLength', value=word_length
            )

        players = self._build_players(mode, config.get('playerNames'))

        session = Session(
            id=str(uuid.uuid4()),
            mode=mode,
            players=players,
            max_rounds=max_rounds,
            word_length=word_length,
        )
        if mode is GameMode.ADVERSARIAL:
            session.candidate_pool = set(candidates)
        else:
            session.answer = self.rng.choice(candidates)

        game_id = self.store.create(session)
        return game_id, to_client_state(session)

    # ------------------------------------------------------------------
    # Guessing
    # ------------------------------------------------------------------

    def normalize_guess(self, session: Session, raw_guess: Any) -> str:
        """
        Validates a guess for a specific session.

        Raises:
            ValidationError: If the guess is not a dictionary word of the right length
        """
        if not raw_guess or not isinstance(raw_guess, str):
            raise ValidationError("Invalid guess format")

        guess = raw_guess.strip().upper()

        if len(guess) != session.word_length:
            raise ValidationError(f"Guess must be {session.word_length} letters long", guess=guess)

        if not guess.isascii() or not guess.isalpha():
            raise ValidationError("Guess must contain only letters", guess=guess)

        if guess not in self.dictionary:
            raise ValidationError("Not a valid word", guess=guess)

        return guess

    def _check_turn(self, session: Session, acting_player_id: Optional[str]) -> None:
        if session.mode is not GameMode.MULTIPLAYER or not acting_player_id:
            return
        expected = session.current_player
        if acting_player_id != expected.id:
            raise TurnError(expected.id, expected.name, acting_player_id)

    def _score(self, session: Session, guess: str) -> List[ScoredLetter]:
        if session.mode is GameMode.ADVERSARIAL and not session.is_resolved:
            if not session.candidate_pool:
                raise InternalError("Invalid game state: no candidate words", game_id=session.id)

            selection = select_feedback(guess, session.candidate_pool)
            session.candidate_pool = set(selection.narrowed_pool)
            if selection.resolved_answer is None:
                return selection.pattern

            session.answer = selection.resolved_answer
            session.candidate_pool = None

        return score_guess(guess, session.answer)

    def _advance(self, session: Session, is_win: bool) -> None:
        player = session.current_player

        if session.mode is not GameMode.MULTIPLAYER:
            if is_win:
                session.status = GameStatus.WON
                session.winner_ids = [player.id]
            else:
                session.current_round += 1
                if session.current_round >= session.max_rounds:
                    session.status = GameStatus.LOST
            return

        session.current_player_index = (session.current_player_index + 1) % len(session.players)
        if session.current_player_index != 0:
            return

        # Round boundary: everybody has guessed, reveal the outcome
        session.current_round += 1
        winners = [p.id for p in session.players if p.is_winner]
        if winners:
            session.status = GameStatus.WON
            session.winner_ids = winners
        elif session.current_round >= session.max_rounds:
            session.status = GameStatus.LOST

    def submit_guess(self, game_id: str, raw_guess: Any,
                     acting_player_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Processes a guess submission.

        Flow:
        1. Validate the game is active
        2. Validate guess format and dictionary membership
        3. Enforce multiplayer turn order when a player id is given
        4. Score the guess (Absurdle may withhold or commit to an answer)
        5. Update guesses, turn order and win/loss status

        Args:
            game_id: Unique game identifier
            raw_guess: Guess text as submitted
            acting_player_id: Player submitting the guess (multiplayer only)

        Returns:
            Dict with gameState (client projection), scoredGuess and resolved,
            which is True when this guess made an Absurdle game commit to its answer

        Raises:
            NotFoundError, StateError, ValidationError, TurnError, InternalError
        """
        def apply(session: Session) -> Dict[str, Any]:
            if session.status is not GameStatus.PLAYING:
                raise StateError("Game is not in playing state", status=session.status.value)

            guess = self.normalize_guess(session, raw_guess)
            self._check_turn(session, acting_player_id)

            was_resolved = session.is_resolved
            scored = self._score(session, guess)
            player = session.current_player
            player.guesses.append(scored)

            is_win = session.is_resolved and guess == session.answer
            if is_win:
                player.is_winner = True

            self._advance(session, is_win)

            return {
                'gameState': to_client_state(session),
                'scoredGuess': serialize_guess(scored),
                'resolved': not was_resolved and session.is_resolved,
            }

        return self.store.mutate(game_id, apply)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_session(self, game_id: str) -> Session:
        """Returns a snapshot of the full server-side session."""
        session = self.store.get(game_id)
        if session is None:
            raise NotFoundError(game_id)
        return session

    def get_game(self, game_id: str) -> Dict[str, Any]:
        """Returns the client game state. Never mutates the session."""
        return to_client_state(self.get_session(game_id))

    def get_answer(self, game_id: str) -> Optional[str]:
        """
        Retrieves the answer of a finished game.

        Returns None while the game is still being played.
        """
        self.get_session(game_id)
        return self.store.reveal_answer(game_id)

    @property
    def active_games(self) -> int:
        return len(self.store)


def create_game_service(config_class) -> GameService:
    """Builds a GameService from a configuration class."""
    return GameService(
        load_word_list(config_class.WORD_LIST_PATH),
        default_max_rounds=config_class.DEFAULT_MAX_ROUNDS,
        default_word_length=config_class.DEFAULT_WORD_LENGTH,
        max_rounds_limit=config_class.MAX_ROUNDS_LIMIT,
        max_players=config_class.MAX_PLAYERS,
    )
