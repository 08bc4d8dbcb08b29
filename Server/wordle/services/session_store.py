"""
Session Store

In-memory keyed holder of game sessions. Knows nothing about game rules
beyond which answer may be revealed.
"""

import copy
import threading
from typing import Callable, Dict, Optional, TypeVar

from ..models.game import GameMode, GameStatus, Session
from .errors import NotFoundError

T = TypeVar('T')


class SessionStore:
    """
    Thread-safe session storage with per-session mutual exclusion.

    Each session has its own lock, so mutations of one game never wait on
    another. ``mutate`` works on a copy and only commits it when the callback
    returns normally, so a failed request leaves the session untouched.
    """

    def __init__(self):
        self._sessions: Dict[str, Session] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def _lock_for(self, session_id: str) -> threading.Lock:
        with self._registry_lock:
            lock = self._locks.get(session_id)
            if lock is None:
                lock = self._locks[session_id] = threading.Lock()
            return lock

    def create(self, session: Session) -> str:
        """Stores a freshly built session and returns its id."""
        with self._lock_for(session.id):
            self._sessions[session.id] = copy.deepcopy(session)
        return session.id

    def get(self, session_id: str) -> Optional[Session]:
        """Returns a snapshot of the session, or None if it does not exist."""
        session = self._sessions.get(session_id)
        if session is None:
            return None
        with self._lock_for(session_id):
            return copy.deepcopy(self._sessions[session_id])

    def mutate(self, session_id: str, fn: Callable[[Session], T]) -> T:
        """
        Applies ``fn`` to the session under exclusive access.

        Args:
            session_id: Session to mutate
            fn: Callback receiving a working copy of the session

        Returns:
            Whatever ``fn`` returns

        Raises:
            NotFoundError: If the session does not exist
        """
        if session_id not in self._sessions:
            raise NotFoundError(session_id)

        with self._lock_for(session_id):
            working = copy.deepcopy(self._sessions[session_id])
            result = fn(working)
            self._sessions[session_id] = working
            return result

    def reveal_answer(self, session_id: str) -> Optional[str]:
        """
        Returns the answer of a finished game.

        An unresolved absurdle game whose pool has shrunk to one word reveals
        that word. Games still in progress reveal nothing.
        """
        session = self.get(session_id)
        if session is None or session.status is GameStatus.PLAYING:
            return None

        if session.answer is not None:
            return session.answer

        if session.mode is GameMode.ADVERSARIAL and session.candidate_pool and len(session.candidate_pool) == 1:
            return next(iter(session.candidate_pool))

        return None
