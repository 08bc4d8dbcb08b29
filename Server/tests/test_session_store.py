import threading
import time

import pytest

from wordle.models import GameMode, GameStatus, Player, Session
from wordle.services import NotFoundError, SessionStore


def make_session(session_id="game-1", mode=GameMode.CLASSIC, answer="CRANE", pool=None):
    return Session(
        id=session_id,
        mode=mode,
        players=[Player(id="p1", name="Player")],
        max_rounds=6,
        word_length=5,
        answer=answer,
        candidate_pool=pool,
    )


def test_create_and_get_snapshot(store):
    store.create(make_session())
    snapshot = store.get("game-1")
    assert snapshot.answer == "CRANE"

    snapshot.current_round = 5
    snapshot.players[0].guesses.append([])

    fresh = store.get("game-1")
    assert fresh.current_round == 0
    assert fresh.players[0].guesses == []


def test_get_unknown_returns_none(store):
    assert store.get("missing") is None
    assert "missing" not in store


def test_mutate_commits_result(store):
    store.create(make_session())

    def bump(session):
        session.current_round += 1
        return session.current_round

    assert store.mutate("game-1", bump) == 1
    assert store.get("game-1").current_round == 1


def test_failed_mutation_leaves_session_untouched(store):
    store.create(make_session())

    def half_done(session):
        session.current_round = 3
        raise ValueError("boom")

    with pytest.raises(ValueError):
        store.mutate("game-1", half_done)
    assert store.get("game-1").current_round == 0


def test_mutate_unknown_raises_not_found(store):
    with pytest.raises(NotFoundError) as excinfo:
        store.mutate("missing", lambda session: None)
    assert excinfo.value.game_id == "missing"
    assert excinfo.value.status_code == 404


def test_mutations_on_one_session_are_serialized(store):
    store.create(make_session())

    def slow_bump(session):
        value = session.current_round
        time.sleep(0.001)
        session.current_round = value + 1

    def worker():
        for _ in range(25):
            store.mutate("game-1", slow_bump)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert store.get("game-1").current_round == 200


def test_sessions_do_not_share_locks(store):
    store.create(make_session("a"))
    store.create(make_session("b"))
    entered = threading.Event()
    release = threading.Event()

    def hold(session):
        entered.set()
        release.wait(timeout=5)

    holder = threading.Thread(target=store.mutate, args=("a", hold))
    holder.start()
    assert entered.wait(timeout=5)

    # "b" must not wait on the lock held for "a"
    store.mutate("b", lambda session: setattr(session, 'current_round', 1))
    assert store.get("b").current_round == 1

    release.set()
    holder.join()


def test_reveal_answer_only_after_game_ends(store):
    store.create(make_session())
    assert store.reveal_answer("game-1") is None

    store.mutate("game-1", lambda session: setattr(session, 'status', GameStatus.LOST))
    assert store.reveal_answer("game-1") == "CRANE"


def test_reveal_answer_unknown_is_none(store):
    assert store.reveal_answer("missing") is None


def test_reveal_unresolved_absurdle_singleton(store):
    store.create(make_session(mode=GameMode.ADVERSARIAL, answer=None, pool={"GHOST"}))
    store.mutate("game-1", lambda session: setattr(session, 'status', GameStatus.LOST))
    assert store.reveal_answer("game-1") == "GHOST"


def test_reveal_unresolved_absurdle_with_many_candidates(store):
    store.create(make_session(mode=GameMode.ADVERSARIAL, answer=None, pool={"GHOST", "BRICK"}))
    store.mutate("game-1", lambda session: setattr(session, 'status', GameStatus.LOST))
    assert store.reveal_answer("game-1") is None
