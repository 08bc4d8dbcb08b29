import os
import random
import sys
import pytest

# Ensure the Server root (containing the `wordle` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
SERVER_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if SERVER_ROOT not in sys.path:
    sys.path.insert(0, SERVER_ROOT)

from wordle import create_app
from wordle.config import TestingConfig
from wordle.services import GameService, SessionStore


WORDS = [
    "CRANE", "SLATE", "LLAMA", "ALLOY", "ABIDE", "SPEED", "HOUSE",
    "MOUSE", "PIANO", "TIGER", "GHOST", "BRICK", "PLANET",
]


@pytest.fixture()
def store():
    return SessionStore()


@pytest.fixture()
def service(store):
    return GameService(WORDS, store=store, rng=random.Random(1234))


@pytest.fixture()
def set_answer(service):
    """Pin the secret answer of a classic or multiplayer game."""
    def _set(game_id, word):
        service.store.mutate(game_id, lambda session: setattr(session, 'answer', word))
    return _set


@pytest.fixture()
def flask_app(service):
    application, _ = create_app(TestingConfig, game_service=service)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app, client):
    test_client = flask_app.socketio.test_client(flask_app, flask_test_client=client)
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
