import json
import random

import pytest

from wordle import create_app
from wordle.config import TestingConfig
from wordle.services import GameService
from wordle.utils.game_logger import game_logger


@pytest.fixture()
def absurdle_client():
    service = GameService(["ABCDE", "XXXAX", "XXXXA"], rng=random.Random(0))
    application, _ = create_app(TestingConfig, game_service=service)
    return application.test_client()


def entries_for(game_id):
    """JSON payloads of today's log lines that mention the game."""
    with open(game_logger.log_file, 'r', encoding='utf-8') as f:
        lines = [line for line in f if game_id in line]
    assert lines, "expected log entries for the game"
    # Format: "<asctime> | <level> | <json>"
    return [json.loads(line.split(' | ', 2)[2]) for line in lines]


def game_events(game_id, event):
    return [
        entry for entry in entries_for(game_id)
        if entry['event_type'] == 'GAME_EVENT' and entry['action'] == event
    ]


def test_absurdle_resolution_is_logged_as_json(absurdle_client):
    res = absurdle_client.post('/api/games', json={'mode': 'absurdle'})
    game_id = res.get_json()['gameId']

    res = absurdle_client.post('/api/games/guess', json={'gameId': game_id, 'guess': 'ABCDE'})
    assert res.status_code == 200
    assert 'resolved' not in res.get_json()

    events = game_events(game_id, 'absurdle_resolved')
    assert len(events) == 1
    assert events[0]['details'] == {'game_id': game_id, 'guesses_used': 1}
    assert len(game_events(game_id, 'game_created')) == 1


def test_absurdle_resolution_logged_once(absurdle_client):
    game_id = absurdle_client.post('/api/games', json={'mode': 'absurdle'}).get_json()['gameId']

    absurdle_client.post('/api/games/guess', json={'gameId': game_id, 'guess': 'ABCDE'})
    absurdle_client.post('/api/games/guess', json={'gameId': game_id, 'guess': 'XXXXA'})

    assert len(game_events(game_id, 'absurdle_resolved')) == 1


def test_finished_game_logs_age_and_answer(client, set_answer):
    game_id = client.post('/api/games', json={'mode': 'single'}).get_json()['gameId']
    set_answer(game_id, "CRANE")

    client.post('/api/games/guess', json={'gameId': game_id, 'guess': 'CRANE'})

    events = game_events(game_id, 'game_won')
    assert len(events) == 1
    details = events[0]['details']
    assert details['answer'] == 'CRANE'
    assert details['rounds_used'] == 0
    assert isinstance(details['game_age_seconds'], float)
    assert details['game_age_seconds'] >= 0
    assert game_events(game_id, 'absurdle_resolved') == []
