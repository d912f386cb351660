import threading

import pytest

from quizboard import models
from quizboard.models import generate_game_code
from quizboard.services.games.scoring import apply_points, create_teams
from quizboard.store import GameStore


def test_get_or_create_is_lazy_and_stable():
    store = GameStore()
    assert '123456' not in store
    game = store.get_or_create('123456')
    assert '123456' in store
    assert game.teams == [] and game.active is False
    assert store.get_or_create('123456') is game
    assert len(store) == 1


def test_stores_are_isolated():
    a, b = GameStore(), GameStore()
    a.get_or_create('111111')
    assert '111111' not in b


def test_concurrent_score_updates_are_not_lost():
    store = GameStore()
    with store.locked('222222') as game:
        create_teams(game, ['A', 'B'])

    def worker():
        for _ in range(200):
            with store.locked('222222') as g:
                apply_points(g, 1, 1)
                apply_points(g, 2, -1)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    game = store.get_or_create('222222')
    assert game.find_team(1).score == 1600
    assert game.find_team(2).score == -1600
    assert game.total_score == 0


def test_generate_game_code_shape():
    for _ in range(50):
        code = generate_game_code()
        assert len(code) == 6 and code.isdigit()
        assert 100000 <= int(code) <= 999999


def test_generate_game_code_skips_taken(monkeypatch):
    draws = iter([123456, 123456, 654321])
    monkeypatch.setattr(models.random, 'randint', lambda a, b: next(draws))
    assert generate_game_code({'123456'}) == '654321'


def test_generate_game_code_gives_up(monkeypatch):
    monkeypatch.setattr(models.random, 'randint', lambda a, b: 123456)
    with pytest.raises(RuntimeError):
        generate_game_code({'123456'}, max_attempts=3)
