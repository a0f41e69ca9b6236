import sqlite3

import pytest

from gammondb.games import GamesDatabase
from gammondb.records import Game, GameData


@pytest.fixture
def path(tmp_path):
    return tmp_path / "db.sqlite"


@pytest.fixture
def db(path):
    with GamesDatabase(path) as database:
        yield database


def _game(game_id, **kwargs):
    values = dict(id=game_id, name=f"game {game_id}", joined=True, turn=2, to_score=5)
    values.update(kwargs)
    return Game(**values)


def test_add_and_get_game(db):
    db.add_game(_game(4, is_white=True))
    game = db.get_game(4)
    assert (game.id, game.name, game.joined, game.turn, game.to_score) == (4, "game 4", True, 2, 5)
    assert db.is_white(4) is True


def test_get_missing_game(db):
    assert db.get_game(99) is None


def test_finished_games_are_separate(db):
    db.add_game(_game(1))
    db.add_game(_game(2))
    db.set_finished(1)
    assert [g.id for g in db.games()] == [2]
    assert [g.id for g in db.finished_games()] == [1]


def test_game_data(db):
    db.add_game(_game(1, to_score=7))
    assert db.game_data() == [GameData(1, "game 1", 7, 0, 0, 0, 0)]


def test_last_id(db):
    assert db.last_id() == 0
    db.add_game(_game(3))
    db.add_game(_game(8))
    assert db.last_id() == 8


def test_missing_game_values(db):
    assert db.last_turn(5) == -1
    assert db.match_id(5) == -1
    assert db.to_score(5) == -1
    assert db.get_last_action_id(5) == -1
    assert db.is_white(5) is True


def test_turn_match_and_last_action(db):
    db.add_game(_game(1, is_white=False))
    db.update_turn(1, 9)
    db.set_current_match_id(1, 4)
    db.update_last_action_id(1, 17)
    assert db.last_turn(1) == 9
    assert db.match_id(1) == 4
    assert db.get_last_action_id(1) == 17
    assert db.to_score(1) == 5
    assert db.is_white(1) is False
    db.clear_last_action(1)
    assert db.get_last_action_id(1) == 0


def test_last_move_id(path, db):
    assert db.get_last_move_id(1) == 0
    conn = sqlite3.connect(path, isolation_level=None)
    conn.execute("INSERT INTO moves (id, gameId) VALUES (5, 1)")
    conn.execute("INSERT INTO moves (id, gameId) VALUES (9, 1)")
    conn.execute("INSERT INTO moves (id, gameId) VALUES (11, 2)")
    conn.close()
    assert db.get_last_move_id(1) == 9


def test_delete_game(db):
    db.add_game(_game(1))
    db.add_game(_game(2))
    db.delete_game(1)
    assert db.get_game(1) is None
    assert [g.id for g in db.games()] == [2]


def test_duplicate_id_rejected(db):
    db.add_game(_game(1))
    with pytest.raises(sqlite3.IntegrityError):
        db.add_game(_game(1))