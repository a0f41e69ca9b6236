import sqlite3

import pytest

from gammondb.database import DEFAULT_SERVER, Database


def _tables(path):
    with sqlite3.connect(path) as conn:
        return {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}


def test_creates_all_tables(tmp_path):
    path = tmp_path / "db.sqlite"
    with Database(path):
        pass
    expected = {
        "games",
        "computer_games",
        "moves",
        "login",
        "settings",
        "puzzles",
        "puzzle_moves",
        "puzzle_locations",
        "puzzle_results",
        "actions",
    }
    assert expected <= _tables(path)


def test_initial_rows(tmp_path):
    path = tmp_path / "db.sqlite"
    Database(path).close()
    conn = sqlite3.connect(path)
    assert conn.execute("SELECT username, auth_token FROM login").fetchall() == [("", "")]
    assert conn.execute("SELECT dbVersion, ip FROM settings").fetchall() == [(1, DEFAULT_SERVER)]
    conn.close()


def test_reopening_keeps_data(tmp_path):
    path = tmp_path / "db.sqlite"
    Database(path).close()
    conn = sqlite3.connect(path, isolation_level=None)
    conn.execute("INSERT INTO games (id, name) VALUES (3, 'kept')")
    conn.close()
    Database(path).close()
    conn = sqlite3.connect(path)
    assert conn.execute("SELECT name FROM games").fetchall() == [("kept",)]
    assert len(conn.execute("SELECT * FROM login").fetchall()) == 1
    conn.close()


def test_clear_data(tmp_path):
    path = tmp_path / "db.sqlite"
    db = Database(path)
    conn = sqlite3.connect(path, isolation_level=None)
    conn.execute("INSERT INTO games (id, name) VALUES (1, 'a')")
    conn.execute("INSERT INTO moves (id, gameId) VALUES (1, 1)")
    conn.execute("UPDATE login SET username = 'someone', auth_token = 'token'")
    assert db.clear_data() is True
    assert conn.execute("SELECT COUNT(*) FROM games").fetchone() == (0,)
    assert conn.execute("SELECT COUNT(*) FROM moves").fetchone() == (0,)
    assert conn.execute("SELECT username, auth_token FROM login").fetchall() == [("", "")]
    conn.close()
    db.close()


def test_closed_database_rejects_use(tmp_path):
    with Database(tmp_path / "db.sqlite") as db:
        pass
    with pytest.raises(sqlite3.ProgrammingError):
        db.clear_data()