import sqlite3

import pytest

from gammondb.login import LoginDatabase


@pytest.fixture
def path(tmp_path):
    return tmp_path / "db.sqlite"


@pytest.fixture
def login(path):
    with LoginDatabase(path) as db:
        yield db


def test_initial_login_is_empty(login):
    assert login.username == ""
    assert login.auth_token == ""
    assert login.user_id == 0


def test_round_trip(login):
    login.username = "player"
    login.auth_token = "token"
    login.user_id = 12
    assert login.username == "player"
    assert login.auth_token == "token"
    assert login.user_id == 12


def test_persists_across_connections(path, login):
    login.username = "player"
    with LoginDatabase(path) as other:
        assert other.username == "player"


def test_missing_row(path, login):
    conn = sqlite3.connect(path, isolation_level=None)
    conn.execute("DELETE FROM login")
    conn.close()
    assert login.user_id == -1
    assert login.username == ""
    assert login.auth_token == ""