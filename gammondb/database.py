"""SQLite storage shared by all game databases."""

from __future__ import annotations

import os
import sqlite3
from datetime import datetime
from typing import Any, Iterable, Optional, Union

DEFAULT_PATH = "metadata.db"
DEFAULT_SERVER = "http://127.0.0.1:5001/"

_SCHEMA = (
    "CREATE TABLE games (id INTEGER PRIMARY KEY, name TEXT, joined INTEGER, "
    "lastAction INTEGER, turn INTEGER, isWhite TINYINT, isFinished TINYINT DEFAULT 0, "
    "toScore INTEGER, matchId INTEGER)",
    "CREATE TABLE computer_games (id INTEGER PRIMARY KEY, computer TEXT, "
    "isFinished TINYINT DEFAULT 0, toScore INTEGER, timeLimit INTEGER, data TEXT, "
    "started DATE)",
    "CREATE TABLE moves (id INTEGER PRIMARY KEY, gameId INTEGER, fromPos INTEGER, "
    "toPos INTEGER, action INTEGER, context INTEGER, isWhite INTEGER, time DATE, "
    "matchId INTEGER)",
    "CREATE TABLE login (id INTEGER, username TEXT, auth_token TEXT)",
    "CREATE TABLE settings (id INTEGER PRIMARY KEY, dbVersion INTEGER, ip TEXT)",
    "CREATE TABLE puzzles (name TEXT, id INTEGER PRIMARY KEY, difficulty INTEGER, "
    "isWhite TINYINT)",
    "CREATE TABLE IF NOT EXISTS puzzle_moves (id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "puzzle_id INTEGER, from_pos INTEGER, to_pos INTEGER, is_white INTEGER, "
    "step INTEGER, roll INTEGER)",
    "CREATE TABLE IF NOT EXISTS puzzle_locations (id INTEGER PRIMARY KEY AUTOINCREMENT, "
    "puzzle_id INTEGER, position INTEGER, is_white INTEGER)",
    "CREATE TABLE IF NOT EXISTS puzzle_results (id INTEGER, score INTEGER)",
    "CREATE TABLE actions (id INTEGER PRIMARY KEY AUTOINCREMENT, matchId INTEGER, "
    "gameId INTEGER, dice1 INTEGER, dice2 INTEGER, isWhite INTEGER, action INTEGER, "
    "context INTEGER DEFAULT 0, computer INTEGER DEFAULT 0, "
    "time DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP)",
)


class Database:
    """An open connection to the game database file.

    The tables are created the first time a database without any tables is
    opened.
    """

    def __init__(self, path: Union[str, os.PathLike] = DEFAULT_PATH) -> None:
        self.path = path
        self._conn = sqlite3.connect(path, isolation_level=None)
        if not self._fetchone("SELECT name FROM sqlite_master WHERE type = 'table'"):
            self._create_schema()

    def _create_schema(self) -> None:
        for statement in _SCHEMA:
            self._execute(statement)
        self._execute("INSERT INTO login (username, auth_token) VALUES ('', '')")
        self._execute(
            "INSERT INTO settings (dbVersion, ip) VALUES (1, ?)", (DEFAULT_SERVER,)
        )

    def close(self) -> None:
        self._conn.close()

    def clear_data(self) -> bool:
        """Remove all moves and games and forget the login."""
        self._execute("DELETE FROM moves")
        self._execute("UPDATE login SET username = '', auth_token = ''")
        self._execute("DELETE FROM games")
        return True

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _execute(self, sql: str, params: Iterable[Any] = ()) -> sqlite3.Cursor:
        return self._conn.execute(sql, tuple(params))

    def _fetchone(self, sql: str, params: Iterable[Any] = ()) -> Optional[tuple]:
        return self._execute(sql, params).fetchone()

    def _fetchall(self, sql: str, params: Iterable[Any] = ()) -> list[tuple]:
        return self._execute(sql, params).fetchall()

    @staticmethod
    def _now() -> str:
        return datetime.now().isoformat(sep=" ")

    @staticmethod
    def _parse_time(value: Any) -> Optional[datetime]:
        if value is None:
            return None
        if isinstance(value, datetime):
            return value
        try:
            return datetime.fromisoformat(str(value))
        except ValueError:
            return None

    @staticmethod
    def _int(value: Any) -> int:
        return 0 if value is None else int(value)

    @staticmethod
    def _str(value: Any) -> str:
        return "" if value is None else str(value)