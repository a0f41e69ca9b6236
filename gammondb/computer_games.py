"""Games against the computer kept in the computer_games table."""

from __future__ import annotations

import sqlite3
from typing import Any, Iterable

from gammondb.database import Database
from gammondb.records import ComputerGame


class ComputerGamesDatabase(Database):
    """Reads and writes rows of the computer_games table.

    Lookups of columns the table lacks give the same fallback as a lookup of
    an unknown game, and updates of such columns are ignored.
    """

    def _value(self, sql: str, params: Iterable[Any], missing: int = -1) -> int:
        try:
            row = self._fetchone(sql, params)
        except sqlite3.OperationalError:
            return missing
        return self._int(row[0]) if row else missing

    def _update(self, sql: str, params: Iterable[Any]) -> None:
        try:
            self._execute(sql, params)
        except sqlite3.OperationalError:
            pass

    def games(self) -> list[ComputerGame]:
        """Games against the computer that are still being played."""
        rows = self._fetchall(
            "SELECT id, computer, toScore, timeLimit, started "
            "FROM computer_games WHERE isFinished = 0"
        )
        return [
            ComputerGame(
                computer=self._int(row[1]),
                id=self._int(row[0]),
                to_score=self._int(row[2]),
                time_limit=self._int(row[3]),
                date=self._parse_time(row[4]),
            )
            for row in rows
        ]

    def last_id(self) -> int:
        """The highest game id, or 0 when there are no games."""
        return self._value("SELECT MAX(id) FROM computer_games", ())

    def last_turn(self, game_id: int) -> int:
        return self._value("SELECT turn FROM computer_games WHERE id = ?", (game_id,))

    def match_id(self, game_id: int) -> int:
        return self._value("SELECT matchId FROM computer_games WHERE id = ?", (game_id,))

    def to_score(self, game_id: int) -> int:
        return self._value("SELECT toScore FROM computer_games WHERE id = ?", (game_id,))

    def finish_game(self, game_id: int) -> int:
        """Mark the game finished.

        An update yields no row to read back, so this always returns -1.
        """
        self._update("UPDATE computer_games SET isFinished = 1 WHERE id = ?", (game_id,))
        return -1

    def is_white(self, game_id: int) -> bool:
        """The game's colour; True when it cannot be read."""
        return bool(
            self._value("SELECT isWhite FROM computer_games WHERE id = ?", (game_id,), 1)
        )

    def set_finished(self, game_id: int) -> None:
        self._update("UPDATE computer_games SET isFinished = 1 WHERE id = ?", (game_id,))

    def update_turn(self, game_id: int, turn: int) -> None:
        self._update("UPDATE computer_games SET turn = ? WHERE id = ?", (turn, game_id))

    def clear_last_action(self, game_id: int) -> None:
        self._update("UPDATE computer_games SET lastAction = 0 WHERE id = ?", (game_id,))

    def set_current_match_id(self, game_id: int, match_id: int) -> None:
        self._update(
            "UPDATE computer_games SET matchId = ? WHERE id = ?", (match_id, game_id)
        )

    def create_game(self, computer: int, score: int, seconds: int) -> int:
        """Start a new game and return its id."""
        cursor = self._execute(
            "INSERT INTO computer_games (computer, toScore, timeLimit, started) "
            "VALUES (?,?,?,?)",
            (computer, score, seconds, self._now()),
        )
        return int(cursor.lastrowid)

    def save_game(self, game_id: int, data: str) -> None:
        self._update("UPDATE computer_games SET data = ? WHERE id = ?", (data, game_id))

    def get_last_action_id(self, game_id: int) -> int:
        return self._value(
            "SELECT lastAction FROM computer_games WHERE id = ?", (game_id,)
        )

    def update_last_action_id(self, game_id: int, action_id: int) -> None:
        self._update(
            "UPDATE computer_games SET lastAction = ? WHERE id = ?", (action_id, game_id)
        )

    def delete_game(self, game_id: int) -> None:
        """Remove the game and the computer actions recorded for it."""
        self._update("DELETE FROM computer_games WHERE id = ?", (game_id,))
        self._update(
            "DELETE FROM actions WHERE gameId = ? AND computer = 1", (game_id,)
        )