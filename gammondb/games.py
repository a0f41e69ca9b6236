"""Networked games kept in the games table."""

from __future__ import annotations

from typing import Optional

from gammondb.database import Database
from gammondb.records import Game, GameData

_GAME_COLUMNS = "SELECT id, name, joined, turn, toScore FROM games"


class GamesDatabase(Database):
    """Reads and writes rows of the games table."""

    def _game(self, row: tuple) -> Game:
        return Game(
            id=self._int(row[0]),
            name=self._str(row[1]),
            joined=bool(self._int(row[2])),
            turn=self._int(row[3]),
            to_score=self._int(row[4]),
        )

    def _value(self, sql: str, game_id: int, missing: int = -1) -> int:
        row = self._fetchone(sql, (game_id,))
        return self._int(row[0]) if row else missing

    def games(self) -> list[Game]:
        """Games that are still being played."""
        return [self._game(row) for row in self._fetchall(f"{_GAME_COLUMNS} WHERE isFinished = 0")]

    def finished_games(self) -> list[Game]:
        return [self._game(row) for row in self._fetchall(f"{_GAME_COLUMNS} WHERE isFinished = 1")]

    def game_data(self) -> list[GameData]:
        """Summaries of the games still being played."""
        rows = self._fetchall("SELECT id, name, toScore FROM games WHERE isFinished = 0")
        return [
            GameData(self._int(row[0]), self._str(row[1]), self._int(row[2]), 0, 0, 0, 0)
            for row in rows
        ]

    def get_game(self, game_id: int) -> Optional[Game]:
        row = self._fetchone(f"{_GAME_COLUMNS} WHERE id = ?", (game_id,))
        return self._game(row) if row else None

    def last_id(self) -> int:
        """The highest game id, or 0 when there are no games."""
        row = self._fetchone("SELECT MAX(id) FROM games")
        return self._int(row[0]) if row else -1

    def last_turn(self, game_id: int) -> int:
        return self._value("SELECT turn FROM games WHERE id = ?", game_id)

    def match_id(self, game_id: int) -> int:
        return self._value("SELECT matchId FROM games WHERE id = ?", game_id)

    def to_score(self, game_id: int) -> int:
        return self._value("SELECT toScore FROM games WHERE id = ?", game_id)

    def is_white(self, game_id: int) -> bool:
        """The game's colour; True when the game is unknown."""
        row = self._fetchone("SELECT isWhite FROM games WHERE id = ?", (game_id,))
        return bool(self._int(row[0])) if row else True

    def set_finished(self, game_id: int) -> None:
        self._execute("UPDATE games SET isFinished = 1 WHERE id = ?", (game_id,))

    def get_last_move_id(self, game_id: int) -> int:
        """The highest move id of the game, or 0 when it has no moves."""
        return self._value("SELECT MAX(id) FROM moves WHERE gameId = ?", game_id)

    def update_turn(self, game_id: int, turn: int) -> None:
        self._execute("UPDATE games SET turn = ? WHERE id = ?", (turn, game_id))

    def clear_last_action(self, game_id: int) -> None:
        self._execute("UPDATE games SET lastAction = 0 WHERE id = ?", (game_id,))

    def set_current_match_id(self, game_id: int, match_id: int) -> None:
        self._execute("UPDATE games SET matchId = ? WHERE id = ?", (match_id, game_id))

    def get_last_action_id(self, game_id: int) -> int:
        return self._value("SELECT lastAction FROM games WHERE id = ?", game_id)

    def update_last_action_id(self, game_id: int, action_id: int) -> None:
        self._execute("UPDATE games SET lastAction = ? WHERE id = ?", (action_id, game_id))

    def add_game(self, game: Game) -> None:
        self._execute(
            "INSERT INTO games (id, name, joined, isWhite, turn, toScore) VALUES (?,?,?,?,?,?)",
            (
                game.id,
                game.name,
                int(game.joined),
                int(game.is_white),
                game.turn,
                game.to_score,
            ),
        )

    def delete_game(self, game_id: int) -> None:
        self._execute("DELETE FROM games WHERE id = ?", (game_id,))