"""Checker moves of one game kept in the moves table."""

from __future__ import annotations

import os
from typing import Optional, Union

from gammondb.database import DEFAULT_PATH, Database
from gammondb.records import PieceMove

_MOVE_COLUMNS = "SELECT id, gameId, fromPos, toPos, isWhite, action, time, matchId FROM moves"


class MovesDatabase(Database):
    """Reads and writes the moves of the game selected by ``game_id``."""

    def __init__(
        self, path: Union[str, os.PathLike] = DEFAULT_PATH, game_id: int = 0
    ) -> None:
        super().__init__(path)
        self.game_id = game_id

    def _move(self, row: tuple) -> PieceMove:
        from_pos = self._int(row[2])
        to_pos = self._int(row[3])
        return PieceMove(
            id=self._int(row[0]),
            game_id=self._int(row[1]),
            from_pos=from_pos,
            move=from_pos - to_pos,
            action=self._int(row[5]),
            is_white=bool(self._int(row[4])),
            time=self._parse_time(row[6]),
            match_id=self._int(row[7]),
        )

    def moves(self) -> list[PieceMove]:
        """Every stored move, of all games."""
        return [self._move(row) for row in self._fetchall(_MOVE_COLUMNS)]

    def add_move(
        self,
        move_id: int,
        from_pos: int,
        to_pos: int,
        action: int,
        white: bool,
        match_id: int,
    ) -> None:
        self._execute(
            "INSERT INTO moves (id, gameId, fromPos, toPos, isWhite, action, time, matchId) "
            "VALUES (?,?,?,?,?,?,?,?)",
            (
                move_id,
                self.game_id,
                from_pos,
                to_pos,
                int(bool(white)),
                int(action),
                self._now(),
                match_id,
            ),
        )

    def get_moves(
        self, first_id: Optional[int] = None, match_id: Optional[int] = None
    ) -> list[PieceMove]:
        """Moves of the current game.

        With ``first_id`` given, only moves of ``match_id`` whose id is at
        least ``first_id``.
        """
        if first_id is None:
            rows = self._fetchall(f"{_MOVE_COLUMNS} WHERE gameId = ?", (self.game_id,))
        else:
            rows = self._fetchall(
                f"{_MOVE_COLUMNS} WHERE id >= ? AND matchId = ? AND gameId = ?",
                (first_id, match_id, self.game_id),
            )
        return [self._move(row) for row in rows]

    def clear_moves(self) -> None:
        self._execute("DELETE FROM moves WHERE gameId = ?", (self.game_id,))

    def last_move(self) -> int:
        """The highest move id of the current game, or 0 when it has none."""
        row = self._fetchone("SELECT MAX(id) FROM moves WHERE gameId = ?", (self.game_id,))
        return self._int(row[0]) if row else 0