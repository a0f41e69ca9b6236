"""Solution moves and starting locations of puzzles."""

from __future__ import annotations

import sqlite3

from gammondb.database import Database
from gammondb.puzzles import PuzzleLocation, PuzzleMove


class PuzzleMoveDatabase(Database):
    """Reads and writes the puzzle_moves and puzzle_locations tables."""

    def add_puzzle_move(self, puzzle_id: int, move: PuzzleMove) -> bool:
        """Store a solution move of the puzzle; False if it could not be stored."""
        try:
            self._execute(
                "INSERT INTO puzzle_moves (puzzle_id, from_pos, to_pos, roll, step, is_white) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (
                    puzzle_id,
                    move.from_pos,
                    move.to_pos,
                    move.roll,
                    move.step,
                    int(bool(move.is_white)),
                ),
            )
        except sqlite3.Error:
            return False
        return True

    def get_puzzle_moves(self, puzzle_id: int) -> list[PuzzleMove]:
        rows = self._fetchall(
            "SELECT from_pos, to_pos, roll, is_white, step FROM puzzle_moves "
            "WHERE puzzle_id = ?",
            (puzzle_id,),
        )
        return [
            PuzzleMove(
                from_pos=self._int(row[0]),
                to_pos=self._int(row[1]),
                roll=self._int(row[2]),
                is_white=bool(self._int(row[3])),
                step=self._int(row[4]),
            )
            for row in rows
        ]

    def add_puzzle_location(self, puzzle_id: int, location: PuzzleLocation) -> bool:
        """Store a starting checker of the puzzle; False if it could not be stored."""
        try:
            self._execute(
                "INSERT INTO puzzle_locations (puzzle_id, position, is_white) VALUES (?,?,?)",
                (puzzle_id, location.position, int(bool(location.is_white))),
            )
        except sqlite3.Error:
            return False
        return True

    def get_puzzle_locations(self, puzzle_id: int) -> list[PuzzleLocation]:
        rows = self._fetchall(
            "SELECT position, is_white FROM puzzle_locations WHERE puzzle_id = ?",
            (puzzle_id,),
        )
        return [
            PuzzleLocation(position=self._int(row[0]), is_white=bool(self._int(row[1])))
            for row in rows
        ]