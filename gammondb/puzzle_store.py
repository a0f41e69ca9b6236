"""Puzzles kept in the puzzles table together with their moves."""

from __future__ import annotations

import os
from typing import Callable, Union

from gammondb.database import DEFAULT_PATH, Database
from gammondb.puzzle_moves import PuzzleMoveDatabase
from gammondb.puzzles import Puzzle, PuzzleData, PuzzleLocation


class PuzzleDatabase(Database):
    """Reads and writes puzzles, their solutions and their results."""

    def __init__(self, path: Union[str, os.PathLike] = DEFAULT_PATH) -> None:
        super().__init__(path)
        self._moves = PuzzleMoveDatabase(path)
        self._listeners: list[Callable[[], None]] = []

    def close(self) -> None:
        self._moves.close()
        super().close()

    def add_listener(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` with no arguments whenever a puzzle is inserted."""
        self._listeners.append(callback)

    def insert_puzzle(self, puzzle: PuzzleData) -> None:
        """Store a puzzle with its moves and starting locations."""
        self._execute(
            "INSERT INTO puzzles (name, id, difficulty, isWhite) VALUES (?,?,?,?)",
            (puzzle.name, puzzle.id, puzzle.difficulty, int(bool(puzzle.is_white))),
        )
        for move in puzzle.moves:
            self._moves.add_puzzle_move(puzzle.id, move)
        for location in puzzle.locations:
            self._moves.add_puzzle_location(puzzle.id, location)
        for callback in self._listeners:
            callback()

    def update_puzzle(self, puzzle: PuzzleData) -> None:
        self._execute(
            "UPDATE puzzles SET name = ?, difficulty = ?, isWhite = ? WHERE id = ?",
            (puzzle.name, puzzle.difficulty, int(bool(puzzle.is_white)), puzzle.id),
        )

    def delete_puzzle(self, puzzle_id: int) -> None:
        self._execute("DELETE FROM puzzles WHERE id = ?", (puzzle_id,))

    def get_puzzle(self, puzzle_id: int) -> PuzzleData:
        """The puzzle's description, without moves; KeyError if unknown."""
        row = self._fetchone(
            "SELECT name, difficulty, isWhite FROM puzzles WHERE id = ?", (puzzle_id,)
        )
        if row is None:
            raise KeyError(puzzle_id)
        return PuzzleData(
            name=self._str(row[0]),
            id=puzzle_id,
            difficulty=self._int(row[1]),
            is_white=bool(self._int(row[2])),
        )

    def get_puzzle_with_data(self, puzzle_id: int) -> Puzzle:
        """The puzzle with its solution moves and starting checkers."""
        puzzle = Puzzle(self.get_puzzle(puzzle_id))
        puzzle.moves = self._moves.get_puzzle_moves(puzzle_id)
        puzzle.pieces = list(self._moves.get_puzzle_locations(puzzle_id))
        return puzzle

    def get_locations(self, puzzle_id: int) -> list[PuzzleLocation]:
        return self._moves.get_puzzle_locations(puzzle_id)

    def puzzle_finished(self, puzzle_id: int, score: int) -> None:
        """Record a result, which removes the puzzle from ``get_puzzles``."""
        self._execute(
            "INSERT INTO puzzle_results (id, score) VALUES (?,?)", (puzzle_id, score)
        )

    def last_id(self) -> int:
        """The highest puzzle id, or 0 when there are none."""
        row = self._fetchone("SELECT MAX(id) FROM puzzles")
        return self._int(row[0]) if row else 0

    def get_puzzles(self) -> list[PuzzleData]:
        """Puzzles that have no recorded result yet."""
        rows = self._fetchall(
            "SELECT name, id, difficulty, isWhite FROM puzzles "
            "WHERE id NOT IN (SELECT id FROM puzzle_results)"
        )
        return [
            PuzzleData(
                name=self._str(row[0]),
                id=self._int(row[1]),
                difficulty=self._int(row[2]),
                is_white=bool(self._int(row[3])),
            )
            for row in rows
        ]