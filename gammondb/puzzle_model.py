"""A list of puzzles exposed by row and role."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterable, Optional

from gammondb.puzzle_store import PuzzleDatabase
from gammondb.puzzles import PuzzleData

_USER_ROLE = 256


class PuzzleRole(IntEnum):
    """Fields of a puzzle that a row can be asked for."""

    INDEX = _USER_ROLE + 1
    NAME = _USER_ROLE + 2
    DIFFICULTY = _USER_ROLE + 3
    DATA = _USER_ROLE + 4


class PuzzleModel:
    """The puzzles still to be solved, in the order they were added."""

    def __init__(self) -> None:
        self._puzzles: list[PuzzleData] = []
        self.puzzle_database: Optional[PuzzleDatabase] = None

    def add_puzzle(self, puzzle: PuzzleData) -> None:
        self._puzzles.append(puzzle)

    def set_puzzles(self, puzzles: Iterable[PuzzleData]) -> None:
        """Append the puzzles to those already listed."""
        self._puzzles.extend(puzzles)

    def clear_puzzles(self) -> None:
        self._puzzles.clear()

    def row_count(self) -> int:
        return len(self._puzzles)

    def data(self, row: int, role: int) -> Any:
        """The field of the puzzle in ``row``, or None for an unknown row or role."""
        if not 0 <= row < len(self._puzzles):
            return None
        puzzle = self._puzzles[row]
        if role == PuzzleRole.INDEX:
            return puzzle.id
        if role == PuzzleRole.NAME:
            return puzzle.name
        if role == PuzzleRole.DIFFICULTY:
            return puzzle.difficulty
        return None

    def role_names(self) -> dict[PuzzleRole, str]:
        return {
            PuzzleRole.INDEX: "index",
            PuzzleRole.NAME: "name",
            PuzzleRole.DIFFICULTY: "difficulty",
            PuzzleRole.DATA: "data",
        }

    def set_puzzle_database(self, database: PuzzleDatabase) -> None:
        """List the database's open puzzles and follow puzzles added to it."""
        self.puzzle_database = database
        database.add_listener(self.added_puzzle)
        self.set_puzzles(database.get_puzzles())

    def added_puzzle(self) -> None:
        """Reload the list from the database after a puzzle was added."""
        if self.puzzle_database is None:
            return
        self.clear_puzzles()
        self.set_puzzles(self.puzzle_database.get_puzzles())