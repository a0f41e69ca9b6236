"""Puzzle definitions: starting locations and expected moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

ANY_COLOUR = 2


@dataclass(frozen=True)
class PuzzleLocation:
    """A checker placed on a point at the start of a puzzle."""

    position: int
    is_white: bool


@dataclass(frozen=True)
class PuzzleMove:
    """An expected move in a puzzle solution."""

    from_pos: int
    to_pos: int
    roll: int
    is_white: bool
    step: int

    @property
    def id(self) -> int:
        return 0


@dataclass
class PuzzleMoveEntry:
    """A move recorded while building a puzzle."""

    from_pos: int
    to_pos: int
    puzzle_start: bool
    puzzle_id: int


@dataclass
class PuzzleData:
    """A puzzle's description with its moves and starting locations."""

    name: str
    id: int
    difficulty: int
    is_white: bool
    moves: list[PuzzleMove] = field(default_factory=list)
    locations: list[PuzzleLocation] = field(default_factory=list)

    def add_move(self, move: PuzzleMove) -> None:
        self.moves.append(move)

    def add_location(self, location: PuzzleLocation) -> None:
        self.locations.append(location)


@dataclass
class Puzzle:
    """A puzzle ready to play: its data, solution moves and pieces."""

    data: PuzzleData
    moves: list[PuzzleMove] = field(default_factory=list)
    pieces: list[Any] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.data.name

    @property
    def id(self) -> int:
        return self.data.id

    @property
    def difficulty(self) -> int:
        return self.data.difficulty

    @property
    def is_white(self) -> bool:
        return self.data.is_white

    def steps(self) -> int:
        """The highest step number among the moves, or 0."""
        return max((move.step for move in self.moves), default=0)

    def moves_at_step(self, step: int) -> list[PuzzleMove]:
        return [move for move in self.moves if move.step == step]

    def check_move_on_step(
        self, step: int, move: int, from_pos: int, is_white: int = ANY_COLOUR
    ) -> bool:
        """Whether a roll played from a point is expected at this step.

        ``is_white`` is 0 or 1 for a colour, or 2 to accept either.
        """
        return any(
            move == expected.roll
            and from_pos == expected.from_pos
            and (is_white == int(expected.is_white) or is_white == ANY_COLOUR)
            for expected in self.moves_at_step(step)
        )