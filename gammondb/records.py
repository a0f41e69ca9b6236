"""Plain records stored in and read from the game databases."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Optional


class ActionType(IntEnum):
    """Kinds of action recorded during a game."""

    NONE = 0
    START_ROLL = 1
    FIRST_TURN = 2
    FIRST_TURN_REROLL = 3
    ROLL = 4
    TURN_FINISH = 5
    UNDO = 6
    MOVE = 7
    WON = 8
    DOUBLE = 9
    FINISHED = 10


@dataclass
class Action:
    """One recorded action of a game."""

    id: int = 0
    match_id: int = 0
    game_id: int = 0
    dice1: int = 0
    dice2: int = 0
    is_white: bool = False
    action: int = 0
    time: Optional[datetime] = None
    context: int = 0

    def __post_init__(self) -> None:
        self.is_white = bool(self.is_white)


@dataclass(frozen=True)
class GameData:
    """Summary of a game as listed from the database."""

    id: int
    name: str
    to_score: int
    score1: int = 0
    score2: int = 0
    double_val: int = 1
    match_id: int = 0


@dataclass
class Game:
    """A networked game and its current state."""

    id: int = 0
    name: str = ""
    joined: bool = False
    turn: int = 0
    to_score: int = 0
    is_white: bool = False
    score1: int = 0
    score2: int = 0
    double_val: int = 1
    match_id: int = 0

    def __post_init__(self) -> None:
        self.joined = bool(self.joined)
        self.is_white = bool(self.is_white)


@dataclass
class PieceMove:
    """One checker move recorded for a game."""

    id: int = 0
    game_id: int = 0
    from_pos: int = 0
    move: int = 0
    action: int = 0
    context: int = 0
    is_white: bool = False
    time: Optional[datetime] = None
    match_id: int = 0

    def __post_init__(self) -> None:
        self.is_white = bool(self.is_white)


@dataclass(frozen=True)
class ComputerGame:
    """A game played against the computer."""

    computer: int
    id: int
    to_score: int
    time_limit: int
    date: Optional[datetime] = None