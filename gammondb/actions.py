"""The log of actions taken during games."""

from __future__ import annotations

from gammondb.database import Database
from gammondb.records import Action, ActionType


class ActionDatabase(Database):
    """Reads and writes rows of the actions table."""

    def insert_action(
        self,
        match_id: int,
        game_id: int,
        dice1: int,
        dice2: int,
        is_white: bool,
        action: int,
        context: int,
        is_computer: bool = False,
    ) -> None:
        self._execute(
            "INSERT INTO actions (matchId, gameId, dice1, dice2, isWhite, action, time, "
            "context, computer) VALUES (?,?,?,?,?,?,?,?,?)",
            (
                match_id,
                game_id,
                dice1,
                dice2,
                int(bool(is_white)),
                int(action),
                self._now(),
                context,
                int(bool(is_computer)),
            ),
        )

    def actions(self, game_id: int) -> list[Action]:
        rows = self._fetchall(
            "SELECT id, matchId, gameId, dice1, dice2, isWhite, action, time, context "
            "FROM actions WHERE gameId = ?",
            (game_id,),
        )
        return [
            Action(
                id=self._int(row[0]),
                match_id=self._int(row[1]),
                game_id=self._int(row[2]),
                dice1=self._int(row[3]),
                dice2=self._int(row[4]),
                is_white=bool(self._int(row[5])),
                action=self._int(row[6]),
                time=self._parse_time(row[7]),
                context=self._int(row[8]),
            )
            for row in rows
        ]

    def actions_to(self, game_id: int, max_id: int) -> list[Action]:
        """Drop the game's actions after ``max_id`` and return those left."""
        self._execute("DELETE FROM actions WHERE gameId = ? AND id > ?", (game_id, max_id))
        return self.actions(game_id)

    def last_turn_color(self, game_id: int) -> bool:
        """Whether the latest finished turn of the game was white's.

        False when no turn of the game has finished.
        """
        row = self._fetchone(
            "SELECT MAX(id), isWhite FROM actions WHERE gameId = ? AND action = ?",
            (game_id, int(ActionType.TURN_FINISH)),
        )
        if row is None:
            return True
        return bool(self._int(row[1]))