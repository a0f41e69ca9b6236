"""A pair of dice values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class DiceRoll:
    """The values shown by the two dice of one roll."""

    dice1: int
    dice2: int

    def reverse(self) -> None:
        """Swap the two dice in place."""
        self.dice1, self.dice2 = self.dice2, self.dice1

    @property
    def is_double(self) -> bool:
        """True when both dice show the same value."""
        return self.dice1 == self.dice2