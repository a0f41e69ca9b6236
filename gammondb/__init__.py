"""Backgammon game records, puzzles and their SQLite storage."""

__version__ = "1.0.0"

__all__ = [
    "actions",
    "computer_games",
    "database",
    "dice",
    "games",
    "login",
    "moves",
    "puzzle_model",
    "puzzle_moves",
    "puzzle_store",
    "puzzles",
    "records",
    "settings",
]