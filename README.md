# gammondb

Records and storage for a backgammon application: dice rolls, game and move
records, puzzles, and a set of SQLite-backed stores that keep games, moves,
actions, settings, login details and puzzles in one database file.

## Installation

```
pip install .
```

The package uses only the standard library. To run the tests:

```
pip install .[test]
pytest
```

## Records

- `gammondb.dice.DiceRoll(dice1, dice2)`: a pair of dice. `reverse()` swaps
  the two values in place, and `is_double` tells whether they are equal.
- `gammondb.records`:
  - `ActionType`: the kinds of recorded action, from `NONE` (0) to
    `FINISHED` (10).
  - `Action`, `GameData`, `Game`, `PieceMove` and `ComputerGame`: dataclasses
    for the rows the stores read and write.
- `gammondb.puzzles`:
  - `PuzzleLocation(position, is_white)`: a starting checker.
  - `PuzzleMove(from_pos, to_pos, roll, is_white, step)`: an expected move.
  - `PuzzleMoveEntry`: a move recorded while a puzzle is being built.
  - `PuzzleData`: name, id, difficulty and colour, with `add_move()` and
    `add_location()`.
  - `Puzzle`: a `PuzzleData` with its solution moves and pieces.
    `steps()` gives the highest step number (0 with no moves),
    `moves_at_step(step)` lists the moves of a step, and
    `check_move_on_step(step, move, from_pos, is_white=2)` tells whether a
    roll played from a point is expected at that step. `is_white` is 0 or 1
    for a colour, or 2 to accept either.

## Stores

Every store is a `gammondb.database.Database`. It opens the SQLite file at
the given path (`metadata.db` by default) and creates all tables the first
time it finds a file with no tables. At that point it also adds an empty login
row and a settings row holding `http://127.0.0.1:5001/`. Each store has
`close()`, `clear_data()` (removes all games and moves and blanks the login),
and works as a context manager.

- `gammondb.settings.SettingsDatabase`: `ips()`, `add_ip(ip)`,
  `select_ip(ip_id)`, and `ip()`, which gives the address stored under the
  selected row id (1 at first), or `""`.
- `gammondb.login.LoginDatabase`: the properties `username`, `auth_token` and
  `user_id`, each readable and assignable.
- `gammondb.actions.ActionDatabase`: `insert_action(...)`, `actions(game_id)`,
  `actions_to(game_id, max_id)` (deletes the game's actions after `max_id`
  and returns the rest), and `last_turn_color(game_id)` (whether the latest
  `TURN_FINISH` action was white's, False if there is none).
- `gammondb.games.GamesDatabase`: online games. `games()`, `finished_games()`,
  `game_data()`, `get_game(game_id)` (None if unknown), `add_game(game)`,
  `delete_game(game_id)`, and lookups and updates of turn, match id, target
  score, colour, finished flag and last action id.
- `gammondb.computer_games.ComputerGamesDatabase`: games against the
  computer. `create_game(computer, score, seconds)` returns the new id.
  `games()`, `save_game(game_id, data)` and `delete_game(game_id)` are also
  provided; `delete_game` also removes that game's computer actions. The
  table has no turn, match id, colour or last action columns. Lookups of
  those give the fallback value (-1, or True for `is_white`), and updates of
  them are ignored.
- `gammondb.moves.MovesDatabase(path, game_id=0)`: moves of the game chosen
  by `game_id`. `add_move(...)`, `moves()` (all games),
  `get_moves(first_id=None, match_id=None)`, `clear_moves()` and
  `last_move()`. The `move` of each returned `PieceMove` is
  `from_pos - to_pos`.
- `gammondb.puzzle_moves.PuzzleMoveDatabase`: `add_puzzle_move`,
  `get_puzzle_moves`, `add_puzzle_location` and `get_puzzle_locations`.
- `gammondb.puzzle_store.PuzzleDatabase`: provides the following.
  - `insert_puzzle(puzzle)` stores a puzzle together with its moves and
    locations, then calls every callback registered with `add_listener`.
  - `get_puzzle(puzzle_id)` raises `KeyError` for an unknown id.
  - `get_puzzle_with_data(puzzle_id)` returns a `Puzzle` whose `pieces` are
    its `PuzzleLocation`s.
  - `puzzle_finished(puzzle_id, score)` records a result; from then on the
    puzzle no longer appears in `get_puzzles()`.
  - It also has `update_puzzle`, `delete_puzzle`, `get_locations` and
    `last_id`.

`gammondb.puzzle_model.PuzzleModel` lists puzzles as rows. `data(row, role)`
takes a `PuzzleRole` (`INDEX`, `NAME`, `DIFFICULTY`, `DATA`) and gives None
for an unknown row or role. `set_puzzle_database(db)` loads the unsolved
puzzles and reloads the list whenever the database inserts a new one.

## Example

```python
from gammondb.puzzles import PuzzleData, PuzzleMove
from gammondb.puzzle_store import PuzzleDatabase

with PuzzleDatabase("metadata.db") as store:
    puzzle = PuzzleData("Bear off", 1, 2, True)
    puzzle.add_move(PuzzleMove(6, 0, 6, True, 1))
    store.insert_puzzle(puzzle)

    full = store.get_puzzle_with_data(1)
    print(full.steps())                        # 1
    print(full.check_move_on_step(1, 6, 6, 1))  # True
```

## What it does not do

This package keeps records only. It has the following limits:

- It does not know the rules of backgammon and does not check or generate
  moves.
- It does not analyse or score positions.
- It does not talk to a game server; the stored server addresses and login
  are only kept.
- It has no board display, user interface or command-line program.