import pytest

from gammondb.puzzle_model import PuzzleModel, PuzzleRole
from gammondb.puzzle_store import PuzzleDatabase
from gammondb.puzzles import PuzzleData


@pytest.fixture
def db(tmp_path):
    with PuzzleDatabase(tmp_path / "model.db") as database:
        yield database


def test_role_values_follow_user_role():
    roles = PuzzleModel().role_names()
    assert sorted(int(role) for role in roles) == [257, 258, 259, 260]
    assert PuzzleRole(257) is PuzzleRole.INDEX


def test_role_names():
    names = PuzzleModel().role_names()
    assert names[PuzzleRole.NAME] == "name"
    assert set(names.values()) == {"index", "name", "difficulty", "data"}


def test_data_by_role():
    model = PuzzleModel()
    model.add_puzzle(PuzzleData("Prime", 4, 3, False))
    assert model.row_count() == 1
    assert model.data(0, PuzzleRole.INDEX) == 4
    assert model.data(0, PuzzleRole.NAME) == "Prime"
    assert model.data(0, PuzzleRole.DIFFICULTY) == 3
    assert model.data(0, PuzzleRole.DATA) is None


def test_data_out_of_range_is_none():
    model = PuzzleModel()
    model.add_puzzle(PuzzleData("Prime", 4, 3, False))
    assert model.data(1, PuzzleRole.NAME) is None
    assert model.data(-1, PuzzleRole.NAME) is None


def test_set_puzzles_appends_and_clear_empties():
    model = PuzzleModel()
    model.add_puzzle(PuzzleData("a", 1, 1, True))
    model.set_puzzles([PuzzleData("b", 2, 1, True), PuzzleData("c", 3, 1, True)])
    assert [model.data(row, PuzzleRole.NAME) for row in range(model.row_count())] == [
        "a",
        "b",
        "c",
    ]
    model.clear_puzzles()
    assert model.row_count() == 0


def test_set_puzzle_database_lists_open_puzzles(db):
    db.insert_puzzle(PuzzleData("one", 1, 1, True))
    db.insert_puzzle(PuzzleData("two", 2, 1, True))
    db.puzzle_finished(1, 5)
    model = PuzzleModel()
    model.set_puzzle_database(db)
    assert model.row_count() == 1
    assert model.data(0, PuzzleRole.NAME) == "two"


def test_model_follows_inserted_puzzles(db):
    model = PuzzleModel()
    model.set_puzzle_database(db)
    db.insert_puzzle(PuzzleData("one", 1, 1, True))
    db.insert_puzzle(PuzzleData("two", 2, 2, False))
    assert model.row_count() == 2
    assert model.data(1, PuzzleRole.INDEX) == 2


def test_added_puzzle_without_database_keeps_list():
    model = PuzzleModel()
    model.add_puzzle(PuzzleData("a", 1, 1, True))
    model.added_puzzle()
    assert model.row_count() == 1