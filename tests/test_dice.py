from gammondb.dice import DiceRoll


def test_values_are_kept():
    roll = DiceRoll(3, 5)
    assert roll.dice1 == 3
    assert roll.dice2 == 5


def test_reverse_swaps_dice():
    roll = DiceRoll(2, 6)
    roll.reverse()
    assert (roll.dice1, roll.dice2) == (6, 2)


def test_reverse_twice_restores():
    roll = DiceRoll(1, 4)
    roll.reverse()
    roll.reverse()
    assert roll == DiceRoll(1, 4)


def test_reverse_of_double_is_unchanged():
    roll = DiceRoll(5, 5)
    roll.reverse()
    assert roll == DiceRoll(5, 5)
    assert roll.is_double


def test_not_double():
    assert not DiceRoll(1, 2).is_double