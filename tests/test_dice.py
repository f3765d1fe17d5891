import pytest

from wildgammon.dice import Dice, all_15_mixed, all_21, all_441, all_6_double


def test_all_441_counts_sum_to_1296_and_match_kind():
    rolls = all_441()
    assert len(rolls) == 441
    assert sum(count for _, count in rolls) == 1296
    for (first, second), count in rolls:
        if first.is_double() and second.is_double():
            assert count == 1
        elif first.is_double() or second.is_double():
            assert count == 2
        else:
            assert count == 4


def test_all_441_has_distinct_dice():
    seen = set()
    for dice, _ in all_441():
        assert 1 <= dice[0].small <= dice[0].big <= 6
        seen.add(dice)
    assert len(seen) == 441


def test_all_21_order_and_counts():
    rolls = all_21()
    assert len(rolls) == 21
    assert rolls[0] == (Dice(1, 1), 1)
    assert rolls[1] == (Dice(1, 2), 2)
    assert rolls[-1] == (Dice(6, 6), 1)
    assert sum(count for _, count in rolls) == 36


def test_all_6_double():
    doubles = all_6_double()
    assert doubles == tuple(Dice(d, d) for d in range(1, 7))
    assert all(d.is_double() for d in doubles)


def test_all_15_mixed():
    mixed = all_15_mixed()
    assert len(mixed) == 15
    assert len(set(mixed)) == 15
    assert mixed[0] == Dice(2, 1)
    assert not any(d.is_double() for d in mixed)


def test_dice_order_does_not_matter():
    dice = Dice(3, 5)
    assert dice == Dice(5, 3)
    assert (dice.big, dice.small) == (5, 3)
    assert hash(dice) == hash(Dice(5, 3))


def test_double_detection():
    assert Dice(4, 4).is_double()
    assert not Dice(4, 2).is_double()


@pytest.mark.parametrize("values", [(0, 1), (1, 7), (7, 7), (3, 0)])
def test_illegal_values_raise(values):
    with pytest.raises(ValueError, match="Dice values must be between 1 and 6."):
        Dice(*values)