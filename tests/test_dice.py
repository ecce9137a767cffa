import pytest

from marais import dice


@pytest.mark.parametrize(
    ("roll", "sides"),
    [(dice.d4, 4), (dice.d6, 6), (dice.d10, 10), (dice.d20, 20)],
)
def test_die_stays_in_range_and_reaches_both_ends(roll, sides):
    dice.seed(1234)
    seen = {roll() for _ in range(2000)}
    assert seen == set(range(1, sides + 1))


def test_randint_is_inclusive():
    dice.seed(7)
    seen = {dice.randint(-2, 2) for _ in range(500)}
    assert seen == {-2, -1, 0, 1, 2}


def test_randint_single_value():
    assert dice.randint(5, 5) == 5


def test_randint_empty_range_raises():
    with pytest.raises(ValueError):
        dice.randint(3, 2)


def test_seed_makes_rolls_reproducible():
    dice.seed(99)
    first = [dice.d20() for _ in range(30)]
    dice.seed(99)
    second = [dice.d20() for _ in range(30)]
    assert first == second


def test_distinct_integers_are_distinct_and_in_range():
    dice.seed(3)
    values = dice.distinct_integers(10, 30, 8)
    assert len(values) == 8
    assert len(set(values)) == 8
    assert all(10 <= v <= 30 for v in values)


def test_distinct_integers_full_range_is_permutation():
    dice.seed(11)
    values = dice.distinct_integers(1, 6, 6)
    assert sorted(values) == [1, 2, 3, 4, 5, 6]


def test_distinct_integers_single():
    assert dice.distinct_integers(3, 3, 1) == [3]


def test_distinct_integers_zero_count():
    assert dice.distinct_integers(1, 10, 0) == []


def test_distinct_integers_too_many_raises():
    with pytest.raises(ValueError, match="Quantité trop grande"):
        dice.distinct_integers(1, 4, 5)