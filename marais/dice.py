"""Dice rolls and random draws shared by the whole game."""

from __future__ import annotations

import random

_rng = random.Random()


def seed(value: int | None) -> None:
    """Reseed the shared generator, making later rolls reproducible."""
    _rng.seed(value)


def randint(low: int, high: int) -> int:
    """Return a uniformly drawn integer in ``[low, high]``."""
    if low > high:
        raise ValueError(f"empty range [{low}, {high}]")
    return _rng.randint(low, high)


def d4() -> int:
    """Roll a four-sided die."""
    return randint(1, 4)


def d6() -> int:
    """Roll a six-sided die."""
    return randint(1, 6)


def d10() -> int:
    """Roll a ten-sided die."""
    return randint(1, 10)


def d20() -> int:
    """Roll a twenty-sided die."""
    return randint(1, 20)


def distinct_integers(low: int, high: int, count: int) -> list[int]:
    """Return ``count`` distinct integers from ``[low, high]`` in random order."""
    size = high - low + 1
    if count > size:
        raise ValueError("Quantité trop grande pour la plage donnée")
    if count < 0:
        raise ValueError("count must not be negative")
    return _rng.sample(range(low, high + 1), count)