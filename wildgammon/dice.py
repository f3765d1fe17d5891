"""Rolls of two six-sided dice and the tables of all possible rolls."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations, product


@dataclass(frozen=True, init=False)
class Dice:
    """A legal roll of two dice. ``big`` is never smaller than ``small``."""

    big: int
    small: int

    def __init__(self, die1: int, die2: int) -> None:
        if not (1 <= die1 <= 6 and 1 <= die2 <= 6):
            raise ValueError("Dice values must be between 1 and 6.")
        object.__setattr__(self, "big", max(die1, die2))
        object.__setattr__(self, "small", min(die1, die2))

    def is_double(self) -> bool:
        """Whether both dice show the same number."""
        return self.big == self.small


def all_21() -> tuple[tuple[Dice, int], ...]:
    """All 21 distinct rolls with how often each appears in 36 rolls."""
    rolls: list[tuple[Dice, int]] = []
    for first in range(1, 7):
        rolls.append((Dice(first, first), 1))
        rolls.extend((Dice(first, second), 2) for second in range(first + 1, 7))
    return tuple(rolls)


def all_441() -> tuple[tuple[tuple[Dice, Dice], int], ...]:
    """All 441 pairs of rolls with how often each pair appears in 1296 rolls."""
    rolls = all_21()
    return tuple(
        ((first, second), first_count * second_count)
        for (first, first_count), (second, second_count) in product(rolls, rolls)
    )


def all_6_double() -> tuple[Dice, ...]:
    """All six double rolls."""
    return tuple(Dice(die, die) for die in range(1, 7))


def all_15_mixed() -> tuple[Dice, ...]:
    """All fifteen rolls with two different dice."""
    return tuple(Dice(a, b) for a, b in combinations(range(1, 7), 2))


ALL_21 = all_21()
ALL_441 = all_441()