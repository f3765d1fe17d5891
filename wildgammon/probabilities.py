"""Game results, outcome probabilities and counters of results."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from decimal import Decimal
from enum import IntEnum


class GameResult(IntEnum):
    """Outcome of a finished game from the point of view of one player."""

    WIN_NORMAL = 0
    WIN_GAMMON = 1
    WIN_BG = 2
    LOSE_NORMAL = 3
    LOSE_GAMMON = 4
    LOSE_BG = 5

    def reverse(self) -> GameResult:
        """The same result from the opponent's point of view."""
        return GameResult((self + 3) % 6)


def _to_single(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _format_single(value: float) -> str:
    """Shortest decimal text that identifies ``value`` as a 32-bit float."""
    if math.isnan(value):
        return "NaN"
    single = _to_single(value)
    if math.isinf(single):
        return "inf" if single > 0 else "-inf"
    text = f"{single:.9g}"
    for digits in range(1, 10):
        candidate = f"{single:.{digits}g}"
        if _to_single(float(candidate)) == single:
            text = candidate
            break
    plain = format(Decimal(text), "f")
    if "." in plain:
        plain = plain.rstrip("0").rstrip(".")
    return plain


@dataclass(frozen=True, repr=False)
class Probabilities:
    """Cubeless chances of the six game results; they sum to 1."""

    win_normal: float = 0.0
    win_gammon: float = 0.0
    win_bg: float = 0.0
    lose_normal: float = 0.0
    lose_gammon: float = 0.0
    lose_bg: float = 0.0

    @staticmethod
    def csv_header() -> str:
        return "win_normal;win_gammon;win_bg;lose_normal;lose_gammon;lose_bg"

    def win(self) -> float:
        """Chance to win in any way."""
        return self.win_normal + self.win_gammon + self.win_bg

    def switch_sides(self) -> Probabilities:
        """The same chances from the opponent's point of view."""
        return Probabilities(
            self.lose_normal,
            self.lose_gammon,
            self.lose_bg,
            self.win_normal,
            self.win_gammon,
            self.win_bg,
        )

    def equity(self) -> float:
        """Cubeless equity."""
        return (
            self.win_normal
            - self.lose_normal
            + 2.0 * (self.win_gammon - self.lose_gammon)
            + 3.0 * (self.win_bg - self.lose_bg)
        )

    @staticmethod
    def from_counter(counter: ResultCounter) -> Probabilities:
        """Relative frequencies of the results in ``counter``."""
        total = counter.total()
        if total == 0:
            raise ValueError("counter holds no results")
        return Probabilities(*(counter.num_of(result) / total for result in GameResult))

    @staticmethod
    def from_result(result: GameResult) -> Probabilities:
        """Certainty of a single result."""
        return Probabilities(**{result.name.lower(): 1.0})

    def __str__(self) -> str:
        return ";".join(
            _format_single(value)
            for value in (
                self.win_normal,
                self.win_gammon,
                self.win_bg,
                self.lose_normal,
                self.lose_gammon,
                self.lose_bg,
            )
        )

    def __repr__(self) -> str:
        return (
            f"Probabilities: wn {100.0 * self.win_normal:.2f}%; "
            f"wg {100.0 * self.win_gammon:.2f}%; "
            f"wb {100.0 * self.win_bg:.2f}%; "
            f"ln {100.0 * self.lose_normal:.2f}%; "
            f"lg {100.0 * self.lose_gammon:.2f}%; "
            f"lb {100.0 * self.lose_bg:.2f}%"
        )


class ResultCounter:
    """Counts how often each game result occurred."""

    __slots__ = ("_results",)

    def __init__(
        self,
        win_normal: int = 0,
        win_gammon: int = 0,
        win_bg: int = 0,
        lose_normal: int = 0,
        lose_gammon: int = 0,
        lose_bg: int = 0,
    ) -> None:
        self._results = [win_normal, win_gammon, win_bg, lose_normal, lose_gammon, lose_bg]

    def add(self, result: GameResult) -> None:
        self._results[result] += 1

    def add_results(self, result: GameResult, amount: int) -> None:
        self._results[result] += amount

    def total(self) -> int:
        return sum(self._results)

    def num_of(self, result: GameResult) -> int:
        return self._results[result]

    def combine(self, counter: ResultCounter) -> ResultCounter:
        """A new counter holding the results of both counters."""
        return ResultCounter(*(a + b for a, b in zip(self._results, counter._results)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResultCounter):
            return NotImplemented
        return self._results == other._results

    def __repr__(self) -> str:
        fields = ", ".join(
            f"{result.name.lower()}={count}" for result, count in zip(GameResult, self._results)
        )
        return f"ResultCounter({fields})"