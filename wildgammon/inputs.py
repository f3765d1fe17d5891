"""Neural net inputs for positions in the contact and race phases."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import ClassVar

from wildgammon.position import X_BAR, Position

_TD_INPUTS: tuple[tuple[float, float, float, float], ...] = (
    *((0.0, 0.0, 0.0, 0.0),) * 16,  # opponent checkers (-15 to -1) and an empty point
    (1.0, 0.0, 0.0, 0.0),  # one own checker
    (0.0, 1.0, 0.0, 0.0),  # two own checkers
    *((0.0, 0.0, 1.0, float(extra)) for extra in range(13)),  # three to fifteen
)


def td_inputs(number_of_checkers: int) -> tuple[float, float, float, float]:
    """The four inputs for one point holding ``number_of_checkers`` own checkers.

    Negative numbers stand for checkers of the opponent.
    """
    if not -15 <= number_of_checkers <= 15:
        raise ValueError("number of pips needs to be between -15 and 15")
    return _TD_INPUTS[number_of_checkers + 15]


def _own_inputs(pips: Sequence[int]) -> list[float]:
    return [value for p in pips for value in td_inputs(p)]


def _opponent_inputs(pips: Sequence[int]) -> list[float]:
    return [value for p in pips for value in td_inputs(-p)]


class InputsGen(ABC):
    """Turns positions into the inputs of a neural net."""

    NUM_INPUTS: ClassVar[int]

    @abstractmethod
    def inputs_for(self, position: Position) -> list[float]:
        """The ``NUM_INPUTS`` inputs for a single position."""

    def inputs_for_single(self, position: Position) -> list[float]:
        """The inputs for a single position, of length ``NUM_INPUTS``."""
        return self.inputs_for_all([position])

    def inputs_for_all(self, positions: Iterable[Position]) -> list[float]:
        """The inputs of all positions one after another, for batch evaluation."""
        inputs: list[float] = []
        for position in positions:
            inputs.extend(self.inputs_for(position))
        return inputs


class ContactInputsGen(InputsGen):
    """Inputs for positions where the players' checkers still have contact."""

    NUM_INPUTS: ClassVar[int] = 202

    def inputs_for(self, position: Position) -> list[float]:
        pips = position.pips
        return [
            float(position.x_off),
            float(position.o_off),
            *td_inputs(pips[X_BAR]),
            *_own_inputs(pips[1:X_BAR]),
            *_opponent_inputs(pips[0:X_BAR]),
        ]


class RaceInputsGen(InputsGen):
    """Inputs for race positions, where no checker can be hit anymore."""

    NUM_INPUTS: ClassVar[int] = 186

    def inputs_for(self, position: Position) -> list[float]:
        pips = position.pips
        # During a race no checkers are on a bar, none of x on 24 and none of o on 1.
        return [
            float(position.x_off),
            float(position.o_off),
            *_own_inputs(pips[1:24]),
            *_opponent_inputs(pips[2:X_BAR]),
        ]