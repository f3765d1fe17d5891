"""Records of training data written to CSV."""

from __future__ import annotations

from dataclasses import dataclass

from wildgammon.inputs import InputsGen
from wildgammon.position import Position
from wildgammon.probabilities import Probabilities


@dataclass(frozen=True)
class PositionRecord:
    """A position ID with the classic five probabilities.

    ``win`` includes gammons and backgammons; ``win_g`` and ``lose_g`` include
    backgammons.
    """

    position_id: str
    win: float
    win_g: float
    win_bg: float
    lose_g: float
    lose_bg: float

    @staticmethod
    def from_position(position: Position, probabilities: Probabilities) -> PositionRecord:
        return PositionRecord(
            position_id=position.position_id(),
            win=probabilities.win_normal + probabilities.win_gammon + probabilities.win_bg,
            win_g=probabilities.win_gammon + probabilities.win_bg,
            win_bg=probabilities.win_bg,
            lose_g=probabilities.lose_gammon + probabilities.lose_bg,
            lose_bg=probabilities.lose_bg,
        )

    @staticmethod
    def csv_header() -> list[str]:
        return ["position_id", "win", "win_g", "win_bg", "lose_g", "lose_bg"]

    def as_row(self) -> list[str | float]:
        """The values in the order of :meth:`csv_header`."""
        return [self.position_id, self.win, self.win_g, self.win_bg, self.lose_g, self.lose_bg]


@dataclass(frozen=True)
class InputsRecord:
    """The six probabilities followed by the neural net inputs of a position."""

    win_normal: float
    win_gammon: float
    win_bg: float
    lose_normal: float
    lose_gammon: float
    lose_bg: float
    inputs: tuple[float, ...]

    @staticmethod
    def from_record(record: PositionRecord, inputs_gen: InputsGen) -> InputsRecord:
        position = Position.from_id(record.position_id)
        return InputsRecord(
            win_normal=record.win - record.win_g,
            win_gammon=record.win_g,
            win_bg=record.win_bg,
            lose_normal=1.0 - record.win - record.lose_g,
            lose_gammon=record.lose_g - record.lose_bg,
            lose_bg=record.lose_bg,
            inputs=tuple(inputs_gen.inputs_for_single(position)),
        )

    def as_row(self) -> list[float]:
        """The six probabilities followed by all inputs."""
        return [
            self.win_normal,
            self.win_gammon,
            self.win_bg,
            self.lose_normal,
            self.lose_gammon,
            self.lose_bg,
            *self.inputs,
        ]