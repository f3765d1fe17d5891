"""Backgammon positions without match information, seen from player ``x``."""

from __future__ import annotations

import base64
import binascii
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from wildgammon.probabilities import GameResult

NUM_OF_CHECKERS = 15
X_BAR = 25
O_BAR = 0
_NUM_PIPS = 26
_ID_BYTES = 10


class OngoingPhase(Enum):
    """Phase of a game that has not ended yet."""

    CONTACT = "contact"
    RACE = "race"


@dataclass(frozen=True, repr=False)
class Position:
    """A single position with two players ``x`` and ``o``.

    Index 25 of ``pips`` is the bar of ``x``, index 0 the bar of ``o``. The other
    indices are the points from the view of ``x``, who moves from 24 towards 0.
    Positive numbers are checkers of ``x``, negative numbers checkers of ``o``.
    """

    pips: tuple[int, ...]
    x_off: int
    o_off: int

    def __post_init__(self) -> None:
        pips = tuple(self.pips)
        if len(pips) != _NUM_PIPS:
            raise ValueError(f"A position needs {_NUM_PIPS} pips, got {len(pips)}.")
        object.__setattr__(self, "pips", pips)

    @staticmethod
    def from_pips(pips: Iterable[int]) -> Position:
        """Build a position from 26 pips; checkers off the board are derived."""
        pips = tuple(pips)
        if len(pips) != _NUM_PIPS:
            raise ValueError(f"A position needs {_NUM_PIPS} pips, got {len(pips)}.")
        x_off = NUM_OF_CHECKERS - sum(p for p in pips if p > 0)
        o_off = NUM_OF_CHECKERS + sum(p for p in pips if p < 0)
        if x_off < 0:
            raise ValueError("Player x has more than 15 checkers on the board.")
        if o_off < 0:
            raise ValueError("Player o has more than 15 checkers on the board.")
        if pips[X_BAR] < 0:
            raise ValueError(
                "Index 25 is the bar for player x, number of checkers needs to be positive."
            )
        if pips[O_BAR] > 0:
            raise ValueError(
                "Index 0 is the bar for player o, number of checkers needs to be negative."
            )
        return Position(pips, x_off, o_off)

    @staticmethod
    def from_dicts(x: Mapping[int, int], o: Mapping[int, int]) -> Position:
        """Build a position from ``{point: checkers}`` mappings for both players."""
        pips = [0] * _NUM_PIPS
        for point, checkers in x.items():
            pips[point] = checkers
        for point, checkers in o.items():
            if pips[point] != 0:
                raise ValueError(f"Point {point} holds checkers of both players.")
            pips[point] = -checkers
        return Position.from_pips(pips)

    @staticmethod
    def from_id(position_id: str) -> Position:
        """Decode a GnuBG position ID."""
        if "=" in position_id:
            raise ValueError("Position encoding expects valid id.")
        padded = position_id + "=" * (-len(position_id) % 4)
        try:
            key = base64.b64decode(padded, validate=True)
        except (binascii.Error, ValueError) as error:
            raise ValueError("Position encoding expects valid id.") from error
        if len(key) > _ID_BYTES:
            raise ValueError("Position encoding expects valid id.")
        bits = int.from_bytes(key.ljust(_ID_BYTES, b"\0"), "little")

        pips = [0] * _NUM_PIPS
        bit_index = 0
        o_pieces = 0
        for point in reversed(range(O_BAR, X_BAR)):
            while bits >> bit_index & 1:
                pips[point] -= 1
                o_pieces += 1
                bit_index += 1
            bit_index += 1
        x_pieces = 0
        for point in range(O_BAR + 1, X_BAR + 1):
            while bits >> bit_index & 1:
                pips[point] += 1
                x_pieces += 1
                bit_index += 1
            bit_index += 1

        if x_pieces > NUM_OF_CHECKERS or o_pieces > NUM_OF_CHECKERS:
            raise ValueError("Position encoding expects valid id.")
        return Position(pips, NUM_OF_CHECKERS - x_pieces, NUM_OF_CHECKERS - o_pieces)

    def position_id(self) -> str:
        """Encode as GnuBG position ID."""
        bits = 0
        bit_index = 0
        for point in reversed(range(O_BAR, X_BAR)):
            for _ in range(-self.pips[point]):
                bits |= 1 << bit_index
                bit_index += 1
            bit_index += 1
        for point in range(O_BAR + 1, X_BAR + 1):
            for _ in range(self.pips[point]):
                bits |= 1 << bit_index
                bit_index += 1
            bit_index += 1
        key = bits.to_bytes(_ID_BYTES, "little")
        return base64.b64encode(key).decode("ascii").rstrip("=")

    def to_pips(self) -> tuple[int, ...]:
        return self.pips

    def pip(self, pip: int) -> int:
        """Positive for checkers of ``x``, negative for checkers of ``o``."""
        return self.pips[pip]

    def has_lost(self) -> bool:
        return self.o_off == NUM_OF_CHECKERS

    def game_state(self) -> GameResult | None:
        """The result if the game is over, otherwise ``None``."""
        if self.x_off == NUM_OF_CHECKERS:
            if self.o_off > 0:
                return GameResult.WIN_NORMAL
            if any(p < 0 for p in self.pips[O_BAR:7]):
                return GameResult.WIN_BG
            return GameResult.WIN_GAMMON
        if self.o_off == NUM_OF_CHECKERS:
            if self.x_off > 0:
                return GameResult.LOSE_NORMAL
            if any(p > 0 for p in self.pips[19 : X_BAR + 1]):
                return GameResult.LOSE_BG
            return GameResult.LOSE_GAMMON
        return None

    def game_phase(self) -> OngoingPhase | GameResult:
        """The result if the game is over, otherwise contact or race."""
        result = self.game_state()
        if result is not None:
            return result
        last_own_checker = max(i for i, p in enumerate(self.pips) if p > 0)
        last_opponent_checker = min(i for i, p in enumerate(self.pips) if p < 0)
        if last_own_checker > last_opponent_checker:
            return OngoingPhase.CONTACT
        return OngoingPhase.RACE

    def sides_switched(self) -> Position:
        """The same position from the point of view of the opponent."""
        return Position(tuple(-p for p in reversed(self.pips)), self.o_off, self.x_off)

    def moved_single_checker(self, from_pip: int, die: int) -> Position:
        """Move one checker of ``x``; only call this for legal moves."""
        pips = list(self.pips)
        x_off = self.x_off
        pips[from_pip] -= 1
        if from_pip > die:
            target = from_pip - die
            if pips[target] == -1:
                pips[target] = 1
                pips[O_BAR] -= 1
            else:
                pips[target] += 1
        else:
            x_off += 1
        return Position(pips, x_off, self.o_off)

    def _can_move_internally(self, from_pip: int, die: int) -> bool:
        if self.pips[from_pip] < 1:
            return False
        if from_pip > die:
            return self.pips[from_pip - die] > -2
        if from_pip == die:
            return not any(p > 0 for p in self.pips[7 : X_BAR + 1])
        return not any(p > 0 for p in self.pips[from_pip + 1 : X_BAR + 1])

    def can_move(self, from_pip: int, die: int) -> bool:
        """Whether a checker may legally move from ``from_pip``, including the bar."""
        if (from_pip == X_BAR) == (self.pips[X_BAR] > 0):
            return self._can_move_internally(from_pip, die)
        return False

    def can_move_when_bearoff_is_legal(self, from_pip: int, die: int) -> bool:
        """Like ``can_move`` for ordinary moves, but accepts every bear off."""
        if self.pips[from_pip] < 1:
            return False
        if from_pip > die:
            return self.pips[from_pip - die] > -2
        return True

    def smallest_pip_to_check(self, die: int) -> int:
        """The lowest point from which a move with ``die`` could be possible."""
        own = [i for i, p in enumerate(self.pips) if p > 0]
        if not own:
            return X_BAR + 1
        biggest_checker = own[-1]
        if biggest_checker > 6:
            return die + 1
        return min(biggest_checker, die)

    def try_move_single_checker(self, from_pip: int, die: int) -> Position | None:
        """The position after the move, or ``None`` if the move is illegal."""
        if self.can_move(from_pip, die):
            return self.moved_single_checker(from_pip, die)
        return None

    def __repr__(self) -> str:
        x_parts = []
        if self.pips[X_BAR] > 0:
            x_parts.append(f"bar:{self.pips[X_BAR]}")
        x_parts.extend(
            f"{i}:{self.pips[i]}" for i in reversed(range(1, X_BAR)) if self.pips[i] > 0
        )
        if self.x_off > 0:
            x_parts.append(f"off:{self.x_off}")

        o_parts = []
        if self.o_off > 0:
            o_parts.append(f"off:{self.o_off}")
        o_parts.extend(
            f"{i}:{-self.pips[i]}" for i in reversed(range(1, X_BAR)) if self.pips[i] < 0
        )
        if self.pips[O_BAR] < 0:
            o_parts.append(f"bar:{-self.pips[O_BAR]}")

        return (
            "Position:\n"
            f"x: {{{', '.join(x_parts)}}}\n"
            f"o: {{{', '.join(o_parts)}}}"
        )


STARTING = Position(
    (0, -2, 0, 0, 0, 0, 5, 0, 3, 0, 0, 0, -5, 5, 0, 0, 0, -3, 0, -5, 0, 0, 0, 0, 2, 0),
    0,
    0,
)