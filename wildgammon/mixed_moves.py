"""Legal moves of player ``x`` for a roll of two different dice."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain

from wildgammon.dice import Dice
from wildgammon.position import O_BAR, X_BAR, Position


def all_positions_after_mixed_move(position: Position, dice: Dice) -> list[Position]:
    """All legal positions after moving with ``dice``, which must not be a double.

    The returned positions have not switched sides. If no checker can move, the
    only returned position is ``position`` itself.
    """
    if dice.is_double():
        raise ValueError("Mixed moves need two different dice.")
    on_bar = position.pips[X_BAR]
    if on_bar == 0:
        return _moves_with_no_checker_on_bar(position, dice)
    if on_bar == 1:
        return _moves_with_one_checker_on_bar(position, dice)
    return _moves_with_checkers_on_bar(position, dice)


def _can_enter(position: Position, die: int) -> bool:
    return position.pips[X_BAR - die] > -2


def _entered(position: Position, die: int) -> Position:
    """Enter one checker of ``x`` from the bar; only call this when entering is legal."""
    pips = list(position.pips)
    target = X_BAR - die
    pips[X_BAR] -= 1
    if pips[target] == -1:
        pips[target] = 1
        pips[O_BAR] -= 1
    else:
        pips[target] += 1
    return Position(pips, position.x_off, position.o_off)


def _moves_from(position: Position, points: Iterable[int], die: int) -> list[Position]:
    return [
        position.moved_single_checker(point, die)
        for point in points
        if position.can_move_when_bearoff_is_legal(point, die)
    ]


def _moves_with_one_checker_on_bar(position: Position, dice: Dice) -> list[Position]:
    moves: list[Position] = []
    enter_big: Position | None = None
    enter_small: Position | None = None

    if _can_enter(position, dice.big):
        enter_big = _entered(position, dice.big)
        moves.extend(_moves_from(enter_big, range(dice.small + 1, X_BAR), dice.small))

    different_outcomes = (
        position.pips[X_BAR - dice.big] < 0 or position.pips[X_BAR - dice.small] < 0
    )
    if _can_enter(position, dice.small):
        enter_small = _entered(position, dice.small)
        if different_outcomes:
            points: Iterable[int] = range(dice.big + 1, X_BAR)
        else:
            # Moving the entered checker with the big die gives a position found above.
            skipped = X_BAR - dice.small
            points = chain(range(dice.big + 1, skipped), range(skipped + 1, X_BAR))
        moves.extend(_moves_from(enter_small, points, dice.big))

    if not moves:
        if enter_big is not None:
            moves.append(enter_big)
        elif enter_small is not None:
            moves.append(enter_small)
        else:
            moves.append(position)
    return moves


def _moves_with_no_checker_on_bar(position: Position, dice: Dice) -> list[Position]:
    moves = _two_checker_moves(position, dice)
    if moves:
        return moves
    for die in (dice.big, dice.small):
        moves = _one_checker_moves(position, die)
        if moves:
            return moves
    return [position]


def _one_checker_moves(position: Position, die: int) -> list[Position]:
    return _moves_from(position, range(position.smallest_pip_to_check(die), X_BAR), die)


def _two_checker_moves(position: Position, dice: Dice) -> list[Position]:
    moves: list[Position] = []

    # The small die moved first.
    for first in reversed(range(position.smallest_pip_to_check(dice.small), X_BAR)):
        if not position.can_move_when_bearoff_is_legal(first, dice.small):
            continue
        after = position.moved_single_checker(first, dice.small)
        second_points = reversed(range(after.smallest_pip_to_check(dice.big), first + 1))
        moves.extend(_moves_from(after, second_points, dice.big))

    # The big die moved first.
    for first in range(position.smallest_pip_to_check(dice.big), X_BAR):
        if not position.can_move_when_bearoff_is_legal(first, dice.big):
            continue
        after = position.moved_single_checker(first, dice.big)
        different_outcomes = first >= dice.big and (
            position.pips[first - dice.big] < 0 or position.pips[first - dice.small] < 0
        )
        smallest_pip = after.smallest_pip_to_check(dice.small)
        if different_outcomes:
            points: Iterable[int] = range(smallest_pip, first)
        else:
            # Moving one checker with both dice was already covered with the small die first.
            omitted = max(first - dice.big, 0)
            points = chain(
                range(smallest_pip, omitted), range(max(smallest_pip, omitted + 1), first)
            )
        moves.extend(_moves_from(after, points, dice.small))

    return moves


def _moves_with_checkers_on_bar(position: Position, dice: Dice) -> list[Position]:
    """With two or more checkers on the bar there is exactly one resulting position."""
    result = position
    for die in (dice.big, dice.small):
        if _can_enter(result, die):
            result = _entered(result, die)
    return [result]