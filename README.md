# wildgammon

Building blocks for a backgammon engine in pure Python: dice, positions with
GnuBG position IDs, legal moves for rolls of two different dice, neural-net
input encoders, outcome probabilities and records for CSV training data.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `wildgammon.dice` – `Dice(die1, die2)` is a roll, stored as `big` and
  `small`; values outside 1 to 6 raise `ValueError`. `is_double()` tells
  doubles apart. `all_21()` gives the 21 distinct rolls with how often each
  appears in 36 rolls, `all_441()` all pairs of rolls with their frequency in
  1296; `all_6_double()` and `all_15_mixed()` list doubles and non-doubles.
  `ALL_21` and `ALL_441` hold the precomputed tables.
- `wildgammon.probabilities` – `GameResult` (win or lose; normal, gammon or
  backgammon) with `reverse()`; `Probabilities`, the six outcome chances, with
  `win()`, `equity()` (cubeless), `switch_sides()`, `from_counter()`,
  `from_result()`, `csv_header()` and a `;`-separated `str()`; and
  `ResultCounter`, which counts results (`add`, `add_results`, `total`,
  `num_of`, `combine`).
- `wildgammon.position` – `Position`, always seen from player `x` on roll.
  Build one with `Position.from_pips()`, `Position.from_dicts()` or
  `Position.from_id()`; encode it with `position_id()`. `game_state()` returns
  a `GameResult` or `None` while the game is going on, `game_phase()` a
  `GameResult` or `OngoingPhase.CONTACT` / `OngoingPhase.RACE`.
  `sides_switched()`, `can_move()`, `try_move_single_checker()` and
  `moved_single_checker()` handle single checker moves. `STARTING` is the
  opening position.
- `wildgammon.mixed_moves` – `all_positions_after_mixed_move(position, dice)`
  returns every legal position after a non-double roll, not yet switched to
  the opponent's view. A double raises `ValueError`.
- `wildgammon.inputs` – `td_inputs()` encodes one point as four numbers;
  `ContactInputsGen` (202 inputs) and `RaceInputsGen` (186 inputs) encode whole
  positions through `inputs_for()`, `inputs_for_single()` and
  `inputs_for_all()`.
- `wildgammon.data` – `PositionRecord` (a position ID with the classic five
  probabilities) and `InputsRecord` (six probabilities followed by the net
  inputs), each with `as_row()` for a CSV writer.
- `wildgammon.coach_helpers` – `positions_file_name(phase)`, `duration(seconds)`
  formatting as `hh:mm:ss h`, and `print_progress(done, total, start)` for a
  progress line on standard output.

Index 25 of a position's pips is `x`'s bar and index 0 the opponent's bar;
`x` moves from point 24 towards point 1. Positive numbers are checkers of `x`,
negative numbers checkers of the opponent.

## Example

```python
import csv
import sys

from wildgammon.coach_helpers import duration
from wildgammon.data import PositionRecord
from wildgammon.dice import Dice
from wildgammon.inputs import RaceInputsGen
from wildgammon.mixed_moves import all_positions_after_mixed_move
from wildgammon.position import Position
from wildgammon.probabilities import Probabilities, ResultCounter

start = Position.from_id("4HPwATDgc/ABMA")  # the starting position
for after in all_positions_after_mixed_move(start, Dice(3, 1)):
    print(after.sides_switched().position_id())

race = Position.from_dicts({6: 1}, {19: 1})
print(race.game_phase())                       # OngoingPhase.RACE
print(len(RaceInputsGen().inputs_for_single(race)))  # 186

probabilities = Probabilities.from_counter(ResultCounter(1053, 0, 0, 243, 0, 0))
print(probabilities.equity())

writer = csv.writer(sys.stdout)
writer.writerow(PositionRecord.csv_header())
writer.writerow(PositionRecord.from_position(race, probabilities).as_row())

print(duration(3725))  # 01:02:05 h
```

## What the package does not do

- It generates moves only for rolls of two different dice; there is no move
  generation for doubles and no single function that returns all moves for any
  roll.
- It has no evaluators: no neural-net evaluation, no best-move choice, no
  rollouts and no matches between two players. `Probabilities` and
  `ResultCounter` hold such results but nothing here produces them.
- It has no random dice generator and no command-line programs; the training
  data helpers build records and file names but do not read or write files
  themselves.