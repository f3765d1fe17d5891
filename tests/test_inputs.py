import pytest

from wildgammon.inputs import ContactInputsGen, RaceInputsGen, td_inputs
from wildgammon.position import O_BAR, STARTING, Position


def pos(x, o):
    return Position.from_dicts(x, o)


def as_line(values):
    return ";".join(f"{value:g}" for value in values)


@pytest.mark.parametrize("pip", range(-15, 16))
def test_td_inputs(pip):
    inputs = td_inputs(pip)
    assert inputs[0] == (1.0 if pip == 1 else 0.0)
    assert inputs[1] == (1.0 if pip == 2 else 0.0)
    assert inputs[2] == (1.0 if pip > 2 else 0.0)
    assert inputs[3] == (pip - 3.0 if pip > 2 else 0.0)


@pytest.mark.parametrize("pip", [-16, 16])
def test_td_inputs_out_of_range(pip):
    with pytest.raises(ValueError):
        td_inputs(pip)


def test_contact_csv_line():
    position = pos({1: 1, 2: 2, 3: 3, 4: 4, 5: 5}, {24: 1, O_BAR: 1})
    inputs_gen = ContactInputsGen()

    inputs = as_line(inputs_gen.inputs_for_single(position))
    inputs_switched = as_line(inputs_gen.inputs_for_single(position.sides_switched()))

    assert inputs == "0;13;0;0;0;0;1;0;0;0;0;1;0;0;0;0;1;0;0;0;1;1;0;0;1;2;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;1;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;1;0;0;0"
    assert inputs_switched == "13;0;1;0;0;0;1;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;1;2;0;0;1;1;0;0;1;0;0;1;0;0;1;0;0;0"


def test_race_csv_line():
    position = pos({1: 1, 2: 2, 3: 3, 4: 4, 5: 5}, {24: 1})
    inputs_gen = RaceInputsGen()

    inputs = as_line(inputs_gen.inputs_for_single(position))
    inputs_switched = as_line(inputs_gen.inputs_for_single(position.sides_switched()))

    assert inputs == "0;14;1;0;0;0;0;1;0;0;0;0;1;0;0;0;1;1;0;0;1;2;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;1;0;0;0"
    assert inputs_switched == "14;0;1;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;0;1;2;0;0;1;1;0;0;1;0;0;1;0;0;1;0;0;0"


@pytest.mark.parametrize("inputs_gen, length", [(ContactInputsGen(), 202), (RaceInputsGen(), 186)])
def test_single_inputs_have_num_inputs_entries(inputs_gen, length):
    assert len(inputs_gen.inputs_for_single(STARTING)) == length
    assert inputs_gen.NUM_INPUTS == length


def test_inputs_for_all_concatenates_in_order():
    inputs_gen = ContactInputsGen()
    first = pos({1: 1, 2: 2}, {24: 1, O_BAR: 1})
    second = STARTING
    combined = inputs_gen.inputs_for_all([first, second])
    assert combined == inputs_gen.inputs_for_single(first) + inputs_gen.inputs_for_single(second)
    assert len(combined) == 2 * ContactInputsGen.NUM_INPUTS


def test_inputs_for_all_empty():
    assert RaceInputsGen().inputs_for_all([]) == []