#!/usr/bin/env python3
"""
Test tape growth, pointer bounds and cell wraparound.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bftape import RunOptions, TapeOverflowError, TapeUnderflowError, run_string
from bftape.state import MachineState


def test_fresh_state():
    state = MachineState()
    assert state.tape == bytearray([0])
    assert state.pointer == 0
    assert state.cell == 0
    assert list(state.snapshot()) == [0]


def test_tape_grows_one_cell_per_new_position():
    result = run_string(">>>")
    assert result.ok
    assert result.pointer == 3
    assert result.tape == bytes(4)


def test_tape_never_shrinks():
    result = run_string(">>+<<")
    assert result.ok
    assert result.pointer == 0
    assert result.tape == bytes([0, 0, 1])


def test_revisiting_cells_does_not_grow_tape():
    result = run_string("><><><>")
    assert result.pointer == 1
    assert len(result.tape) == 2


def test_wraparound_round_trip():
    for v in range(256):
        src = "+" * v + "+-" + "-+"
        result = run_string(src)
        assert result.tape[0] == v


def test_increment_wraps_to_zero():
    result = run_string("+" * 256)
    assert result.tape[0] == 0


def test_decrement_wraps_to_255():
    result = run_string("-")
    assert result.tape[0] == 255


def test_move_left_from_zero_underflows():
    result = run_string("+<+")
    assert result.status == 'failed'
    assert result.kind == 'TapeUnderflow'
    assert isinstance(result.error, TapeUnderflowError)
    assert result.error.position == 2
    # nothing after the failing instruction runs
    assert result.tape == bytes([1])
    assert result.steps == 2


def test_move_right_overflows_at_max_cells():
    options = RunOptions(max_cells=4)
    result = run_string(">>>", options=options)
    assert result.ok
    assert result.pointer == 3

    result = run_string("+>>>>", options=options)
    assert result.kind == 'TapeOverflow'
    assert isinstance(result.error, TapeOverflowError)
    assert result.error.position == 5
    assert result.pointer == 3
    assert len(result.tape) == 4


def test_overflow_message_reports_position():
    result = run_string(">", options=RunOptions(max_cells=1))
    assert str(result.error).startswith("ERROR: Attempted tape overflow at character 1")


def main():
    print("=== Tape Test ===\n")
    tests = [
        test_fresh_state,
        test_tape_grows_one_cell_per_new_position,
        test_tape_never_shrinks,
        test_revisiting_cells_does_not_grow_tape,
        test_wraparound_round_trip,
        test_increment_wraps_to_zero,
        test_decrement_wraps_to_255,
        test_move_left_from_zero_underflows,
        test_move_right_overflows_at_max_cells,
        test_overflow_message_reports_position,
    ]
    for test in tests:
        test()
        print(f"✓ {test.__name__}")


if __name__ == "__main__":
    main()
