from __future__ import annotations

import numpy as np

from .errors import UnmatchedJumpEndError, UnmatchedJumpStartError
from .lexer import JUMP_END, JUMP_START


def find_forward_match(program, start):
    """
    Scan from ``start`` towards the end of ``program`` for the bracket that
    balances the loop-start at ``start``.

    Nested pairs balance internally before the outer pair does, so the first
    position where the open and close counts are equal is the match.
    Returns -1 if the end of the program is reached first.
    """
    open_count = 0
    close_count = 0
    for pos in range(start, len(program)):
        ch = program[pos]
        if ch == JUMP_START:
            open_count += 1
        elif ch == JUMP_END:
            close_count += 1

        if open_count == close_count:
            return pos
    return -1


def find_backward_match(program, start):
    """Mirror of find_forward_match, scanning from ``start`` down to 0 inclusive."""
    open_count = 0
    close_count = 0
    for pos in range(start, -1, -1):
        ch = program[pos]
        if ch == JUMP_START:
            open_count += 1
        elif ch == JUMP_END:
            close_count += 1

        if open_count == close_count:
            return pos
    return -1


def build_jump_table(program) -> np.ndarray:
    """
    Precompute bracket partners for the whole program.

    Non-bracket positions map to themselves; unmatched brackets map to -1 so
    the interpreter can still fail lazily, only when the jump is taken.
    """
    table = np.arange(len(program), dtype=np.int32)
    stack = []

    for i, ch in enumerate(program):
        if ch == JUMP_START:
            stack.append(i)
        elif ch == JUMP_END:
            if stack:
                start = stack.pop()
                table[start] = i
                table[i] = start
            else:
                table[i] = -1

    for start in stack:
        table[start] = -1
    return table


class ControlFlowMixin:
    def _match(self, forward):
        cursor = self.state.cursor
        if self.jump_table is not None:
            return int(self.jump_table[cursor])
        if forward:
            return find_forward_match(self.program, cursor)
        return find_backward_match(self.program, cursor)

    def _jump_start(self):
        state = self.state
        if state.tape[state.pointer] != 0:
            state.cursor += 1
            return

        target = self._match(forward=True)
        if target < 0:
            raise self._runtime_error(UnmatchedJumpStartError)
        # land on the matching ']', which then falls through on the next step
        state.cursor = target

    def _jump_end(self):
        state = self.state
        if state.tape[state.pointer] == 0:
            state.cursor += 1
            return

        target = self._match(forward=False)
        if target < 0:
            raise self._runtime_error(UnmatchedJumpEndError)
        state.cursor = target
