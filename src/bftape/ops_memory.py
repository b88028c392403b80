from __future__ import annotations

from .errors import TapeOverflowError, TapeUnderflowError


class MemoryOpsMixin:
    def _move_right(self):
        state = self.state
        if state.pointer >= state.max_cells - 1:
            raise self._runtime_error(TapeOverflowError)

        # the tape grows one zero cell at a time, never shrinks
        if state.pointer + 1 == len(state.tape):
            state.tape.append(0)
        state.pointer += 1

    def _move_left(self):
        state = self.state
        if state.pointer == 0:
            raise self._runtime_error(TapeUnderflowError)
        state.pointer -= 1

    def _increment(self):
        state = self.state
        state.tape[state.pointer] = (state.tape[state.pointer] + 1) & 0xFF

    def _decrement(self):
        state = self.state
        state.tape[state.pointer] = (state.tape[state.pointer] - 1) & 0xFF
