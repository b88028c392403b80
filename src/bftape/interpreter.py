import sys
from collections import deque

from .errors import BFRuntimeError, make_runtime_error
from .lexer import (
    DECREMENT,
    INCREMENT,
    JUMP_END,
    JUMP_START,
    MOVE_LEFT,
    MOVE_RIGHT,
    READ,
    WRITE,
    load_program,
)
from .ops_control import ControlFlowMixin, build_jump_table
from .ops_io import IOMixin
from .ops_memory import MemoryOpsMixin
from .state import FAILED, HALTED, STEP_LIMIT, MachineState, RunOptions, RunResult


class Interpreter(MemoryOpsMixin, IOMixin, ControlFlowMixin):
    """
    Tape machine interpreter

    Executes a Program one character at a time against a growable tape of
    unsigned 8-bit cells.

    Memory Model:
    - The tape starts as a single zero cell and only grows to the right
    - The pointer never leaves the tape; stepping left of cell 0 is fatal
    - Cell arithmetic wraps modulo 256

    Control Flow:
    - '[' and ']' jump by re-scanning the program for the balancing bracket,
      or through a precomputed jump table when enabled
    - Any fatal condition stops the run before the next instruction
    """

    def __init__(self, program, *, options=None, stdin=None, stdout=None, trace_sink=None):
        self.program = load_program(program)
        self.options = options if options is not None else RunOptions()
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout.buffer
        self.state = MachineState(
            max_cells=self.options.max_cells,
            trace=deque(maxlen=self.options.trace_limit),
            trace_sink=trace_sink,
            is_tracing=self.options.trace,
        )
        self.jump_table = build_jump_table(self.program) if self.options.jump_table else None
        self.error = None

        self._dispatch = {
            MOVE_RIGHT: self._move_right,
            MOVE_LEFT: self._move_left,
            INCREMENT: self._increment,
            DECREMENT: self._decrement,
            WRITE: self._write,
            READ: self._read,
        }

    def reset(self):
        """Fresh tape and cursor for another run of the same program."""
        self.state.reset()
        self.error = None

    # ===== Execution =====

    @property
    def halted(self):
        return self.state.cursor >= len(self.program)

    def step(self):
        """
        Execute the instruction under the cursor.

        Returns:
            False if the program had already run off its end, else True

        Raises:
            BFRuntimeError subclass on a fatal tape or bracket condition
        """
        if self.error is not None:
            raise self.error
        if self.halted:
            return False

        state = self.state
        ch = self.program[state.cursor]
        state.step_count += 1
        if state.is_tracing:
            state.add_trace(f"{state.step_count:6d} @{state.cursor:<5d} {ch!r:5s} ptr={state.pointer} cell={state.cell}")

        try:
            if ch == JUMP_START:
                self._jump_start()
            elif ch == JUMP_END:
                self._jump_end()
            else:
                op = self._dispatch.get(ch)
                if op is not None:
                    op()
                # other characters are comments
                state.cursor += 1
        except BFRuntimeError as e:
            self.error = e
            raise
        return True

    def run(self, max_steps=None):
        """Run to completion and report how the run ended instead of raising."""
        if max_steps is None:
            max_steps = self.options.max_steps

        try:
            if max_steps is None:
                while self.step():
                    pass
            else:
                budget = max_steps
                while budget > 0 and self.step():
                    budget -= 1
        except BFRuntimeError:
            return self._result(FAILED)

        return self._result(HALTED if self.halted else STEP_LIMIT)

    # ===== Helpers =====

    def _runtime_error(self, cls):
        return make_runtime_error(cls, source=self.program.text, position=self.state.cursor + 1)

    def _result(self, status):
        state = self.state
        return RunResult(
            status=status,
            steps=state.step_count,
            pointer=state.pointer,
            cursor=state.cursor,
            tape=bytes(state.tape),
            error=self.error,
            trace=list(state.trace),
        )
