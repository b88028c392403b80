from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, List, Optional

import numpy as np

from .errors import BFRuntimeError

DEFAULT_CELL_VALUE = 0
DEFAULT_MAX_CELLS = sys.maxsize
DEFAULT_TRACE_LIMIT = 1000


@dataclass
class MachineState:
    tape: bytearray = field(default_factory=lambda: bytearray([DEFAULT_CELL_VALUE]))
    pointer: int = 0
    cursor: int = 0
    step_count: int = 0
    max_cells: int = DEFAULT_MAX_CELLS
    # only the most recent lines are kept; trace_sink sees every line
    trace: Deque[str] = field(default_factory=lambda: deque(maxlen=DEFAULT_TRACE_LIMIT))
    trace_sink: Optional[Callable[[str], None]] = None
    is_tracing: bool = False

    def reset(self) -> None:
        self.tape = bytearray([DEFAULT_CELL_VALUE])
        self.pointer = 0
        self.cursor = 0
        self.step_count = 0
        self.trace.clear()

    @property
    def cell(self) -> int:
        return self.tape[self.pointer]

    def snapshot(self) -> np.ndarray:
        return np.frombuffer(bytes(self.tape), dtype=np.uint8).copy()

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)
            if self.trace_sink is not None:
                self.trace_sink(message)


# run status values
HALTED = 'halted'
FAILED = 'failed'
STEP_LIMIT = 'step_limit'


@dataclass(frozen=True)
class RunOptions:
    max_cells: int = DEFAULT_MAX_CELLS
    max_steps: Optional[int] = None
    eof_value: Optional[int] = 0
    line_input: bool = True
    jump_table: bool = False
    trace: bool = False
    trace_limit: int = DEFAULT_TRACE_LIMIT


@dataclass(frozen=True)
class RunResult:
    status: str
    steps: int
    pointer: int
    cursor: int
    tape: bytes
    error: Optional[BFRuntimeError] = None
    output: Optional[bytes] = None
    trace: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == HALTED

    @property
    def kind(self) -> Optional[str]:
        return None if self.error is None else self.error.kind
