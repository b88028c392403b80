from __future__ import annotations

from dataclasses import dataclass
from typing import Union

MOVE_RIGHT = '>'
MOVE_LEFT = '<'
INCREMENT = '+'
DECREMENT = '-'
WRITE = '.'
READ = ','
JUMP_START = '['
JUMP_END = ']'

CODE_CHARS = frozenset('><+-.,[]')


def is_code_char(ch: str) -> bool:
    return ch in CODE_CHARS


@dataclass(frozen=True)
class Program:
    """
    Raw program text, fixed for the lifetime of a run.

    Characters outside the instruction set are kept so that positions line
    up with the source file; the interpreter treats them as no-ops.
    """

    text: str

    def __len__(self) -> int:
        return len(self.text)

    def __getitem__(self, index):
        return self.text[index]

    def __iter__(self):
        return iter(self.text)

    def instruction_count(self) -> int:
        return sum(1 for ch in self.text if is_code_char(ch))

    def bracket_balance(self) -> int:
        return self.text.count(JUMP_START) - self.text.count(JUMP_END)


def load_program(source: Union[str, bytes, Program]) -> Program:
    if isinstance(source, Program):
        return source
    if isinstance(source, (bytes, bytearray)):
        # one character per source byte
        source = bytes(source).decode('latin-1')
    return Program(source)
