from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple


def _locate(source: str, position: int) -> Tuple[int, int]:
    # 1-based character position -> 1-based (line, column)
    idx = max(0, min(position - 1, len(source)))
    line = source.count('\n', 0, idx) + 1
    line_start = source.rfind('\n', 0, idx) + 1
    return line, idx - line_start + 1


def _clip(line: str, lo: int, hi: int) -> str:
    left = "..." if lo > 0 else ""
    right = "..." if len(line) > hi else ""
    return f"{left}{line[lo:hi]}{right}"


def _build_context(source: str, position: int, *, context: int = 1, width: int = 40) -> str:
    if not source:
        return ""
    lines = source.split('\n')
    line_no, col = _locate(source, position)
    start = max(1, line_no - context)
    end = min(len(lines), line_no + context)

    # programs are often one long line; show only `width` columns either side
    lo = max(0, col - 1 - width)
    hi = col + width
    caret = col - 1 - lo + (3 if lo > 0 else 0)

    out = []
    for i in range(start, end + 1):
        prefix = '>' if i == line_no else ' '
        out.append(f"{prefix} {i:4d} | {_clip(lines[i - 1], lo, hi)}")
        if i == line_no:
            out.append(f"  {'':4s} | {' ' * caret}^")
    return "\n".join(out)


def _hint_for(kind: str) -> Optional[str]:
    if kind == 'TapeUnderflow':
        return 'The tape starts at cell 0 and only grows to the right.'
    if kind == 'UnmatchedJumpStart':
        return "Check for a missing ']' after this '['."
    if kind == 'UnmatchedJumpEnd':
        return "Check for a missing '[' before this ']'."
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BFLoadError(BFError):
    path: str


@dataclass
class BFRuntimeError(BFError):
    position: int
    context: str = ""

    kind: ClassVar[str] = 'RuntimeError'
    summary: ClassVar[str] = 'runtime error'


@dataclass
class TapeOverflowError(BFRuntimeError):
    kind: ClassVar[str] = 'TapeOverflow'
    summary: ClassVar[str] = 'Attempted tape overflow'


@dataclass
class TapeUnderflowError(BFRuntimeError):
    kind: ClassVar[str] = 'TapeUnderflow'
    summary: ClassVar[str] = 'Attempted tape underflow'


@dataclass
class UnmatchedJumpStartError(BFRuntimeError):
    kind: ClassVar[str] = 'UnmatchedJumpStart'
    summary: ClassVar[str] = "Unbounded jump instruction; expected corresponding ']' but was not found"


@dataclass
class UnmatchedJumpEndError(BFRuntimeError):
    kind: ClassVar[str] = 'UnmatchedJumpEnd'
    summary: ClassVar[str] = "Unbounded jump instruction; expected corresponding '[' but was not found"


def make_runtime_error(cls, *, source: str, position: int) -> BFRuntimeError:
    """Build a runtime error of type ``cls`` for the 1-based ``position`` in ``source``."""
    ctx = _build_context(source, position)
    hint = _hint_for(cls.kind)
    ctx_block = f"\n{ctx}" if ctx else ""
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=f"ERROR: {cls.summary} at character {position}{ctx_block}{hint_block}",
        position=position,
        context=ctx,
    )


def make_load_error(path: str) -> BFLoadError:
    return BFLoadError(message=f'Source file "{path}" could not be opened', path=path)
