from __future__ import annotations

import io
from dataclasses import replace
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .errors import make_load_error
from .interpreter import Interpreter
from .lexer import Program, load_program
from .state import RunOptions, RunResult


def run_string(
    source: Union[str, bytes, Program],
    *,
    input: Union[str, bytes] = b"",
    options: Optional[RunOptions] = None,
) -> RunResult:
    """Run ``source`` against an in-memory input and capture everything it writes."""
    if isinstance(input, str):
        input = input.encode('latin-1')
    stdin = io.BytesIO(input)
    stdout = io.BytesIO()

    interp = Interpreter(source, options=options, stdin=stdin, stdout=stdout)
    result = interp.run()
    return replace(result, output=stdout.getvalue())


def read_program(path: Union[str, Path]) -> Program:
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as e:
        raise make_load_error(str(path)) from e
    return load_program(data)


def run_file(
    path: Union[str, Path],
    *,
    stdin: Optional[BinaryIO] = None,
    stdout: Optional[BinaryIO] = None,
    options: Optional[RunOptions] = None,
) -> RunResult:
    program = read_program(path)
    return Interpreter(program, options=options, stdin=stdin, stdout=stdout).run()
