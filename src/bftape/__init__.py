
from .interpreter import Interpreter
from .lexer import Program, is_code_char, load_program
from .ops_control import build_jump_table, find_backward_match, find_forward_match
from .api import RunOptions, RunResult, read_program, run_file, run_string
from .errors import (
    BFError,
    BFLoadError,
    BFRuntimeError,
    TapeOverflowError,
    TapeUnderflowError,
    UnmatchedJumpEndError,
    UnmatchedJumpStartError,
)

__all__ = [
    'Interpreter',
    'Program',
    'is_code_char',
    'load_program',
    'build_jump_table',
    'find_forward_match',
    'find_backward_match',
    'RunOptions',
    'RunResult',
    'read_program',
    'run_file',
    'run_string',
    'BFError',
    'BFLoadError',
    'BFRuntimeError',
    'TapeOverflowError',
    'TapeUnderflowError',
    'UnmatchedJumpEndError',
    'UnmatchedJumpStartError',
]
