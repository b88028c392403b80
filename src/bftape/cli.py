import argparse
import sys
from typing import List, Optional

from .api import read_program
from .errors import BFLoadError
from .interpreter import Interpreter
from .state import FAILED, STEP_LIMIT, RunOptions

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def _format_dump(tape: bytes, count: int) -> str:
    cells = [int(b) for b in tape[:count]]
    rows = [" ".join(f"{v:3d}" for v in cells[i:i + 8]) for i in range(0, len(cells), 8)]
    return "\n".join(rows)


def _print_trace(line: str) -> None:
    print(line, file=sys.stderr, flush=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bftape",
        description="Run a tape machine program (8 instructions, 8-bit cells, right-growing tape).",
    )
    parser.add_argument("file", help="Program source file")
    parser.add_argument("--max-cells", type=int, default=None, help="Tape size limit (default: unbounded)")
    parser.add_argument("--max-steps", type=int, default=None, help="Stop after this many instructions")
    eof = parser.add_mutually_exclusive_group()
    eof.add_argument("--eof-value", type=int, default=0, help="Cell value stored on end of input (default 0)")
    eof.add_argument("--eof-unchanged", action="store_true", help="Leave the cell unchanged on end of input")
    parser.add_argument("--raw-input", action="store_true", help="Read one byte per ',' without discarding the rest of the line")
    parser.add_argument("--jump-table", action="store_true", help="Precompute bracket partners instead of re-scanning")
    parser.add_argument("--trace", action="store_true", help="Print every executed step to stderr")
    parser.add_argument("--dump", type=int, default=0, metavar="N", help="Print the first N tape cells after the run")
    return parser


def options_from_args(args) -> RunOptions:
    kwargs = {}
    if args.max_cells is not None:
        if args.max_cells < 1:
            raise ValueError("--max-cells must be at least 1")
        kwargs["max_cells"] = args.max_cells
    if args.max_steps is not None and args.max_steps < 0:
        raise ValueError("--max-steps must not be negative")
    return RunOptions(
        max_steps=args.max_steps,
        eof_value=None if args.eof_unchanged else args.eof_value & 0xFF,
        line_input=not args.raw_input,
        jump_table=args.jump_table,
        trace=args.trace,
        **kwargs,
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = options_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        program = read_program(args.file)
    except BFLoadError as e:
        print(e, file=sys.stderr)
        return EXIT_FAILURE

    balance = program.bracket_balance()
    if balance > 0:
        print(f"Warning: {balance} more '[' than ']' in {args.file}", file=sys.stderr)
    elif balance < 0:
        print(f"Warning: {-balance} more ']' than '[' in {args.file}", file=sys.stderr)

    interp = Interpreter(program, options=options, trace_sink=_print_trace if args.trace else None)
    result = interp.run()
    sys.stdout.flush()

    if args.dump > 0:
        print("\n================", file=sys.stderr)
        print(_format_dump(result.tape, args.dump), file=sys.stderr)

    if result.status == FAILED:
        print(f"\n{result.error}", file=sys.stderr)
        return EXIT_FAILURE
    if result.status == STEP_LIMIT:
        print(f"\nStopped after {result.steps} steps at character {result.cursor + 1}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
