"""Command-line entry point: ``bfmacro PROGRAM [options]``."""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .api import RunOptions, load_program, load_source, run_program
from .console import StreamConsole
from .engine import DebugMode
from .errors import BFError, ErrorKind, missing_argument
from .instructions import to_source

EXIT_FAILURE = 1
EXIT_USAGE = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="bfmacro",
        description="Brainfuck interpreter with named macros and breakpoints (7-bit cells).",
    )
    parser.add_argument("path", nargs="?", help="Program source file")
    parser.add_argument(
        "-d", "--debug",
        choices=[m.value for m in DebugMode],
        default=DebugMode.NONE.value,
        help="verbose: trace every instruction; step: trace and wait for Enter after each one",
    )
    parser.add_argument("-b", "--breakpoints", action="store_true", help="Treat '@' as a breakpoint")
    parser.add_argument("-m", "--macros", action="store_true", help="Expand 'name { body }' macros called as @name@")
    parser.add_argument("--check", action="store_true", help="Reject unbalanced brackets before running")
    parser.add_argument("--emit", action="store_true", help="Print the resolved program instead of running it")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    options = RunOptions(
        debug_mode=DebugMode(args.debug),
        breakpoints=args.breakpoints,
        macros=args.macros,
        check_brackets=args.check,
    )

    try:
        if not args.path:
            raise missing_argument("path")
        program = load_program(load_source(args.path), options=options)
        if args.emit:
            print(to_source(program))
            return 0
        run_program(program, StreamConsole(), debug_mode=options.debug_mode)
    except BFError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE if e.kind is ErrorKind.MISSING_ARGUMENT else EXIT_FAILURE
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
