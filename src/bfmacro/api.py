from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Union

from .brackets import check_brackets
from .console import BufferConsole, Console
from .engine import DebugMode, Interpreter
from .errors import io_failure
from .instructions import Instruction
from .lexer import lex
from .macros import resolve_macros

PathLike = Union[str, Path]
SourceLoader = Callable[[PathLike], str]


@dataclass(frozen=True)
class RunOptions:
    debug_mode: DebugMode = DebugMode.NONE
    breakpoints: bool = False
    macros: bool = False
    check_brackets: bool = False


@dataclass(frozen=True)
class RunResult:
    tape: bytes
    data_ptr: int
    steps: int
    output: Optional[str] = None


def load_source(path: PathLike, *, encoding: str = "utf-8") -> str:
    p = Path(path)
    try:
        return p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise io_failure(e, path=str(p)) from e


def load_program(source: str, *, options: Optional[RunOptions] = None) -> List[Instruction]:
    opts = options or RunOptions()
    if opts.macros:
        program = resolve_macros(source, opts.breakpoints)
    else:
        program = lex(source, opts.breakpoints)
    if opts.check_brackets:
        check_brackets(program)
    return program


def run_program(program: List[Instruction], console: Console, *, debug_mode: DebugMode = DebugMode.NONE) -> RunResult:
    state = Interpreter(program, console, debug_mode).run()
    output = console.getvalue() if isinstance(console, BufferConsole) else None
    return RunResult(tape=bytes(state.tape), data_ptr=state.data_ptr, steps=state.steps, output=output)


def run_string(source: str, *, options: Optional[RunOptions] = None, console: Optional[Console] = None,
               stdin: bytes = b"") -> RunResult:
    """Run source text. Without a console, input comes from ``stdin`` and output is captured."""
    opts = options or RunOptions()
    program = load_program(source, options=opts)
    if console is None:
        console = BufferConsole(stdin)
    return run_program(program, console, debug_mode=opts.debug_mode)


def run_file(path: PathLike, *, options: Optional[RunOptions] = None, console: Optional[Console] = None,
             stdin: bytes = b"", loader: SourceLoader = load_source) -> RunResult:
    return run_string(loader(path), options=options, console=console, stdin=stdin)
