
from .api import RunOptions, RunResult, load_program, load_source, run_file, run_program, run_string
from .brackets import Direction, check_brackets, match_bracket
from .console import BufferConsole, Console, StreamConsole
from .engine import CELL_MODULUS, DebugMode, Interpreter
from .errors import BFError, ErrorKind, ExecutionError, IOFailureError, MacroError, MissingArgumentError
from .instructions import Instruction
from .lexer import lex
from .macros import expand_macros, resolve_macros, split_macros

__all__ = [
    'Instruction',
    'lex',
    'resolve_macros',
    'split_macros',
    'expand_macros',
    'Direction',
    'match_bracket',
    'check_brackets',
    'Interpreter',
    'DebugMode',
    'CELL_MODULUS',
    'Console',
    'StreamConsole',
    'BufferConsole',
    'BFError',
    'ErrorKind',
    'MacroError',
    'ExecutionError',
    'IOFailureError',
    'MissingArgumentError',
    'RunOptions',
    'RunResult',
    'load_source',
    'load_program',
    'run_program',
    'run_string',
    'run_file',
]
