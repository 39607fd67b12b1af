from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class ErrorKind(Enum):
    UNMATCHED_BRACE = 'UnmatchedBrace'
    NESTED_MACRO_DEFINITION = 'NestedMacroDefinition'
    MISSING_MACRO_NAME = 'MissingMacroName'
    INVALID_MACRO_NAME = 'InvalidMacroName'
    RECURSIVE_MACRO_REFERENCE = 'RecursiveMacroReference'
    UNMATCHED_BRACKET = 'UnmatchedBracket'
    NON_ASCII_INPUT = 'NonAsciiInput'
    IO_FAILURE = 'IOFailure'
    MISSING_ARGUMENT = 'MissingArgument'


def _build_context(lines: List[str], line_no_1: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
    return "\n".join(out)


def _hint_for(kind: ErrorKind) -> Optional[str]:
    if kind is ErrorKind.UNMATCHED_BRACE:
        return 'Every macro body needs exactly one "{" and one "}".'
    if kind is ErrorKind.NESTED_MACRO_DEFINITION:
        return 'Define macros at the top level and call them with @name@ instead of nesting.'
    if kind is ErrorKind.MISSING_MACRO_NAME:
        return 'Write the macro name right before the brace. Example: twice { ++ }'
    if kind is ErrorKind.INVALID_MACRO_NAME:
        return 'Macro names cannot contain instruction characters (+ - < > [ ] , .) or "@".'
    if kind is ErrorKind.RECURSIVE_MACRO_REFERENCE:
        return 'Check for macros calling themselves (directly or indirectly).'
    return None


def line_of(source: str, offset: int) -> int:
    """1-based line number of ``offset`` inside ``source``."""
    return source.count('\n', 0, max(0, offset)) + 1


@dataclass
class BFError(Exception):
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class MacroError(BFError):
    line: int
    context: str


@dataclass
class ExecutionError(BFError):
    position: int


@dataclass
class IOFailureError(BFError):
    path: Optional[str] = None


@dataclass
class MissingArgumentError(BFError):
    argument: str


def make_macro_error(*, kind: ErrorKind, message: str, source: str, offset: int) -> MacroError:
    line = line_of(source, offset)
    ctx = _build_context(source.split('\n'), line)
    hint = _hint_for(kind)
    hint_block = f"\nHint: {hint}" if hint else ""
    return MacroError(
        kind=kind,
        message=f"{kind.value}: {message} (line {line})\n{ctx}{hint_block}",
        line=line,
        context=ctx,
    )


def unmatched_bracket(position: int, *, symbol: str) -> ExecutionError:
    return ExecutionError(
        kind=ErrorKind.UNMATCHED_BRACKET,
        message=f"{ErrorKind.UNMATCHED_BRACKET.value}: no partner for '{symbol}' at instruction {position}",
        position=position,
    )


def non_ascii_input(value: int, position: int) -> ExecutionError:
    return ExecutionError(
        kind=ErrorKind.NON_ASCII_INPUT,
        message=f"{ErrorKind.NON_ASCII_INPUT.value}: input byte {value} is outside 0..127 (instruction {position})",
        position=position,
    )


def io_failure(exc: BaseException, *, path: Optional[str] = None) -> IOFailureError:
    where = f" ({path})" if path else ""
    return IOFailureError(
        kind=ErrorKind.IO_FAILURE,
        message=f"{ErrorKind.IO_FAILURE.value}: {type(exc).__name__}: {exc}{where}",
        path=path,
    )


def missing_argument(argument: str) -> MissingArgumentError:
    return MissingArgumentError(
        kind=ErrorKind.MISSING_ARGUMENT,
        message=f"{ErrorKind.MISSING_ARGUMENT.value}: {argument} is required",
        argument=argument,
    )
