from __future__ import annotations

import re

from dataclasses import dataclass, field
from typing import Dict, List

from .errors import ErrorKind, make_macro_error
from .instructions import BREAKPOINT_SYMBOL, CODE_CHARS, Instruction
from .lexer import lex


@dataclass
class MacroSplit:
    fragments: List[str] = field(default_factory=list)
    macros: Dict[str, str] = field(default_factory=dict)


def _check_name(name: str, *, source: str, offset: int) -> None:
    bad = [ch for ch in name if ch in CODE_CHARS or ch == BREAKPOINT_SYMBOL]
    if bad:
        raise make_macro_error(
            kind=ErrorKind.INVALID_MACRO_NAME,
            message=f"Invalid macro name: {name!r} contains {''.join(bad)!r}",
            source=source,
            offset=offset,
        )


def split_macros(code: str) -> MacroSplit:
    """
    Split source into call-site fragments and macro definitions.

    ``name { body }`` defines a macro; the name is the last whitespace
    separated token before the brace and is cut out of the fragment it was
    written in. Everything outside braces is a fragment, kept in order.
    """
    result = MacroSplit()
    buf: List[str] = []
    name = None
    open_at = -1

    for i, ch in enumerate(code):
        if ch == '{':
            if name is not None:
                raise make_macro_error(
                    kind=ErrorKind.NESTED_MACRO_DEFINITION,
                    message=f"Macro '{name}' contains another definition",
                    source=code,
                    offset=i,
                )
            text = ''.join(buf)
            head = text.rstrip()
            tokens = head.split()
            if not tokens:
                raise make_macro_error(
                    kind=ErrorKind.MISSING_MACRO_NAME,
                    message="No macro name before '{'",
                    source=code,
                    offset=i,
                )
            name = tokens[-1]
            _check_name(name, source=code, offset=i)
            result.fragments.append(head[:len(head) - len(name)])
            buf = []
            open_at = i
            continue

        if ch == '}':
            if name is None:
                raise make_macro_error(
                    kind=ErrorKind.UNMATCHED_BRACE,
                    message="'}' without an opening '{'",
                    source=code,
                    offset=i,
                )
            result.macros[name] = ''.join(buf)
            buf = []
            name = None
            continue

        buf.append(ch)

    if name is not None:
        raise make_macro_error(
            kind=ErrorKind.UNMATCHED_BRACE,
            message=f"Macro '{name}' is never closed",
            source=code,
            offset=open_at,
        )

    result.fragments.append(''.join(buf))
    return result


def _call_pattern(names) -> re.Pattern:
    # Longest names first so '@ab@' is never read as '@a@' followed by text.
    alts = '|'.join(re.escape(n) for n in sorted(names, key=len, reverse=True))
    return re.compile(f"@({alts})@")


def _expand(text: str, pattern: re.Pattern, bodies: Dict[str, str]) -> str:
    return pattern.sub(lambda m: bodies[m.group(1)], text)


def expand_macros(macros: Dict[str, str], *, source: str = '') -> Dict[str, str]:
    """
    Resolve macro bodies against each other in dependency order.

    Work-list fixed point: every pass resolves the macros whose bodies only
    call already resolved macros. A pass without progress means the
    remaining macros form a cycle.
    """
    if not macros:
        return {}

    pattern = _call_pattern(macros)
    pending: Dict[str, str] = dict(macros)
    resolved: Dict[str, str] = {}

    while pending:
        ready = [
            name for name, body in pending.items()
            if all(dep in resolved for dep in pattern.findall(body))
        ]
        if not ready:
            stuck = ', '.join(sorted(pending))
            raise make_macro_error(
                kind=ErrorKind.RECURSIVE_MACRO_REFERENCE,
                message=f"Recursive macro reference among: {stuck}",
                source=source,
                offset=min(_definition_offset(source, n) for n in pending),
            )
        for name in ready:
            resolved[name] = _expand(pending.pop(name), pattern, resolved)

    return resolved


def _definition_offset(source: str, name: str) -> int:
    m = re.search(rf"(?<!\S){re.escape(name)}\s*\{{", source)
    return m.start() if m else 0


def resolve_macros(code: str, keep_breakpoints: bool = False) -> List[Instruction]:
    split = split_macros(code)
    bodies = expand_macros(split.macros, source=code)

    out: List[Instruction] = []
    if bodies:
        pattern = _call_pattern(bodies)
        for fragment in split.fragments:
            out.extend(lex(_expand(fragment, pattern, bodies), keep_breakpoints))
    else:
        for fragment in split.fragments:
            out.extend(lex(fragment, keep_breakpoints))
    return out
