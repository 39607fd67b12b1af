from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Optional


class Instruction(Enum):
    """The closed instruction set, each member valued by its canonical character."""

    INCREMENT = '+'
    DECREMENT = '-'
    MOVE_LEFT = '<'
    MOVE_RIGHT = '>'
    LOOP_OPEN = '['
    LOOP_CLOSE = ']'
    INPUT = ','
    OUTPUT = '.'
    BREAKPOINT = '@'

    @property
    def symbol(self) -> str:
        return self.value


BREAKPOINT_SYMBOL = Instruction.BREAKPOINT.value

# Characters that always lex to an instruction; '@' is handled separately.
CODE_CHARS = '+-<>[],.'

_BY_CHAR: Dict[str, Instruction] = {i.value: i for i in Instruction}


def from_char(ch: str, *, keep_breakpoints: bool = False) -> Optional[Instruction]:
    if ch == BREAKPOINT_SYMBOL and not keep_breakpoints:
        return None
    return _BY_CHAR.get(ch)


def to_source(instructions: Iterable[Instruction]) -> str:
    return ''.join(i.symbol for i in instructions)
