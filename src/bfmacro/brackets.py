from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Sequence

from .errors import unmatched_bracket
from .instructions import Instruction


class Direction(Enum):
    FORWARD = 'forward'
    BACKWARD = 'backward'


def match_bracket(instructions: Sequence[Instruction], direction: Direction, start: Optional[int] = None) -> int:
    """
    Find the structural partner of a loop bracket.

    ``instructions`` is what follows a '[' (forward) or what precedes a ']'
    (backward); ``start`` narrows the scan to begin at that index instead,
    so the engine can match in place without slicing. The returned index
    points into ``instructions``.
    """
    if direction is Direction.FORWARD:
        opener, closer = Instruction.LOOP_OPEN, Instruction.LOOP_CLOSE
        first = 0 if start is None else start
        indices = range(first, len(instructions))
    else:
        opener, closer = Instruction.LOOP_CLOSE, Instruction.LOOP_OPEN
        first = len(instructions) - 1 if start is None else start
        indices = range(first, -1, -1)

    level = 0
    for i in indices:
        instr = instructions[i]
        if instr is opener:
            level += 1
        elif instr is closer:
            if level == 0:
                return i
            level -= 1

    # The bracket without a partner sits just outside the scanned range.
    if direction is Direction.FORWARD:
        raise unmatched_bracket(first - 1, symbol='[')
    raise unmatched_bracket(first + 1, symbol=']')


def check_brackets(instructions: Sequence[Instruction]) -> Dict[int, int]:
    """Validate bracket balance up front and return the jump table (both directions)."""
    stack: List[int] = []
    jump_table: Dict[int, int] = {}
    for pos, instr in enumerate(instructions):
        if instr is Instruction.LOOP_OPEN:
            stack.append(pos)
        elif instr is Instruction.LOOP_CLOSE:
            if not stack:
                raise unmatched_bracket(pos, symbol=']')
            begin = stack.pop()
            jump_table[begin] = pos
            jump_table[pos] = begin
    if stack:
        raise unmatched_bracket(stack[-1], symbol='[')
    return jump_table
