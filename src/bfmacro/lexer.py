from typing import List

from .instructions import Instruction, from_char


def lex(text: str, keep_breakpoints: bool = False) -> List[Instruction]:
    """
    Translate source characters into instructions.

    Every character is mapped on its own. '@' becomes a breakpoint only when
    ``keep_breakpoints`` is set; anything that is not an instruction
    character (whitespace, comments, macro names) is dropped.
    """
    out: List[Instruction] = []
    for ch in text:
        instr = from_char(ch, keep_breakpoints=keep_breakpoints)
        if instr is not None:
            out.append(instr)
    return out
