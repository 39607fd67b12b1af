from __future__ import annotations

from enum import Enum
from typing import List, Optional, Sequence

from .brackets import Direction, match_bracket
from .console import Console, StreamConsole
from .errors import non_ascii_input
from .instructions import Instruction
from .state import MachineState

# Cells hold 7-bit values: arithmetic wraps at 128, not 256.
CELL_MODULUS = 128


class DebugMode(Enum):
    NONE = 'none'
    VERBOSE = 'verbose'
    STEP = 'step'


class Interpreter:
    """
    Tape machine for a resolved instruction sequence.

    Execution model:
    - The tape starts as a single zero cell and grows to the right on demand
    - Moving left of cell 0 is a no-op
    - Loop brackets are matched when executed, never precomputed
    - Every error aborts the run and propagates to the caller

    Debug instrumentation runs after each instruction, before the
    instruction pointer advances: VERBOSE and STEP print the instruction and
    the tape, STEP and breakpoints wait for a line on the console.
    """

    def __init__(self, instructions: Sequence[Instruction], console: Optional[Console] = None,
                 debug_mode: DebugMode = DebugMode.NONE):
        self.instructions: List[Instruction] = list(instructions)
        self.console = console if console is not None else StreamConsole()
        self.debug_mode = debug_mode
        self.state = MachineState()

    @property
    def finished(self) -> bool:
        return self.state.ip >= len(self.instructions)

    def run(self) -> MachineState:
        while self.step():
            pass
        return self.state

    def step(self) -> bool:
        """Execute one instruction. Returns False once the program has ended."""
        if self.finished:
            return False

        state = self.state
        op = self.instructions[state.ip]
        jumped = self._dispatch(op)
        state.steps += 1

        if op is not Instruction.BREAKPOINT and self.debug_mode in (DebugMode.VERBOSE, DebugMode.STEP):
            self.console.write_text(f"{op.symbol} {list(state.tape)}\n")
        if self.debug_mode is DebugMode.STEP or op is Instruction.BREAKPOINT:
            self.console.read_line()

        if not jumped:
            state.ip += 1
        return not self.finished

    def _dispatch(self, op: Instruction) -> bool:
        # Returns True when the instruction pointer was redirected.
        state = self.state

        if op is Instruction.INCREMENT:
            state.cell = (state.cell + 1) % CELL_MODULUS
        elif op is Instruction.DECREMENT:
            state.cell = (state.cell - 1) % CELL_MODULUS
        elif op is Instruction.MOVE_LEFT:
            state.data_ptr = max(0, state.data_ptr - 1)
        elif op is Instruction.MOVE_RIGHT:
            state.data_ptr += 1
            if state.data_ptr >= len(state.tape):
                state.tape.append(0)
        elif op is Instruction.LOOP_OPEN:
            if state.cell == 0:
                close = match_bracket(self.instructions, Direction.FORWARD, start=state.ip + 1)
                state.ip = close + 1
                return True
        elif op is Instruction.LOOP_CLOSE:
            if state.cell != 0:
                state.ip = match_bracket(self.instructions, Direction.BACKWARD, start=state.ip - 1)
                return True
        elif op is Instruction.INPUT:
            value = self.console.read_byte()
            if value is None:
                value = 0
            elif value >= CELL_MODULUS:
                raise non_ascii_input(value, state.ip)
            state.cell = value
        elif op is Instruction.OUTPUT:
            self.console.write_char(chr(state.cell))
        elif op is Instruction.BREAKPOINT:
            pass
        else:
            raise ValueError(f"Unknown instruction: {op!r}")
        return False
