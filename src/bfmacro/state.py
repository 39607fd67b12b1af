from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class MachineState:
    tape: bytearray = field(default_factory=lambda: bytearray(1))
    data_ptr: int = 0
    ip: int = 0
    steps: int = 0

    def reset(self) -> None:
        self.tape = bytearray(1)
        self.data_ptr = 0
        self.ip = 0
        self.steps = 0

    @property
    def cell(self) -> int:
        return self.tape[self.data_ptr]

    @cell.setter
    def cell(self, value: int) -> None:
        self.tape[self.data_ptr] = value
