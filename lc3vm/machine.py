"""Processor state: register file, memory and I/O streams."""

from __future__ import annotations

import sys
from array import array
from dataclasses import dataclass, field
from typing import Iterator, TextIO

from lc3vm.isa import PC_START, WORD_MASK, Flag, Register
from lc3vm.memory import Memory


class _RegisterFile:
    """Ten 16-bit registers; stored values wrap to 16 bits."""

    def __init__(self) -> None:
        self._values = array("H", [0]) * Register.COUNT

    def __getitem__(self, index: int) -> int:
        return self._values[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._values[index] = value & WORD_MASK

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)


@dataclass
class Machine:
    """An LC-3 machine ready to run from ``PC_START`` with the Z flag set."""

    memory: Memory = field(default_factory=Memory)
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    running: bool = True
    reg: _RegisterFile = field(default_factory=_RegisterFile, init=False)

    def __post_init__(self) -> None:
        self.reg[Register.COND] = Flag.ZRO
        self.reg[Register.PC] = PC_START

    def update_flags(self, r: int) -> None:
        """Set COND from the sign of register ``r``."""
        value = self.reg[r]
        if value == 0:
            self.reg[Register.COND] = Flag.ZRO
        elif value >> 15:
            self.reg[Register.COND] = Flag.NEG
        else:
            self.reg[Register.COND] = Flag.POS