"""Architectural constants of the LC-3 and bit-level helpers."""

from enum import IntEnum, IntFlag

MEMORY_MAX = 1 << 16
WORD_MASK = 0xFFFF
PC_START = 0x3000

MR_KBSR = 0xFE00
"""Memory-mapped keyboard status register."""
MR_KBDR = 0xFE02
"""Memory-mapped keyboard data register."""


class Register(IntEnum):
    """Register indices; ``COUNT`` is the size of the register file."""

    R0 = 0
    R1 = 1
    R2 = 2
    R3 = 3
    R4 = 4
    R5 = 5
    R6 = 6
    R7 = 7
    PC = 8
    COND = 9
    COUNT = 10


class Opcode(IntEnum):
    """Instruction opcodes, held in the top four bits of an instruction."""

    BR = 0
    ADD = 1
    LD = 2
    ST = 3
    JSR = 4
    AND = 5
    LDR = 6
    STR = 7
    RTI = 8
    NOT = 9
    LDI = 10
    STI = 11
    JMP = 12
    RES = 13
    LEA = 14
    TRAP = 15


class Flag(IntFlag):
    """Condition flags held in the COND register."""

    POS = 1 << 0
    ZRO = 1 << 1
    NEG = 1 << 2


class Trap(IntEnum):
    """Trap vectors."""

    GETC = 0x20
    OUT = 0x21
    PUTS = 0x22
    IN = 0x23
    PUTSP = 0x24
    HALT = 0x25


def sign_extend(value: int, bit_count: int) -> int:
    """Extend a ``bit_count``-bit two's complement value to 16 bits."""
    value &= WORD_MASK
    if (value >> (bit_count - 1)) & 1:
        value |= WORD_MASK << bit_count
    return value & WORD_MASK


def swap16(value: int) -> int:
    """Swap the two bytes of a 16-bit word."""
    return ((value << 8) | (value >> 8)) & WORD_MASK