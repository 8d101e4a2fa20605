"""The fetch-decode-execute loop."""

from __future__ import annotations

from typing import Callable, Dict

from lc3vm import instructions, traps
from lc3vm.isa import Opcode, Register, Trap
from lc3vm.machine import Machine

_OPERATIONS: Dict[int, Callable[[Machine, int], None]] = {
    Opcode.ADD: instructions.op_add,
    Opcode.AND: instructions.op_and,
    Opcode.NOT: instructions.op_not,
    Opcode.BR: instructions.op_br,
    Opcode.JMP: instructions.op_jmp,
    Opcode.JSR: instructions.op_jsr,
    Opcode.LD: instructions.op_ld,
    Opcode.LDI: instructions.op_ldi,
    Opcode.LDR: instructions.op_ldr,
    Opcode.LEA: instructions.op_lea,
    Opcode.ST: instructions.op_st,
    Opcode.STI: instructions.op_sti,
    Opcode.STR: instructions.op_str,
}

_TRAPS: Dict[int, Callable[[Machine], None]] = {
    Trap.GETC: traps.trap_getc,
    Trap.OUT: traps.trap_out,
    Trap.PUTS: traps.trap_puts,
    Trap.IN: traps.trap_in,
    Trap.PUTSP: traps.trap_putsp,
    Trap.HALT: traps.trap_halt,
}


def step(machine: Machine) -> int:
    """Execute one instruction and return it.

    RTI, the reserved opcode and unknown trap vectors do nothing.
    """
    pc = machine.reg[Register.PC]
    instr = machine.memory.read(pc)
    machine.reg[Register.PC] = pc + 1
    opcode = instr >> 12

    if opcode == Opcode.TRAP:
        machine.reg[Register.R7] = machine.reg[Register.PC]
        routine = _TRAPS.get(instr & 0xFF)
        if routine is not None:
            routine(machine)
    else:
        operation = _OPERATIONS.get(opcode)
        if operation is not None:
            operation(machine, instr)
    return instr


def run(machine: Machine) -> None:
    """Execute instructions until the machine halts."""
    while machine.running:
        step(machine)