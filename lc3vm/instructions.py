"""Execution of the LC-3 operate, control-flow and data-movement instructions."""

from __future__ import annotations

from lc3vm.isa import Register, sign_extend
from lc3vm.machine import Machine


def _dest(instr: int) -> int:
    return (instr >> 9) & 0x7


def _base(instr: int) -> int:
    return (instr >> 6) & 0x7


def _pc_offset9(instr: int) -> int:
    return sign_extend(instr & 0x1FF, 9)


def _offset6(instr: int) -> int:
    return sign_extend(instr & 0x3F, 6)


def _immediate(instr: int) -> bool:
    return bool((instr >> 5) & 0x1)


def op_add(machine: Machine, instr: int) -> None:
    """ADD: register or immediate addition.

    In immediate mode the sum is accumulated into SR1; flags follow DR.
    """
    dest = _dest(instr)
    first = _base(instr)
    if _immediate(instr):
        machine.reg[first] = machine.reg[first] + sign_extend(instr & 0x1F, 5)
    else:
        machine.reg[dest] = machine.reg[first] + machine.reg[instr & 0x7]
    machine.update_flags(dest)


def op_and(machine: Machine, instr: int) -> None:
    """AND: bitwise and of a register with a register or an immediate."""
    dest = _dest(instr)
    first = _base(instr)
    if _immediate(instr):
        machine.reg[dest] = machine.reg[first] & sign_extend(instr & 0x1F, 5)
    else:
        machine.reg[dest] = machine.reg[first] & machine.reg[instr & 0x7]
    machine.update_flags(dest)


def op_not(machine: Machine, instr: int) -> None:
    """NOT: bitwise complement of a register."""
    dest = _dest(instr)
    machine.reg[dest] = ~machine.reg[_base(instr)]
    machine.update_flags(dest)


def op_br(machine: Machine, instr: int) -> None:
    """BR: add the offset to PC when any selected condition flag is set."""
    condition = (instr >> 9) & 0x7
    if condition & machine.reg[Register.COND]:
        machine.reg[Register.PC] = machine.reg[Register.PC] + _pc_offset9(instr)


def op_jmp(machine: Machine, instr: int) -> None:
    """JMP and RET: load PC from a base register."""
    machine.reg[Register.PC] = machine.reg[_base(instr)]


def op_jsr(machine: Machine, instr: int) -> None:
    """JSR and JSRR: save the return address in R7 and jump."""
    machine.reg[Register.R7] = machine.reg[Register.PC]
    if (instr >> 11) & 1:
        offset = sign_extend(instr & 0x7FF, 11)
        machine.reg[Register.PC] = machine.reg[Register.PC] + offset
    else:
        machine.reg[Register.PC] = machine.reg[_base(instr)]


def op_ld(machine: Machine, instr: int) -> None:
    """LD: load from a PC-relative address."""
    dest = _dest(instr)
    address = machine.reg[Register.PC] + _pc_offset9(instr)
    machine.reg[dest] = machine.memory.read(address)
    machine.update_flags(dest)


def op_ldi(machine: Machine, instr: int) -> None:
    """LDI: load through a pointer held at a PC-relative address."""
    dest = _dest(instr)
    pointer = machine.memory.read(machine.reg[Register.PC] + _pc_offset9(instr))
    machine.reg[dest] = machine.memory.read(pointer)
    machine.update_flags(dest)


def op_ldr(machine: Machine, instr: int) -> None:
    """LDR: load from base register plus offset.

    The base register is left holding the computed address.
    """
    dest = _dest(instr)
    base = _base(instr)
    machine.reg[base] = machine.reg[base] + _offset6(instr)
    machine.reg[dest] = machine.memory.read(machine.reg[base])
    machine.update_flags(dest)


def op_lea(machine: Machine, instr: int) -> None:
    """LEA: load a PC-relative address into a register."""
    dest = _dest(instr)
    machine.reg[dest] = machine.reg[Register.PC] + _pc_offset9(instr)
    machine.update_flags(dest)


def op_st(machine: Machine, instr: int) -> None:
    """ST: store a register at a PC-relative address."""
    address = machine.reg[Register.PC] + _pc_offset9(instr)
    machine.memory.write(address, machine.reg[_dest(instr)])


def op_sti(machine: Machine, instr: int) -> None:
    """STI: store a register through a pointer at a PC-relative address."""
    pointer = machine.memory.read(machine.reg[Register.PC] + _pc_offset9(instr))
    machine.memory.write(pointer, machine.reg[_dest(instr)])


def op_str(machine: Machine, instr: int) -> None:
    """STR: store a register at base register plus offset."""
    address = machine.reg[_base(instr)] + _offset6(instr)
    machine.memory.write(address, machine.reg[_dest(instr)])