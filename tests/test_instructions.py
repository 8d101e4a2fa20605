import io

import pytest

from lc3vm.instructions import (
    op_add,
    op_and,
    op_br,
    op_jmp,
    op_jsr,
    op_ld,
    op_ldi,
    op_ldr,
    op_lea,
    op_not,
    op_st,
    op_sti,
    op_str,
)
from lc3vm.isa import Flag, Opcode, Register, sign_extend
from lc3vm.machine import Machine
from lc3vm.memory import Memory


@pytest.fixture
def machine():
    memory = Memory(check_key=lambda: False, get_char=lambda: 0)
    return Machine(memory=memory, stdin=io.StringIO(), stdout=io.StringIO())


def test_add_register_mode_adds_values(machine):
    machine.reg[Register.R1] = 3
    machine.reg[Register.R2] = 4
    instr = (Opcode.ADD << 12) | (Register.R0 << 9) | (Register.R1 << 6) | Register.R2
    op_add(machine, instr)
    assert machine.reg[Register.R0] == 7
    assert machine.reg[Register.COND] == Flag.POS


def test_add_immediate_negative_sets_neg_flag(machine):
    machine.reg[Register.R0] = 0
    instr = (Opcode.ADD << 12) | (Register.R0 << 9) | (Register.R0 << 6) | (1 << 5) | 0x1F
    op_add(machine, instr)
    assert machine.reg[Register.R0] == 0xFFFF
    assert machine.reg[Register.COND] == Flag.NEG


def test_and_register_mode(machine):
    machine.reg[Register.R1] = 0xAAAA
    machine.reg[Register.R2] = 0x0F0F
    instr = (Opcode.AND << 12) | (Register.R0 << 9) | (Register.R1 << 6) | Register.R2
    op_and(machine, instr)
    assert machine.reg[Register.R0] == 0x0A0A


def test_and_immediate_zero_sets_zero_flag(machine):
    machine.reg[Register.R1] = 0xAAAA
    instr = (Opcode.AND << 12) | (Register.R0 << 9) | (Register.R1 << 6) | (1 << 5)
    op_and(machine, instr)
    assert machine.reg[Register.R0] == 0
    assert machine.reg[Register.COND] == Flag.ZRO


def test_not_inverts_bits(machine):
    machine.reg[Register.R1] = 0xAAAA
    instr = (Opcode.NOT << 12) | (Register.R0 << 9) | (Register.R1 << 6) | 0x3F
    op_not(machine, instr)
    assert machine.reg[Register.R0] == (~0xAAAA) & 0xFFFF


def test_branch_condition_true_branches(machine):
    machine.reg[Register.PC] = 0x3000
    machine.reg[Register.COND] = Flag.POS
    offset = 0x1F
    op_br(machine, (Opcode.BR << 12) | (0x1 << 9) | offset)
    assert machine.reg[Register.PC] == 0x3000 + sign_extend(offset, 9)


def test_branch_condition_false_does_not_branch(machine):
    machine.reg[Register.PC] = 0x3000
    machine.reg[Register.COND] = Flag.POS
    op_br(machine, (Opcode.BR << 12) | (0x4 << 9) | 0x1F)
    assert machine.reg[Register.PC] == 0x3000


def test_jump_sets_pc_to_register(machine):
    machine.reg[Register.R1] = 0xBEEF
    op_jmp(machine, (Opcode.JMP << 12) | (Register.R1 << 6))
    assert machine.reg[Register.PC] == 0xBEEF


def test_jsr_offset_mode(machine):
    machine.reg[Register.PC] = 0x3000
    offset = 0x7FF
    op_jsr(machine, (Opcode.JSR << 12) | (1 << 11) | offset)
    assert machine.reg[Register.PC] == (0x3000 + sign_extend(offset, 11)) & 0xFFFF
    assert machine.reg[Register.R7] == 0x3000


def test_jsrr_register_mode(machine):
    machine.reg[Register.PC] = 0x3000
    machine.reg[Register.R2] = 0xBEEF
    op_jsr(machine, (Opcode.JSR << 12) | (Register.R2 << 6))
    assert machine.reg[Register.PC] == 0xBEEF
    assert machine.reg[Register.R7] == 0x3000


def test_ldi_loads_indirect_memory_value(machine):
    machine.reg[Register.PC] = 0x3000
    machine.memory[0x3002] = 0x1234
    machine.memory[0x1234] = 0xBEEF
    op_ldi(machine, (Opcode.LDI << 12) | (Register.R0 << 9) | 0x2)
    assert machine.reg[Register.R0] == 0xBEEF


def test_ld_loads_pc_relative_value(machine):
    machine.reg[Register.PC] = 0x3000
    machine.memory[0x3005] = 0xABCD
    op_ld(machine, (Opcode.LD << 12) | (Register.R0 << 9) | 0x5)
    assert machine.reg[Register.R0] == 0xABCD
    assert machine.reg[Register.COND] == Flag.NEG


def test_ldr_loads_base_plus_offset(machine):
    machine.reg[Register.R1] = 0x4000
    machine.memory[0x4003] = 0x1234
    op_ldr(machine, (Opcode.LDR << 12) | (Register.R0 << 9) | (Register.R1 << 6) | 0x3)
    assert machine.reg[Register.R0] == 0x1234
    assert machine.reg[Register.R1] == 0x4003


def test_lea_loads_address(machine):
    machine.reg[Register.PC] = 0x3000
    op_lea(machine, (Opcode.LEA << 12) | (Register.R3 << 9) | 0x5)
    assert machine.reg[Register.R3] == 0x3005
    assert machine.reg[Register.COND] == Flag.POS


def test_st_stores_value_pc_relative(machine):
    machine.reg[Register.PC] = 0x3000
    machine.reg[Register.R1] = 0xBEEF
    op_st(machine, (Opcode.ST << 12) | (Register.R1 << 9) | 0x1)
    assert machine.memory[0x3001] == 0xBEEF


def test_sti_stores_through_pointer(machine):
    machine.reg[Register.PC] = 0x3000
    machine.reg[Register.R1] = 0xBEEF
    machine.memory[0x3002] = 0x1234
    op_sti(machine, (Opcode.STI << 12) | (Register.R1 << 9) | 0x2)
    assert machine.memory[0x1234] == 0xBEEF


def test_str_stores_base_plus_offset(machine):
    machine.reg[Register.R1] = 0xABCD
    machine.reg[Register.R2] = 0x4000
    instr = (Opcode.STR << 12) | (Register.R1 << 9) | (Register.R2 << 6) | 0x3F
    op_str(machine, instr)
    assert machine.memory[(0x4000 + sign_extend(0x3F, 6)) & 0xFFFF] == 0xABCD
    assert machine.reg[Register.R2] == 0x4000