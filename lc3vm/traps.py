"""Trap routines: character and string I/O, and halting."""

from __future__ import annotations

from lc3vm.isa import WORD_MASK, Register, sign_extend
from lc3vm.machine import Machine


def _emit(machine: Machine, code: int) -> None:
    machine.stdout.write(chr(code & 0xFF))


def _string_words(machine: Machine):
    address = machine.reg[Register.R0]
    while word := machine.memory[address]:
        yield word
        address += 1


def trap_getc(machine: Machine) -> None:
    """Read one character into R0 without echoing it."""
    char = machine.stdin.read(1)
    machine.reg[Register.R0] = ord(char) if char else WORD_MASK
    machine.update_flags(Register.R0)


def trap_out(machine: Machine) -> None:
    """Write the character in R0."""
    _emit(machine, machine.reg[Register.R0])
    machine.stdout.flush()


def trap_puts(machine: Machine) -> None:
    """Write the one-character-per-word string starting at R0."""
    for word in _string_words(machine):
        _emit(machine, word)
    machine.stdout.flush()


def trap_in(machine: Machine) -> None:
    """Prompt for a character, echo it, and store it in R0."""
    machine.stdout.write("Enter a character: ")
    char = machine.stdin.read(1)
    if char:
        machine.stdout.write(char)
        value = sign_extend(ord(char) & 0xFF, 8)
    else:
        value = WORD_MASK
    machine.stdout.flush()
    machine.reg[Register.R0] = value
    machine.update_flags(Register.R0)


def trap_putsp(machine: Machine) -> None:
    """Write the two-characters-per-word string starting at R0."""
    for word in _string_words(machine):
        _emit(machine, word)
        high = word >> 8
        if high:
            _emit(machine, high)
    machine.stdout.flush()


def trap_halt(machine: Machine) -> None:
    """Print HALT and stop the machine."""
    machine.stdout.write("HALT")
    machine.stdout.flush()
    machine.running = False