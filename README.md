# lc3vm

A virtual machine for the LC-3, the small 16-bit computer used to teach
computer architecture. It loads assembled LC-3 object images and runs them.
Console input and output go through the trap routines GETC, OUT, PUTS, IN,
PUTSP and HALT.

## Installation

```
pip install .
```

## Running a program

Pass one or more object image files:

```
lc3vm program.obj
```

Each image begins with a big-endian 16-bit origin address. The big-endian
16-bit words that follow are placed in memory starting at that origin. Images
are loaded in the order given, so a later image overwrites any words it shares
with an earlier one. Execution starts at address `0x3000` with the Z flag set.

When standard input is a terminal, it is put into unbuffered, no-echo mode
while the program runs. The previous settings are restored when the program
halts or is interrupted.

Exit statuses:

- Run without arguments, the command prints `lc3 [image-file1] ...` and exits
  with status 2.
- If an image cannot be opened or is shorter than one word, it prints
  `failed to load image: <path>` and exits with status 1.
- After the HALT trap it exits with status 0. HALT prints `HALT`.
- Ctrl-C prints a newline and ends the run with a non-zero status.

## Using it as a library

```python
from lc3vm.machine import Machine
from lc3vm.cpu import run, step
from lc3vm.isa import Register

machine = Machine()
with open("program.obj", "rb") as image:
    machine.memory.load_image(image)
machine.reg[Register.PC] = 0x3000
run(machine)
```

`Machine` takes optional `memory`, `stdin` and `stdout` arguments, so a
program can be run against in-memory streams such as `io.StringIO`. Values
stored in `machine.reg` wrap to 16 bits. `machine.running` becomes `False`
once HALT executes.

Modules:

- `lc3vm.isa` holds:
  - the `Register`, `Opcode`, `Flag` and `Trap` enumerations;
  - the constants `MEMORY_MAX`, `PC_START`, `MR_KBSR` and `MR_KBDR`;
  - the helpers `sign_extend(value, bit_count)` and `swap16(value)`.
- `lc3vm.memory` holds `Memory`, the 65,536-word address space.
  - `read` and `write` access words. Reading `MR_KBSR` polls the keyboard and
    fills `MR_KBDR` when a key is waiting.
  - Indexing (`memory[address]`) gives raw access with no keyboard polling.
  - `load_image` and `load_image_path` load images and return the number of
    words loaded.
  - The keyboard callbacks can be replaced through the `check_key` and
    `get_char` arguments.
- `lc3vm.machine` holds `Machine`, with its registers, memory and streams,
  and `update_flags(r)`.
- `lc3vm.instructions` has one function per opcode: `op_add`, `op_and`,
  `op_not`, `op_br`, `op_jmp`, `op_jsr`, `op_ld`, `op_ldi`, `op_ldr`,
  `op_lea`, `op_st`, `op_sti` and `op_str`.
- `lc3vm.traps` holds the trap routines: `trap_getc`, `trap_out`,
  `trap_puts`, `trap_in`, `trap_putsp` and `trap_halt`.
- `lc3vm.cpu` holds two functions:
  - `step(machine)` runs a single instruction and returns it;
  - `run(machine)` keeps stepping until the machine halts.
- `lc3vm.terminal` holds `check_key(stream)`, a non-blocking poll for input,
  and the `raw_input(stream)` context manager.

## Limitations

- RTI, the reserved opcode and unknown trap vectors are fetched and then
  ignored.
- There are no interrupts and no privilege modes.
- No assembler is included; programs must already be assembled into object
  images.

## Tests

```
pip install .[test]
pytest
```