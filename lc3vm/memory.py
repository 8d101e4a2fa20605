"""The 64K-word address space, with the memory-mapped keyboard registers."""

from __future__ import annotations

import struct
import sys
from array import array
from os import PathLike
from typing import BinaryIO, Callable, Optional, Union

from lc3vm.isa import MEMORY_MAX, MR_KBDR, MR_KBSR, WORD_MASK
from lc3vm.terminal import check_key as _terminal_check_key


def _stdin_has_key() -> bool:
    return _terminal_check_key(sys.stdin)


def _stdin_getchar() -> int:
    char = sys.stdin.read(1)
    return ord(char) if char else WORD_MASK


class Memory:
    """LC-3 memory: 65536 unsigned 16-bit words.

    Reading the keyboard status register polls ``check_key``; when a key is
    waiting its status bit is set and ``get_char`` fills the data register.
    """

    def __init__(
        self,
        check_key: Optional[Callable[[], bool]] = None,
        get_char: Optional[Callable[[], int]] = None,
    ) -> None:
        self._cells = array("H", [0]) * MEMORY_MAX
        self.check_key = check_key if check_key is not None else _stdin_has_key
        self.get_char = get_char if get_char is not None else _stdin_getchar

    def __len__(self) -> int:
        return MEMORY_MAX

    def __getitem__(self, address: int) -> int:
        """Raw access, with no device side effects."""
        return self._cells[address & WORD_MASK]

    def __setitem__(self, address: int, value: int) -> None:
        self._cells[address & WORD_MASK] = value & WORD_MASK

    def write(self, address: int, value: int) -> None:
        """Store a word at ``address``."""
        self[address] = value

    def read(self, address: int) -> int:
        """Load the word at ``address``, servicing the keyboard registers."""
        address &= WORD_MASK
        if address == MR_KBSR:
            if self.check_key():
                self._cells[MR_KBSR] = 1 << 15
                self._cells[MR_KBDR] = self.get_char() & WORD_MASK
            else:
                self._cells[MR_KBSR] = 0
        return self._cells[address]

    def load_image(self, stream: BinaryIO) -> int:
        """Load a big-endian image whose first word is its origin.

        Returns the number of words placed in memory.
        """
        data = stream.read()
        if len(data) < 2:
            raise ValueError("image is too short to hold an origin")
        (origin,) = struct.unpack_from(">H", data, 0)
        count = min((len(data) - 2) // 2, MEMORY_MAX - origin)
        words = struct.unpack_from(f">{count}H", data, 2)
        self._cells[origin:origin + count] = array("H", words)
        return count

    def load_image_path(self, path: Union[str, PathLike]) -> int:
        """Load an image file from ``path``; see :meth:`load_image`."""
        with open(path, "rb") as stream:
            return self.load_image(stream)