"""Command-line entry point: load images and run them."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from lc3vm.cpu import run
from lc3vm.machine import Machine
from lc3vm.terminal import raw_input


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load each image named in ``argv`` and run the machine until it halts."""
    paths = sys.argv[1:] if argv is None else list(argv)
    if not paths:
        print("lc3 [image-file1] ...")
        return 2

    machine = Machine()
    for path in paths:
        try:
            machine.memory.load_image_path(path)
        except (OSError, ValueError):
            print(f"failed to load image: {path}")
            return 1

    try:
        with raw_input(sys.stdin):
            run(machine)
    except KeyboardInterrupt:
        print()
        return -2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())