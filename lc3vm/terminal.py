"""Non-blocking keyboard polling and unbuffered terminal input."""

from __future__ import annotations

import select
from contextlib import contextmanager
from typing import Iterator, TextIO

try:
    import termios
except ImportError:  # pragma: no cover - non-POSIX platforms
    termios = None  # type: ignore[assignment]


def check_key(stream) -> bool:
    """Return whether input is waiting on ``stream``, without blocking."""
    ready, _, _ = select.select([stream], [], [], 0)
    return bool(ready)


@contextmanager
def raw_input(stream: TextIO) -> Iterator[TextIO]:
    """Turn off line buffering and echo on a terminal for the block's duration.

    Streams that are not terminals are passed through unchanged.
    """
    if termios is None or not stream.isatty():
        yield stream
        return
    fd = stream.fileno()
    original = termios.tcgetattr(fd)
    changed = list(original)
    changed[3] = changed[3] & ~termios.ICANON & ~termios.ECHO
    termios.tcsetattr(fd, termios.TCSANOW, changed)
    try:
        yield stream
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, original)