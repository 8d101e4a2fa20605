import io
import os
import termios
from unittest import mock

from lc3vm.terminal import check_key, raw_input


class _FakeTty(io.StringIO):
    """A text stream that claims to be a terminal on a fixed descriptor."""

    def isatty(self):
        return True

    def fileno(self):
        return 99


def test_check_key_false_on_empty_pipe():
    read_fd, write_fd = os.pipe()
    with os.fdopen(read_fd, "rb") as reader, os.fdopen(write_fd, "wb"):
        assert check_key(reader) is False


def test_check_key_true_when_data_waiting():
    read_fd, write_fd = os.pipe()
    with os.fdopen(read_fd, "rb") as reader, os.fdopen(write_fd, "wb") as writer:
        writer.write(b"A")
        writer.flush()
        assert check_key(reader) is True
        assert reader.read(1) == b"A"


def test_raw_input_passes_non_tty_through():
    stream = io.StringIO("xyz")
    with raw_input(stream) as inner:
        assert inner is stream
        assert inner.read() == "xyz"


def test_raw_input_disables_canonical_mode_and_echo_then_restores():
    original_lflag = termios.ICANON | termios.ECHO | termios.ISIG
    original = [0, 0, 0, original_lflag, 0, 0, [b"\x00"] * 32]
    applied = []

    def fake_tcgetattr(fd):
        return [list(part) if isinstance(part, list) else part for part in original]

    def fake_tcsetattr(fd, when, attrs):
        applied.append(list(attrs))

    tty = _FakeTty("")
    with mock.patch("termios.tcgetattr", side_effect=fake_tcgetattr), mock.patch(
        "termios.tcsetattr", side_effect=fake_tcsetattr
    ), mock.patch("os.isatty", return_value=True):
        with raw_input(tty) as inner:
            assert inner is tty
            assert len(applied) >= 1
            during = applied[-1][3]
            assert not during & termios.ICANON
            assert not during & termios.ECHO
            assert during & termios.ISIG
        assert len(applied) >= 2
        assert applied[-1][3] == original_lflag