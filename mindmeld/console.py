"""Console I/O used by the interpreters: one key in, one byte out."""

import os
import sys
from typing import Protocol, Union


class Console(Protocol):
    def read_key(self) -> int:
        ...

    def write_byte(self, value: int) -> None:
        ...


def _getch_posix(fd: int) -> bytes:
    import termios

    old = termios.tcgetattr(fd)
    new = termios.tcgetattr(fd)
    # Unbuffered, no echo; the interpreter echoes input itself
    new[3] &= ~(termios.ICANON | termios.ECHO)
    termios.tcsetattr(fd, termios.TCSANOW, new)
    try:
        return os.read(fd, 1)
    finally:
        termios.tcsetattr(fd, termios.TCSANOW, old)


def _getch_windows() -> bytes:
    import msvcrt

    return msvcrt.getch()


class TerminalConsole:
    """Reads raw keys from the terminal and writes bytes to stdout."""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def read_key(self) -> int:
        self.stdout.flush()
        if self.stdin.isatty():
            if sys.platform == "win32":
                ch = _getch_windows()
            else:
                ch = _getch_posix(self.stdin.fileno())
        else:
            ch = self.stdin.buffer.read(1)
        if ch == b"\n":
            return ord("\r")
        return ch[0] if ch else 0

    def write_byte(self, value: int) -> None:
        self.stdout.buffer.write(bytes((value,)))
        self.stdout.buffer.flush()


class BufferedConsole:
    """In-memory console: input comes from a buffer, output is recorded."""

    def __init__(self, input_data: Union[bytes, str] = b"", eof: int = 0):
        if isinstance(input_data, str):
            input_data = input_data.encode("latin-1")
        self.input = bytes(input_data)
        self.input_index = 0
        self.eof = eof
        self.output = bytearray()

    def read_key(self) -> int:
        if self.input_index >= len(self.input):
            return self.eof
        value = self.input[self.input_index]
        self.input_index += 1
        return value

    def write_byte(self, value: int) -> None:
        self.output.append(value)
