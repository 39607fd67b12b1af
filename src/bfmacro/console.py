"""Byte-in / char-out channels the interpreter talks to."""
from __future__ import annotations

import io
import sys
from typing import BinaryIO, Optional, Protocol, TextIO

from .errors import io_failure


class Console(Protocol):
    def read_byte(self) -> Optional[int]:
        """Next input byte, or None at end of input."""

    def read_line(self) -> None:
        """Block until a line has been read; the line itself is discarded."""

    def write_char(self, ch: str) -> None:
        ...

    def write_text(self, text: str) -> None:
        ...


class StreamConsole:
    """Console over a binary input stream and a text output stream (stdin/stdout by default)."""

    def __init__(self, stdin: Optional[BinaryIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout

    def read_byte(self) -> Optional[int]:
        self.stdout.flush()
        try:
            data = self.stdin.read(1)
        except OSError as e:
            raise io_failure(e) from e
        return data[0] if data else None

    def read_line(self) -> None:
        self.stdout.flush()
        try:
            self.stdin.readline()
        except OSError as e:
            raise io_failure(e) from e

    def write_char(self, ch: str) -> None:
        self.write_text(ch)

    def write_text(self, text: str) -> None:
        try:
            self.stdout.write(text)
            self.stdout.flush()
        except OSError as e:
            raise io_failure(e) from e


class BufferConsole(StreamConsole):
    """In-memory console: input comes from ``data``, output is collected for :meth:`getvalue`."""

    def __init__(self, data: bytes = b''):
        super().__init__(io.BytesIO(data), io.StringIO())
        self.pauses = 0

    def read_line(self) -> None:
        self.pauses += 1
        super().read_line()

    def getvalue(self) -> str:
        return self.stdout.getvalue()
