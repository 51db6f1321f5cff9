"""Buffered console output and input guarded by one shared lock."""

from __future__ import annotations

import sys
import threading
from typing import Any, Optional, TextIO

_LOCK = threading.Lock()
_local = threading.local()


class ThreadSafeIOStream:
    """Collects output in a private buffer and writes it, with a prefix, atomically.

    Output goes to ``output`` (standard output by default) and input comes from
    ``input_stream`` (standard input by default), both looked up when used.
    """

    def __init__(
        self, output: Optional[TextIO] = None, input_stream: Optional[TextIO] = None
    ) -> None:
        self._output = output
        self._input = input_stream
        self._buffer: list[str] = []
        self._prefix = ""

    @property
    def prefix(self) -> str:
        return self._prefix

    def set_prefix(self, prefix: str) -> None:
        self._prefix = prefix

    def write(self, *args: Any) -> ThreadSafeIOStream:
        """Append the string form of each argument to the buffer."""
        self._buffer.extend(str(arg) for arg in args)
        return self

    def writeline(self, *args: Any) -> ThreadSafeIOStream:
        """Append the arguments and a newline, then flush."""
        self.write(*args, "\n")
        self.flush()
        return self

    def flush(self) -> None:
        """Write the prefix and the buffered text in one locked step and clear the buffer."""
        text = self._prefix + "".join(self._buffer)
        self._buffer.clear()
        with _LOCK:
            stream = self._output or sys.stdout
            stream.write(text)
            stream.flush()

    def read(self) -> str:
        """Read one whitespace-delimited token; raises EOFError at end of input."""
        with _LOCK:
            stream = self._input or sys.stdin
            char = stream.read(1)
            while char and char.isspace():
                char = stream.read(1)
            if not char:
                raise EOFError("end of input")
            token = []
            while char and not char.isspace():
                token.append(char)
                char = stream.read(1)
        return "".join(token)

    def prompt(self, question: str) -> str:
        """Print ``question`` with the prefix and return the next input line."""
        self.write(question)
        self.flush()
        with _LOCK:
            line = (self._input or sys.stdin).readline()
        if not line:
            raise EOFError("end of input")
        return line[:-1] if line.endswith("\n") else line


def thread_safe_cout() -> ThreadSafeIOStream:
    """Return the calling thread's output stream."""
    stream = getattr(_local, "cout", None)
    if stream is None:
        stream = _local.cout = ThreadSafeIOStream()
    return stream


def thread_safe_cin() -> ThreadSafeIOStream:
    """Return the calling thread's input stream."""
    stream = getattr(_local, "cin", None)
    if stream is None:
        stream = _local.cin = ThreadSafeIOStream()
    return stream