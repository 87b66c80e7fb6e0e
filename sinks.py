"""
Output sinks for rendering move events.

A sink only needs three primitives: emit a string, emit a single character
and emit an integer. ``emit_move`` builds the human-readable line out of them.
"""

import io
import sys
from pathlib import Path
from typing import IO, Iterable, List, Optional, Union

from planning import Move


class OutputSink:
    """Base sink writing to a text stream."""

    def __init__(self, stream: Optional[IO[str]] = None):
        self._stream = stream

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    def emit_string(self, text: str) -> None:
        self.stream.write(text)

    def emit_char(self, ch: str) -> None:
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError(f"emit_char expects a single character, got {ch!r}")
        self.stream.write(ch)

    def emit_int(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"emit_int expects an int, got {type(value).__name__}")
        self.stream.write(str(value))

    def flush(self) -> None:
        self.stream.flush()


class StreamSink(OutputSink):
    """Writes to an arbitrary stream, stdout by default (resolved at write time)."""


class BufferSink(OutputSink):
    """Collects everything in memory."""

    def __init__(self):
        super().__init__(io.StringIO())

    def getvalue(self) -> str:
        return self.stream.getvalue()

    def lines(self) -> List[str]:
        return self.getvalue().splitlines()


class FileSink(OutputSink):
    """Writes to a file; use as a context manager so the file gets closed."""

    def __init__(self, path: Union[str, Path], mode: str = "w"):
        super().__init__()
        self.path = Path(path)
        self.mode = mode

    def __enter__(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._stream = self.path.open(self.mode, encoding="utf-8")
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    @property
    def stream(self) -> IO[str]:
        if self._stream is None:
            raise ValueError(f"FileSink for {self.path} is not open")
        return self._stream

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None


def _emit_peg(sink: OutputSink, peg) -> None:
    text = str(peg)
    if len(text) == 1:
        sink.emit_char(text)
    else:
        sink.emit_string(text)


def emit_move(sink: OutputSink, move: Move) -> None:
    """Write ``Move disk <k> from rod <X> to rod <Y>`` and a newline."""
    disk, source, target = move
    sink.emit_string("Move disk ")
    sink.emit_int(disk)
    sink.emit_string(" from rod ")
    _emit_peg(sink, source)
    sink.emit_string(" to rod ")
    _emit_peg(sink, target)
    sink.emit_string("\n")


def emit_moves(sink: OutputSink, moves: Iterable[Move]) -> int:
    count = 0
    for move in moves:
        emit_move(sink, move)
        count += 1
    return count


def format_move(move: Move) -> str:
    sink = BufferSink()
    emit_move(sink, move)
    return sink.getvalue().rstrip("\n")
