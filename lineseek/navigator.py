"""Seek/scan engine for pulling arbitrary lines out of a seekable stream.

``LineNavigator`` remembers where every line it has passed starts, so a
request for an earlier line becomes one relative seek plus one read instead
of a rescan from the top. Lines never seen before are reached by scanning
forward from the furthest known point, recording offsets on the way.
"""

from __future__ import annotations

import io
from collections.abc import Iterable, Iterator
from typing import BinaryIO

from .errors import EndOfStreamError, InvalidLineNumberError, SeekError
from .offsets import DEFAULT_CAPACITY, LineOffsetTable


def _starting_offset(stream: BinaryIO) -> int:
    """Return the stream's current offset, or 0 when it cannot report one."""
    try:
        return stream.tell()
    except OSError:
        # Pipes cannot tell(); offsets then only matter if a seek is attempted.
        return 0


class LineNavigator:
    """Fetch zero-based lines from ``stream`` in any order.

    ``current_line`` is the line the navigator is logically positioned at and
    ``furthest_line`` the highest line whose starting offset is known.
    ``position`` tracks the stream's absolute offset so seeks can be issued
    relative to it without calling ``tell()``.
    """

    def __init__(self, stream: BinaryIO, capacity: int = DEFAULT_CAPACITY) -> None:
        self.stream = stream
        self.position = _starting_offset(stream)
        self.offsets = LineOffsetTable(capacity)
        self.offsets.record(0, self.position)
        self.current_line = 0
        self.furthest_line = 0

    def fetch(self, line_number: int) -> bytes:
        """Return the raw bytes of ``line_number``, terminator included.

        A backward seek leaves the navigator positioned at the fetched line,
        while every forward path leaves it just past the line.
        """
        if line_number < 0:
            raise InvalidLineNumberError(line_number + 1)

        if line_number < self.current_line:
            self._seek_to(line_number)
            line = self._read_line(line_number, line_number)
            self.current_line = line_number
            return line

        if self.furthest_line > self.current_line:
            if line_number <= self.furthest_line:
                self._seek_to(line_number)
                line = self._read_line(line_number, line_number)
                self.current_line = line_number + 1
                return line
            self._seek_to(self.furthest_line)
            self.current_line = self.furthest_line

        while self.current_line < line_number:
            self._read_line(self.current_line, line_number)
            self.current_line += 1

        line = self._read_line(line_number, line_number)
        self.current_line += 1
        return line

    def _seek_to(self, line_number: int) -> None:
        """Move the stream to the recorded start of ``line_number``."""
        target = self.offsets[line_number]
        delta = target - self.position
        try:
            self.stream.seek(delta, io.SEEK_CUR)
        except OSError as exc:
            raise SeekError(target) from exc
        self.position = target

    def _read_line(self, line_number: int, requested: int) -> bytes:
        """Read ``line_number`` at the current position and record where the next one starts."""
        line = self.stream.readline()
        if not line:
            raise EndOfStreamError(requested)
        self.position += len(line)
        self.offsets.record(line_number + 1, self.position)
        self.furthest_line = max(self.furthest_line, line_number + 1)
        return line


def extract_lines(
    stream: BinaryIO,
    line_numbers: Iterable[int],
    *,
    capacity: int = DEFAULT_CAPACITY,
) -> Iterator[bytes]:
    """Yield the bytes of each 1-based line in ``line_numbers``, in request order.

    Requests are consumed lazily; an error on one request stops the generator
    after every earlier line has been yielded.
    """
    navigator = LineNavigator(stream, capacity=capacity)
    for requested in line_numbers:
        if requested < 1:
            raise InvalidLineNumberError(requested)
        yield navigator.fetch(requested - 1)
