"""Growable table mapping zero-based line numbers to byte offsets.

Entries are dense from line 0 up to the furthest recorded line.
Backing storage is pre-sized and doubles when a write lands past its end.
"""

from __future__ import annotations

DEFAULT_CAPACITY = 1000
UNSET = -1


class LineOffsetTable:
    """Byte offset of the start of every line visited so far."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        """Allocate ``capacity`` unset slots (at least one)."""
        self._offsets: list[int] = [UNSET] * max(1, capacity)

    @property
    def capacity(self) -> int:
        """Number of allocated slots, populated or not."""
        return len(self._offsets)

    def _grow(self, line_number: int) -> None:
        """Double storage until ``line_number`` fits."""
        size = len(self._offsets)
        while line_number >= size:
            size *= 2
        self._offsets.extend([UNSET] * (size - len(self._offsets)))

    def record(self, line_number: int, offset: int) -> None:
        """Store the starting offset of ``line_number``."""
        if line_number < 0:
            raise IndexError(f"negative line number: {line_number}")
        if offset < 0:
            raise ValueError(f"negative offset: {offset}")
        if line_number >= len(self._offsets):
            self._grow(line_number)
        self._offsets[line_number] = offset

    def __contains__(self, line_number: object) -> bool:
        if not isinstance(line_number, int) or line_number < 0:
            return False
        return line_number < len(self._offsets) and self._offsets[line_number] != UNSET

    def __getitem__(self, line_number: int) -> int:
        """Return the recorded offset, raising ``LookupError`` when unset."""
        if line_number not in self:
            raise LookupError(f"no offset recorded for line {line_number}")
        return self._offsets[line_number]
