"""Public package surface for lineseek.

Exports the line navigator, the offset table, and ``main`` for programmatic
CLI invocation.
"""

from __future__ import annotations

from .errors import EndOfStreamError, InvalidLineNumberError, LineSeekError, SeekError
from .navigator import LineNavigator, extract_lines
from .offsets import LineOffsetTable


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "EndOfStreamError",
    "InvalidLineNumberError",
    "LineNavigator",
    "LineOffsetTable",
    "LineSeekError",
    "SeekError",
    "extract_lines",
    "main",
]
