"""Parse requested line numbers from a binary request source."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from .errors import InvalidLineNumberError

DECIMAL_TOKEN_RE = re.compile(rb"[+-]?[0-9]+")


def _parse_token(token: bytes) -> int:
    """Convert one ASCII decimal token, optionally signed, to ``int``."""
    if DECIMAL_TOKEN_RE.fullmatch(token) is None:
        raise InvalidLineNumberError(repr(token.decode("ascii", errors="backslashreplace")))
    return int(token)


def iter_requested_lines(source: Iterable[bytes]) -> Iterator[int]:
    """Yield whitespace-separated integers from ``source``, one at a time.

    ``source`` is consumed lazily, so an open request file is never read in
    full up front. Tokens are raw bytes; anything other than ASCII digits
    with an optional sign is rejected. Bounds are checked by the navigator.
    """
    for raw_line in source:
        for token in raw_line.split():
            yield _parse_token(token)
