"""Fatal error types raised by the line navigator and request parsing.

Core code only raises these; ``lineseek.cli`` turns them into a one-line
stderr diagnostic and exit status.
"""

from __future__ import annotations

FATAL_EXIT_CODE = 2


class LineSeekError(Exception):
    """Base class for conditions that end a run."""

    exit_code = FATAL_EXIT_CODE


class SeekError(LineSeekError):
    """The data stream refused a seek, usually because it is a pipe."""

    def __init__(self, target_offset: int) -> None:
        super().__init__(
            "seek error (did you use a pipe and ask for non-monotonically increasing lines? "
            "A pipe can't be used in that case.)"
        )
        self.target_offset = target_offset


class EndOfStreamError(LineSeekError):
    """A line that was expected to exist could not be read."""

    def __init__(self, line_number: int) -> None:
        super().__init__(f"failed to read line {line_number + 1} (reached end of file?)")
        self.line_number = line_number


class InvalidLineNumberError(LineSeekError):
    """A requested line number is not an integer or is below 1."""

    def __init__(self, token: object) -> None:
        super().__init__(f"invalid line number: {token}")
        self.token = token
