"""Command-line front door for lineseek.

Parses ``-f LINENUMFILE``, streams the requested lines of standard input to
standard output, and is the one place fatal errors become exit statuses.
"""

from __future__ import annotations

import argparse
import sys

from .config import load_initial_capacity
from .errors import LineSeekError
from .navigator import extract_lines
from .request_source import iter_requested_lines


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the ``lineseek`` command."""
    parser = argparse.ArgumentParser(
        prog="lineseek",
        usage="%(prog)s -f LINENUMFILE < inputfile",
        description=(
            "Print the requested lines of standard input, in request order. "
            "Requests may repeat or go backwards when standard input is a seekable file."
        ),
    )
    parser.add_argument(
        "-f",
        dest="line_number_file",
        metavar="LINENUMFILE",
        required=True,
        help="File of whitespace-separated 1-based line numbers.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run one extraction over ``sys.stdin`` and exit with status 2 on failure.

    Usage errors exit through argparse. Lines emitted before a fatal error
    stay on standard output.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        request_file = open(args.line_number_file, "rb")
    except OSError as exc:
        parser.error(f"cannot open {args.line_number_file}: {exc.strerror or exc}")

    stdout = sys.stdout.buffer
    try:
        with request_file:
            requested = iter_requested_lines(request_file)
            for line in extract_lines(sys.stdin.buffer, requested, capacity=load_initial_capacity()):
                stdout.write(line)
    except LineSeekError as exc:
        stdout.flush()
        parser.exit(exc.exit_code, f"{parser.prog}: {exc}\n")
    stdout.flush()


if __name__ == "__main__":
    main()
