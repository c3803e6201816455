"""Command line front end: ask for test cases and draw a pattern for each size."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from starpatterns.patterns import get_pattern

CASES_PROMPT = "Enter Number of Test Cases: "
SIZE_PROMPT = "Enter 'n' Value: "


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str], what: str) -> int:
    token = next(tokens, None)
    if token is None:
        raise ValueError(f"expected {what}, got end of input")
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"expected {what}, got {token!r}") from None


def run_session(number: int, stdin: TextIO, stdout: TextIO) -> None:
    """Prompt for a count of cases, then draw pattern ``number`` for each size read.

    Raises ValueError for an unknown pattern or input that is not a whole number.
    """
    draw = get_pattern(number)
    tokens = _tokens(stdin)
    stdout.write(CASES_PROMPT)
    stdout.flush()
    count = _read_int(tokens, "number of test cases")
    for _ in range(count):
        stdout.write(SIZE_PROMPT)
        stdout.flush()
        size = _read_int(tokens, "a value for n")
        stdout.write(draw(size))


def main(argv: list[str] | None = None) -> int:
    """Run an interactive session for the pattern named on the command line."""
    parser = argparse.ArgumentParser(
        prog="starpatterns",
        description="Draw star, number and letter patterns.",
    )
    parser.add_argument("pattern", type=int, help="pattern number, 1 to 22")
    args = parser.parse_args(argv)
    try:
        get_pattern(args.pattern)
    except ValueError as error:
        parser.error(str(error))
    try:
        run_session(args.pattern, sys.stdin, sys.stdout)
    except ValueError as error:
        print(f"\nstarpatterns: {error}", file=sys.stderr)
        return 1
    return 0