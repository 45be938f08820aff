"""Count the input lines that equal a given string."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence


def count_lines(lines: Iterable[str], target: str) -> int:
    """Number of lines, without their line ending, equal to the target."""
    return sum(1 for line in lines if line.rstrip("\n") == target)


def main(argv: Sequence[str] | None = None) -> int:
    """Count lines of standard input equal to the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: stringcount [string_to_count]", file=sys.stderr)
        return 1
    print(f"Count = {count_lines(sys.stdin, args[0])}")
    return 0