"""Largest of a few numbers read from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

COUNT = 3


def find_max(numbers: Iterable[float]) -> float:
    """Return the largest number; raise ValueError for an empty input."""
    values = list(numbers)
    if not values:
        raise ValueError("No numbers given")
    return max(values)


def main(argv: Sequence[str] | None = None) -> int:
    """Read three numbers and print the largest."""
    argparse.ArgumentParser(prog="maxnum", description="Print the largest of three numbers.").parse_args(argv)
    words = sys.stdin.read().split()[:COUNT]
    try:
        numbers = [float(word) for word in words]
    except ValueError:
        print("Invalid input data", file=sys.stderr)
        return 1
    if len(numbers) < COUNT:
        print("Invalid input data", file=sys.stderr)
        return 1
    print(f"Max number is: {find_max(numbers):g}")
    return 0