"""Small boolean functions built only from logical operators."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO


def logical_xor(a: int, b: int) -> int:
    """Exclusive or of two truth values, any non-zero value counting as true."""
    return int((bool(a) or bool(b)) and not (bool(a) and bool(b)))


def synthesis_by_one(a: int, b: int, c: int) -> int:
    """F(a, b, c) as a sum of the minterms where it is 1."""
    a, b, c = bool(a), bool(b), bool(c)
    return int(
        (not a and not b and not c)
        or (not a and b and not c)
        or (not a and b and c)
        or (a and b and c)
    )


def synthesis_by_zero(a: int, b: int, c: int) -> int:
    """F(a, b, c) as the negation of the minterms where it is 0."""
    a, b, c = bool(a), bool(b), bool(c)
    return int(
        not (
            (not a and not b and c)
            or (a and not b and not c)
            or (a and not b and c)
            or (a and b and not c)
        )
    )


def minimized_expr(a: int, b: int, c: int) -> int:
    """F(a, b, c) in its minimized form."""
    a, b, c = bool(a), bool(b), bool(c)
    return int((not a and not c) or (not a and b and c) or (a and b and c))


def _int_groups(stream: TextIO, size: int) -> Iterator[tuple[int, ...]]:
    """Yield consecutive groups of integers; an incomplete last group is dropped."""
    group: list[int] = []
    for line in stream:
        for word in line.split():
            group.append(int(word))
            if len(group) == size:
                yield tuple(group)
                group = []


def main_xor(argv: Sequence[str] | None = None) -> int:
    """Read pairs of integers and print their exclusive or."""
    argparse.ArgumentParser(prog="xor", description="Logical XOR function.").parse_args(argv)
    print("Logical XOR function")
    try:
        for a, b in _int_groups(sys.stdin, 2):
            print(f"xor({a}, {b}) = {logical_xor(a, b)}")
    except ValueError:
        print("Invalid input data", file=sys.stderr)
        return 1
    return 0


def main_function(argv: Sequence[str] | None = None) -> int:
    """Read triples of integers and print F(a, b, c)."""
    argparse.ArgumentParser(
        prog="logic-function", description="Test logic function F(a, b, c)."
    ).parse_args(argv)
    print("Test logic function F(a, b, c)")
    try:
        for a, b, c in _int_groups(sys.stdin, 3):
            print(f"F({a}, {b}, {c}) = {minimized_expr(a, b, c)}")
    except ValueError:
        print("Invalid input data", file=sys.stderr)
        return 1
    return 0