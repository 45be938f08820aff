"""Swapping two integers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence


def swap(a: int, b: int) -> tuple[int, int]:
    """Return the two values in exchanged order."""
    return b, a


def main(argv: Sequence[str] | None = None) -> int:
    """Read two integers and show them before and after swapping."""
    argparse.ArgumentParser(prog="swap", description="Swap two integers.").parse_args(argv)
    tokens = (word for line in sys.stdin for word in line.split())
    values = []
    for prompt in ("Enter first number: ", "Enter second number: "):
        print(prompt, end="", flush=True)
        token = next(tokens, None)
        try:
            values.append(int(token) if token is not None else None)
        except ValueError:
            values.append(None)
        if values[-1] is None:
            print("\nInvalid input data", file=sys.stderr)
            return 1
    num1, num2 = values
    print(f"Before swap: Num1 = {num1}, Num2 = {num2}")
    num1, num2 = swap(num1, num2)
    print(f"After swap: Num1 = {num1}, Num2 = {num2}")
    return 0