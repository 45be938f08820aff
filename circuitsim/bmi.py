"""Body mass index in a low and a high precision variant."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class BodyMassIndex:
    """Body mass in kilograms and height in metres."""

    mass: float
    height: float

    def _check(self) -> None:
        if self.mass <= 0:
            raise ValueError("Body mass must be positive number")
        if self.height <= 0:
            raise ValueError("Body height must be positive number")

    def low_precision(self) -> float:
        """Classic index: mass divided by the square of the height."""
        self._check()
        return self.mass / self.height**2

    def high_precision(self) -> float:
        """Revised index: 1.3 times mass divided by height to the power 2.5."""
        self._check()
        return 1.3 * (self.mass / self.height**2.5)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_float(tokens: Iterator[str]) -> float | None:
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return float(token)
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Ask for mass and height and print both indices."""
    parser = argparse.ArgumentParser(prog="bmi", description="Body mass index calculator.")
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)

    print("Enter body mass in kg: ", end="", flush=True)
    mass = _read_float(tokens)
    if mass is None:
        print("Program failed to read body mass", file=sys.stderr)
        return 1

    print("Enter body height in meters: ", end="", flush=True)
    height = _read_float(tokens)
    if height is None:
        print("Program failed to read body height", file=sys.stderr)
        return 1

    bmi = BodyMassIndex(mass, height)
    try:
        low = bmi.low_precision()
        high = bmi.high_precision()
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Your low precision Body Mass Index is: {low:g}")
    print(f"Your high precision Body Mass Index is: {high:g}")
    return 0