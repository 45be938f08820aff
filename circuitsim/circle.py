"""Perimeter and area of circles."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence


def circle(radius: float) -> tuple[float, float]:
    """Return the perimeter and area of a circle; a negative radius is rejected."""
    if radius < 0:
        raise ValueError("Invalid input data")
    return 2 * math.pi * radius, math.pi * radius * radius


def main(argv: Sequence[str] | None = None) -> int:
    """Read radii until end of input or a non-number and print each circle's figures."""
    argparse.ArgumentParser(prog="circle", description="Circle perimeter and area.").parse_args(argv)
    print("Enter circle radius (Ctrl+D to stop):")
    for line in sys.stdin:
        for word in line.split():
            try:
                radius = float(word)
            except ValueError:
                return 0
            try:
                perimeter, area = circle(radius)
            except ValueError as exc:
                print(exc, file=sys.stderr)
                continue
            print(f"P = {perimeter:.2f}, S = {area:.2f}")
    return 0