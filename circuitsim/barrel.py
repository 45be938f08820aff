"""Volume of liquid in vertical and horizontal cylindrical barrels."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO


def vertical_cylinder_volume(radius: float, height: float) -> float:
    """Volume in cubic metres of an upright cylinder."""
    if radius <= 0 or height <= 0:
        raise ValueError("Barrel radius and height must be positive numbers")
    return math.pi * radius * radius * height


def horizontal_cylinder_volume(radius: float, length: float, filled_height: float) -> float:
    """Volume in cubic metres of liquid filled to a height in a lying cylinder."""
    if radius <= 0 or length <= 0 or filled_height <= 0:
        raise ValueError("Barrel radius, length, and filled height must be positive numbers")
    if filled_height > 2 * radius:
        raise ValueError("Barrel filled height cannot exceed the barrel diameter")
    radius_minus_height = radius - filled_height
    sector = math.acos(radius_minus_height / radius) * radius * radius
    triangle = radius_minus_height * math.sqrt(
        2 * radius * filled_height - filled_height * filled_height
    )
    return (sector - triangle) * length


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_values(prompts: Sequence[tuple[str, str]]) -> list[float] | None:
    tokens = _tokens(sys.stdin)
    values = []
    for prompt, what in prompts:
        print(prompt, end="", flush=True)
        token = next(tokens, None)
        try:
            values.append(float(token) if token is not None else None)
        except ValueError:
            values.append(None)
        if values[-1] is None:
            print(f"Program failed to read {what}", file=sys.stderr)
            return None
    return values


def main_vertical(argv: Sequence[str] | None = None) -> int:
    """Ask for radius and height and print the vertical barrel volume."""
    argparse.ArgumentParser(
        prog="barrel-vertical", description="Volume of a vertical barrel."
    ).parse_args(argv)
    values = _read_values(
        [
            ("Enter barrel radius in meters: ", "barrel radius"),
            ("Enter barrel height in meters: ", "barrel height"),
        ]
    )
    if values is None:
        return 1
    try:
        volume = vertical_cylinder_volume(*values)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Volume of vertical cylinder is: {volume:g} m^3")
    return 0


def main_horizontal(argv: Sequence[str] | None = None) -> int:
    """Ask for radius, length and filled height and print the liquid volume."""
    argparse.ArgumentParser(
        prog="barrel-horizontal", description="Volume of liquid in a horizontal barrel."
    ).parse_args(argv)
    values = _read_values(
        [
            ("Enter barrel radius in meters: ", "barrel radius"),
            ("Enter barrel length in meters: ", "barrel length"),
            ("Enter barrel filled height in meters: ", "barrel filled height"),
        ]
    )
    if values is None:
        return 1
    try:
        volume = horizontal_cylinder_volume(*values)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Volume of horizontal cylinder is: {volume:g} m^3")
    return 0