"""Four-function calculator taking its operands from the command line."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.IGNORECASE,
)

OPERATIONS = "+-x*/"


def calculate(a: float, op: str, b: float) -> float:
    """Apply ``+``, ``-``, ``x``/``*`` or ``/`` to two numbers."""
    if op == "+":
        return a + b
    if op == "-":
        return a - b
    if op in ("x", "*"):
        return a * b
    if op == "/":
        if b == 0:
            raise ZeroDivisionError("Division by zero")
        return a / b
    raise ValueError("Invalid operation. Supported operations are +, -, x, /")


def _leading_float(text: str) -> float:
    """Parse the longest numeric prefix of the text; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else 0.0


def main(argv: Sequence[str] | None = None) -> int:
    """Compute ``number1 operation number2`` and print the result."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 3:
        print("Usage: calculator [number1] [operation] [number2]", file=sys.stderr)
        return 1
    a = _leading_float(args[0])
    b = _leading_float(args[2])
    op = args[1][:1]
    try:
        result = calculate(a, op, b)
    except (ZeroDivisionError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Result: {result:g}")
    return 0