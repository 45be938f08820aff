"""Truth tables read from text and synthesis of a boolean function from them."""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class TruthTable:
    """Rows of integers; the last column of each row holds the function's result."""

    rows: tuple[tuple[int, ...], ...] = ()

    @property
    def width(self) -> int:
        """Number of columns, inputs and result together."""
        return len(self.rows[0]) if self.rows else 0

    def format(self) -> str:
        """Render the table with every value followed by a space, one row per line."""
        return "".join("".join(f"{value} " for value in row) + "\n" for row in self.rows)


def _leading_ints(line: str) -> tuple[int, ...]:
    values: list[int] = []
    for word in line.split():
        try:
            values.append(int(word))
        except ValueError:
            break
    return tuple(values)


def parse_truth_table(lines: Iterable[str]) -> TruthTable:
    """Build a table from lines of whitespace-separated integers.

    Reading a line stops at its first word that is not an integer; lines
    with no leading integers are skipped.  Every row must have the same width.
    """
    rows = tuple(row for row in map(_leading_ints, lines) if row)
    if rows:
        width = len(rows[0])
        for number, row in enumerate(rows, start=1):
            if len(row) != width:
                raise ValueError(
                    f"Row {number} has {len(row)} columns, expected {width}"
                )
    return TruthTable(rows)


def load_truth_table(path: str | os.PathLike[str]) -> TruthTable:
    """Read a truth table from a text file."""
    with open(path, encoding="utf-8") as handle:
        return parse_truth_table(handle)


def parse_file_name(text: str) -> str:
    """Extract a file name, taking what lies between the outer double quotes if any."""
    stripped = text.strip()
    first = stripped.find('"')
    if first < 0:
        return stripped
    last = stripped.rfind('"')
    if last > first:
        return stripped[first + 1 : last]
    return stripped[first + 1 :]


def synthesize_minterm(inputs: Sequence[int]) -> str:
    """Return the conjunction that is true for exactly these inputs.

    Inputs are named ``a``, ``b``, ``c`` and so on; a zero input is negated.
    """
    literals = (
        ("!" if value == 0 else "") + chr(ord("a") + index)
        for index, value in enumerate(inputs)
    )
    return "(" + " & ".join(literals) + ")"


def find_expression(table: TruthTable) -> str:
    """Synthesize the quoted sum-of-products expression for rows whose result is 1."""
    terms = [synthesize_minterm(row[:-1]) for row in table.rows if row[-1] == 1]
    if not terms:
        return '"'
    return '"' + " | ".join(terms) + '"'