"""Integrated circuits defined by a boolean expression over named inputs."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

from circuitsim.expression import OPERATORS, evaluate, tokenize

MAX_CIRCUITS = 100

_STRUCTURE = OPERATORS | {"(", ")"}
_DIGITS = frozenset("0123456789")


class CircuitError(ValueError):
    """Raised for an invalid circuit definition, input or storage operation."""


@dataclass
class Circuit:
    """A named circuit: its input names and its boolean expression text."""

    name: str
    arguments: tuple[str, ...]
    expr: str

    @property
    def tokens(self) -> list[str]:
        return tokenize(self.expr)

    def __str__(self) -> str:
        return f"{self.name}({', '.join(self.arguments)}) {self.expr}"

    def validate(self) -> None:
        """Check that every operand of the expression is one of the inputs."""
        for token in self.tokens:
            if token in _STRUCTURE:
                continue
            if token not in self.arguments:
                raise CircuitError(
                    f"Found token {{{token}}} that is not valid operator or operand."
                )

    def run(self, values: Iterable[int]) -> int:
        """Evaluate the circuit with the given digit values for its inputs, in order."""
        substitution: dict[str, str] = {}
        for arg, value in zip(self.arguments, values):
            if not 0 <= value <= 9:
                raise CircuitError(f"Input value {value} is not a single digit")
            substitution[arg] = str(value)
        return evaluate([substitution.get(token, token) for token in self.tokens])

    def truth_rows(self) -> Iterator[tuple[tuple[int, ...], int]]:
        """Yield every combination of 0/1 inputs together with the result."""
        for combo in itertools.product((0, 1), repeat=len(self.arguments)):
            yield combo, self.run(combo)


class RunCommand(NamedTuple):
    """A request to run a circuit by name with digit inputs."""

    name: str
    values: tuple[int, ...]


def parse_definition(text: str) -> Circuit:
    """Parse ``name(a, b, ...) "expression"`` into a validated circuit."""
    name, has_args, rest = text.lstrip().partition("(")
    if not has_args:
        raise CircuitError("Circuit definition has no argument list")
    arg_text, closed, tail = rest.partition(")")
    if not closed:
        raise CircuitError("Circuit argument list is not closed")
    if not name:
        raise CircuitError("Circuit definition has no name")
    arguments = tuple(ch for ch in arg_text if ch not in " ,")
    quote = tail.find('"')
    if quote < 0:
        raise CircuitError("Circuit definition has no quoted expression")
    circuit = Circuit(name=name, arguments=arguments, expr=tail[quote:])
    circuit.validate()
    return circuit


def parse_run(text: str) -> RunCommand:
    """Parse ``name(1, 0, ...)`` into a run command."""
    name, _, rest = text.lstrip().partition("(")
    arg_text = rest.partition(")")[0]
    values = []
    for ch in arg_text:
        if ch in " ,":
            continue
        if ch not in _DIGITS:
            raise CircuitError("Invalid argument parsed for RUN command")
        values.append(int(ch))
    return RunCommand(name, tuple(values))


class CircuitStorage:
    """Holds defined circuits by name, in the order they were added."""

    def __init__(self, capacity: int = MAX_CIRCUITS) -> None:
        self.capacity = capacity
        self._circuits: dict[str, Circuit] = {}

    def add(self, circuit: Circuit) -> None:
        if circuit.name in self._circuits:
            raise CircuitError(
                f"Integrated circuit with name {circuit.name} already exist."
            )
        if len(self._circuits) >= self.capacity:
            raise CircuitError("Circuit storage capacity exceeded")
        self._circuits[circuit.name] = Circuit(
            name=circuit.name, arguments=tuple(circuit.arguments), expr=circuit.expr
        )

    def find(self, name: str) -> Circuit | None:
        return self._circuits.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._circuits

    def __iter__(self) -> Iterator[Circuit]:
        return iter(self._circuits.values())

    def __len__(self) -> int:
        return len(self._circuits)