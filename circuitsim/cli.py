"""Interactive console simulator of digital integrated circuits."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from circuitsim.circuit import CircuitError, CircuitStorage, parse_definition, parse_run
from circuitsim.expression import ExpressionError
from circuitsim.truthtable import find_expression, load_truth_table, parse_file_name

BANNER = "Console simulator of Digital Integrated Circuits"
PROMPT = "Enter command: "


class Simulator:
    """Executes DEFINE, RUN, ALL, FIND and PRINT commands against a circuit store."""

    def __init__(
        self,
        storage: CircuitStorage | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.storage = storage if storage is not None else CircuitStorage()
        self._out = out
        self._err = err
        self._handlers = {
            "DEFINE": self._define,
            "RUN": self._run,
            "ALL": self._all,
            "FIND": self._find,
            "PRINT": self._print_all,
        }

    def _say(self, text: str) -> None:
        print(text, file=self._out or sys.stdout)

    def _report(self, text: str) -> None:
        print(text, file=self._err or sys.stderr)

    def execute(self, line: str) -> bool:
        """Run one command line; return False when the line asks to exit."""
        line = line.rstrip("\r\n")
        if line == "EXIT":
            return False
        parts = line.split(None, 1)
        if not parts:
            return True
        handler = self._handlers.get(parts[0])
        if handler is not None:
            handler(parts[1] if len(parts) > 1 else "")
        return True

    def _define(self, rest: str) -> None:
        try:
            circuit = parse_definition(rest)
        except CircuitError as exc:
            self._report(str(exc))
            self._report("Invalid expression entered. Skip DEFINE command.")
            return
        try:
            self.storage.add(circuit)
        except CircuitError as exc:
            self._report(f"{exc} Skip DEFINE command.")

    def _run(self, rest: str) -> None:
        try:
            command = parse_run(rest)
        except CircuitError as exc:
            self._report(f"{exc}\nSkip RUN command.")
            return
        circuit = self.storage.find(command.name)
        if circuit is None:
            self._report(f"Circuit with name {command.name} does NOT exist.\nSkip RUN command.")
            return
        try:
            result = circuit.run(command.values)
        except (CircuitError, ExpressionError) as exc:
            self._report(f"{exc}\nSkip RUN command.")
            return
        self._say(str(result))

    def _all(self, rest: str) -> None:
        words = rest.split()
        name = words[0] if words else ""
        circuit = self.storage.find(name)
        if circuit is None:
            self._report(f"Circuit with name {name} does NOT exist.\nSkip ALL command.")
            return
        self._say(f"Execute {circuit.name} {circuit.expr}")
        try:
            for values, result in circuit.truth_rows():
                self._say(" | ".join([*map(str, values), f"res: {result}"]))
        except (CircuitError, ExpressionError) as exc:
            self._report(f"{exc}\nSkip ALL command.")

    def _find(self, rest: str) -> None:
        file_name = parse_file_name(rest)
        try:
            table = load_truth_table(file_name)
        except (OSError, ValueError):
            self._report(f"Failed to parse truth table for file with name {file_name}.")
            self._report(
                "Maybe the file name is wrong or the file is missing from the working directory."
            )
            self._report("Skip FIND command.")
            return
        self._say(table.format().rstrip("\n"))
        self._say(find_expression(table))

    def _print_all(self, rest: str) -> None:
        for circuit in self.storage:
            self._say(str(circuit))


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from standard input until EXIT or end of input."""
    parser = argparse.ArgumentParser(
        prog="circuitsim",
        description="Console simulator of digital integrated circuits.",
    )
    parser.parse_args(argv)
    simulator = Simulator()
    print(BANNER)
    print(PROMPT, end="", flush=True)
    for line in sys.stdin:
        if not simulator.execute(line):
            break
        print(PROMPT, end="", flush=True)
    return 0