"""Class attendance of up to 64 students kept as bits of one integer."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

STUDENTS = 64

MENU = (
    "Choose among the following options:\n"
    "1.Set attendance\n"
    "2.Clear attendance\n"
    "3.Attendance info\n"
    "4.Change attendance\n"
    "5.Exit\n"
    "Option: "
)


def _check_id(student_id: int) -> None:
    if not 0 <= student_id < STUDENTS:
        raise ValueError(
            f"Invalid student id: {student_id}\n"
            f"Valid id are between 0 and {STUDENTS - 1}."
        )


@dataclass
class Attendance:
    """Attendance mask: bit ``n`` is set when student ``n`` is present."""

    mask: int = 0

    def set(self, student_id: int) -> None:
        """Mark a student as present."""
        _check_id(student_id)
        self.mask |= 1 << student_id

    def clear(self, student_id: int) -> None:
        """Mark a student as absent."""
        _check_id(student_id)
        self.mask &= ~(1 << student_id)

    def toggle(self, student_id: int) -> None:
        """Flip a student's attendance."""
        _check_id(student_id)
        self.mask ^= 1 << student_id

    def is_present(self, student_id: int) -> bool:
        """Whether the student is marked present."""
        _check_id(student_id)
        return bool(self.mask & (1 << student_id))

    def present(self) -> list[int]:
        """Ids of present students, ascending."""
        return [i for i in range(STUDENTS) if self.is_present(i)]

    def absent(self) -> list[int]:
        """Ids of absent students, ascending."""
        return [i for i in range(STUDENTS) if not self.is_present(i)]


class _IntReader:
    """Reads integers word by word; a bad word discards the rest of its line."""

    def __init__(self, stream: TextIO) -> None:
        self._lines = iter(stream)
        self._pending: deque[str] = deque()

    def read(self) -> int | None:
        while not self._pending:
            line = next(self._lines, None)
            if line is None:
                raise EOFError
            self._pending.extend(line.split())
        word = self._pending.popleft()
        try:
            return int(word)
        except ValueError:
            self._pending.clear()
            print("\nInvalid input. Please enter an integer.\nTry again.", file=sys.stderr)
            return None


def _words(ids: list[int]) -> str:
    return "".join(f"{i} " for i in ids)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive attendance menu until exit or end of input."""
    argparse.ArgumentParser(prog="attendance", description="Attendance in class.").parse_args(argv)
    attendance = Attendance()
    reader = _IntReader(sys.stdin)
    actions = {
        1: ("Set attendance", attendance.set),
        2: ("Clear attendance", attendance.clear),
        4: ("Change attendance", attendance.toggle),
    }

    print('[Welcome to "Attendance in class" program]\n')
    try:
        while True:
            print(MENU, end="", flush=True)
            option = reader.read()
            if option is None:
                print()
                continue
            if option in actions:
                label, action = actions[option]
                print(f"{label} for student with id [0, {STUDENTS - 1}]: ", end="", flush=True)
                student_id = reader.read()
                if student_id is not None:
                    try:
                        action(student_id)
                    except ValueError as exc:
                        print(f"\n{exc} Try again.", file=sys.stderr)
                print()
            elif option == 3:
                print("\nStudents attendance info:")
                print(f"Students present in class:  {_words(attendance.present())}")
                print(f"Students absent from class: {_words(attendance.absent())}")
                print()
            elif option == 5:
                print("\nExit from the program requested.\nHave a nice day!")
                return 0
            else:
                print(f"\nReceived unsupported option: {option}\nTry again.\n", file=sys.stderr)
    except EOFError:
        return 0