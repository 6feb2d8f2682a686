"""Problem records and the problem list kept in a CSV file."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def _yellow(text: str) -> str:
    return f"\033[33m{text}\033[0m"


class ProblemDataError(Exception):
    """Problem data could not be read or parsed."""


def _parse_int(text: str) -> int:
    """Parse the leading integer of ``text``, ignoring anything after it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ProblemDataError(f"invalid magic number: {text!r}")
    return int(match.group(1))


@dataclass
class Problem:
    """A problem with its test input and expected output files."""

    title: str
    input_path: str
    output_path: str
    magic_number: int

    def to_csv_line(self) -> str:
        return (f"{self.title},{self.input_path},{self.output_path},"
                f"{self.magic_number}\n")


class ProblemSystem:
    """Holds the problem list and reads and writes its CSV file."""

    def __init__(self, input_stream: TextIO | None = None,
                 output_stream: TextIO | None = None) -> None:
        self._in = input_stream if input_stream is not None else sys.stdin
        self._out = output_stream if output_stream is not None else sys.stdout
        self.problems: list[Problem] = []

    def _read_line(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("input ended")
        return line.removesuffix("\n")

    def load(self, path: str | Path) -> None:
        """Read ``title,input,output,magic`` lines from ``path``."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise ProblemDataError(
                f"Please check your csv file in {path}") from exc
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        for line in lines:
            fields = line.split(",")
            fields += [""] * (4 - len(fields))
            title, input_path, output_path, magic = fields[:4]
            self.add_problem(
                Problem(title, input_path, output_path, _parse_int(magic)))

    def add_problem(self, problem: Problem) -> None:
        """Append a problem to the list."""
        self.problems.append(problem)

    def save(self, path: str | Path) -> None:
        """Write the whole problem list to ``path``."""
        with Path(path).open("w", encoding="utf-8") as f:
            f.writelines(p.to_csv_line() for p in self.problems)

    def prompt_new_problem(self, path: str | Path) -> Problem:
        """Ask for a new problem's details, add it and save the list."""
        input_path = self._read_line(
            _yellow("Now, please input the input path(testcase): "))
        self._out.write(_yellow(f"Ok, your input path is {input_path}\n"))
        output_path = self._read_line(
            _yellow("Please input the output path(testcase): "))
        self._out.write(_yellow(f"Ok, your output path is {output_path}\n"))
        magic = _parse_int(self._read_line(
            _yellow("Please input the magic number (for this problem): ")))
        title = self._read_line(
            _yellow("Final! please input the problem name: "))
        self._out.write(
            _yellow(f"Ok, your problem name(title) is {title}\n"))
        problem = Problem(title, input_path, output_path, magic)
        self.add_problem(problem)
        self.save(path)
        return problem