"""The judge: loading data, the menu loop, and compiling and checking code."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
import time
from enum import Enum
from pathlib import Path
from typing import TextIO

from .menu import Operation, parse_operation, render_menu
from .problems import ProblemDataError, ProblemSystem
from .random_generator import RandomGenerator
from .users import AccountSystem

USER_DATA_PATH = "./data/user/user.csv"
PROBLEM_DATA_PATH = "./data/problem/problem.csv"
LOGIN_MSG_PATH = "./data/msg/login.txt"
VERSION = "1.0.0"

_CLEAR = "\033[2J\033[H"
_CYAN = "\033[36m"
_RESET = "\033[0m"
_SPINNER = ("|", "/", "-", "\\")
_SPINNER_FRAMES = 20


def _color(code: int, text: str) -> str:
    return f"\033[{code}m{text}\033[0m"


def _red(text: str) -> str:
    return _color(31, text)


def _green(text: str) -> str:
    return _color(32, text)


def _yellow(text: str) -> str:
    return _color(33, text)


def _blue(text: str) -> str:
    return _color(34, text)


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class Status(Enum):
    """Where the judge is in its start-up sequence."""

    NOT_READY = "NOT READY"
    USER_LOGIN = "USER LOGIN"
    READY = "READY"


class Verdict(Enum):
    """Outcome of judging a submission."""

    ACCEPTED = "Accepted"
    WRONG_ANSWER = "Wrong Answer"
    COMPILE_ERROR = "Compiler Error!"


class JudgeSystem:
    """Ties accounts, problems and the menu together into one session."""

    compiler = "g++"
    binary = "test"
    spinner_delay = 0.15

    def __init__(self, user_path: str = USER_DATA_PATH,
                 problem_path: str = PROBLEM_DATA_PATH,
                 msg_path: str = LOGIN_MSG_PATH,
                 version: str = VERSION,
                 input_stream: TextIO | None = None,
                 output_stream: TextIO | None = None) -> None:
        self.user_path = user_path
        self.problem_path = problem_path
        self.msg_path = msg_path
        self.version = version
        self._in = input_stream if input_stream is not None else sys.stdin
        self._out = output_stream if output_stream is not None else sys.stdout
        self.accounts = AccountSystem(self._in, self._out)
        self.problem_set = ProblemSystem(self._in, self._out)
        self.status = Status.NOT_READY

    def _read_token(self, prompt: str) -> str:
        """Prompt once, then return the first word of the next non-blank line."""
        self._out.write(prompt)
        self._out.flush()
        for line in iter(self._in.readline, ""):
            words = line.split()
            if words:
                return words[0]
        raise EOFError("input ended")

    def _loading_effect(self, content: str) -> None:
        isatty = getattr(self._out, "isatty", None)
        if not (isatty and isatty()):
            return
        for frame in range(_SPINNER_FRAMES):
            self._out.write(_yellow(content) + _SPINNER[frame % 4] + "\r")
            self._out.flush()
            time.sleep(self.spinner_delay)

    def load_data(self) -> None:
        """Load users and problems, then show the welcome message.

        A missing user file is reported and skipped; unreadable problem
        data raises ProblemDataError.
        """
        try:
            self.accounts.load(self.user_path)
        except OSError as exc:
            print(f"Exception caught: {exc}", file=sys.stderr)
        self._loading_effect("Status - Loading user data...")
        self._out.write(_yellow("Status - Loading user data...")
                        + _green("OK!\n"))

        self.problem_set.load(self.problem_path)
        self._loading_effect("Status - Loading problem data...")
        self._out.write(_yellow("Status - Loading problem data...")
                        + _green("OK!\n"))

        try:
            text = Path(self.msg_path).read_text(encoding="utf-8")
        except OSError:
            print("Exception caught: Error: File does not exist - "
                  f"{self.msg_path}", file=sys.stderr)
            return
        body = "".join(line + "\n" for line in _split_lines(text))
        self._out.write(_CYAN + body + _RESET)

    def judge(self, problem_id: str | None = None) -> Verdict:
        """Compile a submitted source file and check it against a problem."""
        if not problem_id:
            problem_id = self._read_token("Please input the problem ID: ")
        letter = problem_id[0]
        index = ord(letter) - ord("A")
        problems = self.problem_set.problems
        if not 0 <= index < len(problems):
            raise ValueError(f"unknown problem ID: {letter}")
        problem = problems[index]

        code = self._read_token("Please input your code name: ")
        try:
            compiled = subprocess.run(
                [self.compiler, code, "-o", self.binary],
                stderr=subprocess.DEVNULL)
        except OSError:
            compiled = None
        if compiled is None or compiled.returncode != 0:
            sys.stderr.write(_red("Judge result: Compiler Error!\n"))
            return Verdict.COMPILE_ERROR

        result = self._run_binary(problem.input_path)
        if result is None:
            sys.stderr.write(_red("Judge result: Compiler Error!\n"))
            return Verdict.COMPILE_ERROR

        try:
            expected_text = Path(problem.output_path).read_bytes().decode(
                "utf-8", errors="replace")
        except OSError:
            expected_text = ""
        expected = "".join(line + "\n" for line in _split_lines(expected_text))

        if expected == result:
            self._out.write(_green("Judge result: Accepted\n"))
            return Verdict.ACCEPTED
        self._out.write(_red("Judge result: Wrong Answer\n"))
        return Verdict.WRONG_ANSWER

    def _run_binary(self, input_path: str) -> str | None:
        """Run the compiled program on ``input_path`` and return its output.

        A missing input file gives empty output; a program that cannot be
        started gives None.
        """
        try:
            stdin = open(input_path, "rb")
        except OSError:
            return ""
        with stdin:
            try:
                completed = subprocess.run(
                    [os.path.join(".", self.binary)],
                    stdin=stdin, stdout=subprocess.PIPE)
            except OSError:
                return None
        return (completed.stdout or b"").decode("utf-8", errors="replace")

    def random_problem(self) -> Verdict | None:
        """Pick a random problem, show it and judge a submission for it."""
        problems = self.problem_set.problems
        if not problems:
            self._out.write(_red("No problems available.\n"))
            return None
        picker = RandomGenerator(len(problems) // 2)
        index = picker.next(len(problems))
        letter = chr(ord("A") + index)
        self._out.write(_yellow("Random Problem ")
                        + f"{letter}: {problems[index].title}\n")
        return self.judge(letter)

    def step(self) -> bool:
        """Advance the session by one action; return False when it ends."""
        if self.status is Status.NOT_READY:
            self.load_data()
            self.status = Status.USER_LOGIN
            return True
        if self.status is Status.USER_LOGIN:
            self.accounts.login()
            self.status = Status.READY
            return True

        self._out.write(render_menu())
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("input ended")
        operation = parse_operation(line.removesuffix("\n"))

        if operation is Operation.WHO_AM_I:
            self._out.write(_green("Username: ")
                            + f"{self.accounts.logged_in}\n")
        elif operation is Operation.VERSION:
            self._out.write(_green("VERSION: ") + f"{self.version}\n")
        elif operation is Operation.LIST_PROBLEMS:
            for offset, problem in enumerate(self.problem_set.problems):
                letter = chr(ord("A") + offset)
                self._out.write(f"Problem {letter}: {problem.title}\n")
        elif operation is Operation.RANDOM_PROBLEM:
            self.random_problem()
        elif operation is Operation.SUBMIT:
            try:
                self.judge()
            except ValueError as exc:
                self._out.write(_red(f"{exc}\n"))
            return False
        elif operation is Operation.ADD_PROBLEM:
            if self.accounts.logged_in != "admin":
                self._out.write(_red(
                    "You are not admin, you cannot add a new problem!\n"))
                return True
            self.problem_set.prompt_new_problem(self.problem_path)
        elif operation is Operation.EXIT:
            self._out.write(_CLEAR)
            return False
        else:
            self._out.write("Invalid Operation. Please enter operation again: \n")
        return True


def main(argv: list[str] | None = None) -> int:
    """Run an interactive judge session."""
    parser = argparse.ArgumentParser(
        prog="simplejudge", description="Simple interactive code judge.")
    parser.add_argument("--user-data", default=USER_DATA_PATH)
    parser.add_argument("--problem-data", default=PROBLEM_DATA_PATH)
    parser.add_argument("--login-message", default=LOGIN_MSG_PATH)
    args = parser.parse_args(argv)

    out = sys.stdout
    out.write(_CLEAR)
    system = JudgeSystem(args.user_data, args.problem_data,
                         args.login_message, VERSION)
    out.write(_blue("Simple Judge System start! Version: ") + VERSION + "\n")
    try:
        while system.step():
            pass
    except EOFError:
        return 0
    except ProblemDataError as exc:
        print("Error", file=sys.stderr)
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())