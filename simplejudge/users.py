"""User accounts: loading, saving, sign-up and interactive login."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

_MAX_ATTEMPTS = 3


def _color(code: int, text: str) -> str:
    return f"\033[{code}m{text}\033[0m"


def _red(text: str) -> str:
    return _color(31, text)


def _green(text: str) -> str:
    return _color(32, text)


def _yellow(text: str) -> str:
    return _color(33, text)


def _split_lines(text: str) -> list[str]:
    """Split text into lines the way line-by-line reading does."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@dataclass
class User:
    """A registered user and their password."""

    username: str
    password: str


class AccountSystem:
    """Keeps the list of users, persists it as CSV and handles login."""

    def __init__(self, input_stream: TextIO | None = None,
                 output_stream: TextIO | None = None) -> None:
        self._in = input_stream if input_stream is not None else sys.stdin
        self._out = output_stream if output_stream is not None else sys.stdout
        self.users: list[User] = []
        self.logged_in: str = ""
        self.path: Path | None = None

    def _read_line(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise EOFError("input ended")
        return line.removesuffix("\n")

    def load(self, path: str | Path) -> None:
        """Read users from a CSV file of ``name,password`` lines.

        The path is remembered for later saves even if reading fails.
        """
        self.path = Path(path)
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise FileNotFoundError(
                f"Error: File does not exist - {path}") from exc
        for line in _split_lines(text):
            fields = line.split(",")
            username = fields[0]
            password = fields[1] if len(fields) > 1 else ""
            self.users.append(User(username, password))

    def save(self) -> None:
        """Write every user to the remembered data file."""
        if self.path is None:
            raise ValueError("no user data path has been set")
        with self.path.open("w", encoding="utf-8") as f:
            for user in self.users:
                f.write(f"{user.username},{user.password}\n")

    def search(self, name: str) -> User | None:
        """Return the first user called ``name``, or None."""
        return next((u for u in self.users if u.username == name), None)

    def add_user(self, name: str, password: str) -> User:
        """Register a user and persist the list if a data file is set."""
        user = User(name, password)
        self.users.append(user)
        if self.path is not None:
            self.save()
        return user

    def sign_up(self) -> User:
        """Ask for a name and a confirmed password, then register the user."""
        name = self._read_line(_yellow("Welcome! please enter your name: "))
        while True:
            first = self._read_line(_yellow("Please enter your password: "))
            second = self._read_line(
                _yellow("Please enter your password again: "))
            if first == second:
                return self.add_user(name, first)
            self._out.write(
                _red("two passwords are not the same, please try again") + "\n")

    def login(self) -> str:
        """Prompt until a user logs in; return the user's name."""
        while True:
            name = self._read_line(
                _yellow("User Name (Enter -1 to sign up): "))
            if name == "-1":
                self.sign_up()
                continue
            user = self.search(name)
            if user is None:
                self._out.write(_red("User is not exist!") + "\n")
                continue
            self._out.write(f"Welcome aboard, {name}.\n")
            attempt = self._read_line("Please enter your password: ")
            for tries in range(1, _MAX_ATTEMPTS + 1):
                if attempt == user.password:
                    self._out.write(
                        _green("Login Success!!! welcome aboard") + "\n")
                    self.logged_in = name
                    return name
                if tries < _MAX_ATTEMPTS:
                    attempt = self._read_line(
                        _red("Password incorrect... please try again: "))
                else:
                    self._out.write(
                        _red("Too many unsuccessful sign-in attempts...") + "\n")