"""Main menu text and parsing of the chosen operation."""

from __future__ import annotations

from enum import IntEnum

_BORDER = "+" + "-" * 45 + "+"


def _color(code: int, text: str) -> str:
    return f"\033[{code}m{text}\033[0m"


class Operation(IntEnum):
    """Operations offered by the main menu."""

    WHO_AM_I = 1
    VERSION = 2
    LIST_PROBLEMS = 3
    RANDOM_PROBLEM = 4
    SUBMIT = 5
    ADD_PROBLEM = 6
    EXIT = 7


def render_menu() -> str:
    """Return the main menu as printable text."""
    lines = [
        _BORDER,
        _color(33, "Please choose an operation:"),
        _BORDER,
        _color(32, "(1) Who am I"),
        _color(32, "(2) Query judge version"),
        _color(32, "(3) List all problem"),
        _color(32, "(4) Random some problem"),
        _color(32, "(5) Submit code"),
        _color(31, "(6) Add a new problem (admin only)"),
        _color(33, "(7) Exit the process"),
        _BORDER,
    ]
    return "\n".join(lines) + "\n"


def parse_operation(text: str) -> Operation | None:
    """Return the operation a menu answer selects, or None if invalid.

    The answer must start with a single digit from 1 to 7, not followed
    by another digit.
    """
    if not text or text[0] not in "1234567":
        return None
    if len(text) > 1 and text[1] in "0123456789":
        return None
    return Operation(int(text[0]))