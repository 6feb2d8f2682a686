import pytest

from simplejudge.menu import Operation, parse_operation, render_menu


@pytest.mark.parametrize("value", range(1, 8))
def test_valid_digits(value):
    assert parse_operation(str(value)) is Operation(value)


def test_trailing_text_after_digit_is_accepted():
    assert parse_operation("3abc") is Operation.LIST_PROBLEMS
    assert parse_operation("7 ") is Operation.EXIT


@pytest.mark.parametrize(
    "text", ["", "0", "8", "34", " 3", "03", "abc", "+3", "-1", "12"])
def test_invalid_answers(text):
    assert parse_operation(text) is None


def test_parsed_operations_carry_menu_numbers():
    submit = parse_operation("5")
    exit_op = parse_operation("7")
    assert submit is Operation.SUBMIT
    assert submit == 5
    assert exit_op is Operation.EXIT
    assert exit_op == 7


def test_render_menu_structure():
    menu = render_menu()
    lines = menu.splitlines()
    border = "+" + "-" * 45 + "+"
    assert menu.endswith("\n")
    assert len(lines) == 11
    assert [line for line in lines if line == border] == [border] * 3
    assert lines[0] == border and lines[-1] == border


@pytest.mark.parametrize("label", [
    "(1) Who am I",
    "(2) Query judge version",
    "(3) List all problem",
    "(4) Random some problem",
    "(5) Submit code",
    "(6) Add a new problem (admin only)",
    "(7) Exit the process",
])
def test_render_menu_lists_options(label):
    assert label in render_menu()