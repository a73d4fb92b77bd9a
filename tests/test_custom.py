import io
import os

import pytest

from minishell.builtins import ShellExit
from minishell.custom import calculate, handle_custom_command, is_custom_command


def run(args, text=""):
    out = io.StringIO()
    handle_custom_command(args, io.StringIO(text), out)
    return out.getvalue()


@pytest.mark.parametrize(
    "name", ["greet", "clr", "calculator", "quit", "sysinfo", "findfile", "createfile", "help"]
)
def test_custom_names(name):
    assert is_custom_command(name) is True


@pytest.mark.parametrize("name", ["cd", "ls", "Greet", ""])
def test_other_names(name):
    assert is_custom_command(name) is False


@pytest.mark.parametrize(
    "expression, expected",
    [("4 + 5", 4 + 5), ("4+5", 4 + 5), ("7 - 10", 7 - 10), ("2.5 * 4", 2.5 * 4), ("9 / 3", 9 / 3)],
)
def test_calculate(expression, expected):
    assert calculate(expression) == pytest.approx(expected)


def test_calculate_ignores_trailing_text():
    assert calculate("1 + 2 and more") == calculate("1 + 2")


def test_calculate_division_by_zero():
    with pytest.raises(ZeroDivisionError, match="Division by zero"):
        calculate("4 / 0")


def test_calculate_unsupported_operator():
    with pytest.raises(ValueError, match="Unsupported operator: %"):
        calculate("4 % 5")


@pytest.mark.parametrize("expression", ["", "abc", "4 +", "+ 4"])
def test_calculate_invalid_format(expression):
    with pytest.raises(ValueError, match="Invalid input format."):
        calculate(expression)


def test_calculator_command_prints_result():
    out = run(["calculator"], "4 + 5\n")
    assert out == "Enter an expression (e.g., 4 + 5): Result: 9.00\n"


def test_calculator_command_reports_errors():
    assert run(["calculator"], "4 / 0\n").endswith("Error: Division by zero.\n")
    assert run(["calculator"], "junk\n").endswith("Invalid input format.\n")
    assert run(["calculator"], "").endswith("Invalid input format.\n")


def test_greet():
    assert "Welcome to MiniShell" in run(["greet"])


def test_clr():
    assert run(["clr"]) == "\033[H\033[J"


def test_quit_raises_exit():
    out = io.StringIO()
    with pytest.raises(ShellExit) as caught:
        handle_custom_command(["quit"], io.StringIO(), out)
    assert caught.value.status == 0
    assert out.getvalue() == "Exiting MiniShell...\n"


def test_sysinfo_reports_uname():
    out = run(["sysinfo"])
    info = os.uname()
    assert f"System:    {info.sysname}\n" in out
    assert f"Machine:   {info.machine}\n" in out
    assert len(out.splitlines()) == 5


def test_findfile_lists_matches(tmp_path, monkeypatch):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "note.txt").write_text("")
    (tmp_path / "note.txt").write_text("")
    (tmp_path / "other.md").write_text("")
    monkeypatch.chdir(tmp_path)
    lines = run(["findfile", "*.txt"]).splitlines()
    assert sorted(lines) == sorted([os.path.join(".", "note.txt"), os.path.join(".", "a", "note.txt")])


def test_findfile_no_match(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert run(["findfile", "missing"]) == ""


def test_createfile(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    out = run(["createfile", "new.txt"])
    assert out == "File 'new.txt' created successfully.\n"
    assert (tmp_path / "new.txt").read_text() == ""


def test_createfile_keeps_existing_content(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "keep.txt").write_text("data")
    out = run(["createfile", "keep.txt"])
    assert out == "File 'keep.txt' created successfully.\n"
    assert (tmp_path / "keep.txt").read_text() == "data"


def test_createfile_failure(tmp_path, capsys):
    out = io.StringIO()
    handle_custom_command(["createfile", str(tmp_path / "no" / "dir.txt")], io.StringIO(), out)
    assert out.getvalue() == ""
    assert capsys.readouterr().err.startswith("createfile:")


@pytest.mark.parametrize("name", ["findfile", "createfile"])
def test_usage_messages(name):
    assert run([name]) == f"Usage: {name} <filename>\n"


def test_help():
    out = run(["help"])
    assert out.startswith("MiniShell Help:\n")
    assert "  sysinfo      - Displays system info\n" in out


def test_unknown():
    assert run(["bogus"]) == "Unknown custom command: bogus\n"