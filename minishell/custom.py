"""Extra commands: greeting, calculator, file helpers and system info."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterator, Sequence
from fnmatch import fnmatchcase
from typing import TextIO

from minishell.builtins import ShellExit

CUSTOM_COMMANDS = frozenset(
    {"greet", "clr", "calculator", "quit", "sysinfo", "findfile", "createfile", "help"}
)

_NUMBER = r"([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
_EXPRESSION = re.compile(rf"\s*{_NUMBER}\s*(\S)\s*{_NUMBER}")

_HELP = """\
MiniShell Help:
  greet        - Prints a welcome message
  clr          - Clears the screen
  calculator   - Launches a basic calculator
  quit         - Exits the shell
  findfile     - Searches for a file
  createfile   - Creates an empty file
  sysinfo      - Displays system info
  help         - Displays this help message
"""


def is_custom_command(name: str) -> bool:
    """Return whether ``name`` is one of the extra commands."""
    return name in CUSTOM_COMMANDS


def calculate(expression: str) -> float:
    """Evaluate ``number operator number``; text after it is ignored.

    Raises ValueError for a malformed expression or unknown operator and
    ZeroDivisionError for division by zero.
    """
    match = _EXPRESSION.match(expression)
    if match is None:
        raise ValueError("Invalid input format.")
    left, operator, right = float(match[1]), match[2], float(match[3])
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    if operator == "/":
        if right == 0:
            raise ZeroDivisionError("Error: Division by zero.")
        return left / right
    raise ValueError(f"Unsupported operator: {operator}")


def _calculator(stdin: TextIO, out: TextIO) -> None:
    out.write("Enter an expression (e.g., 4 + 5): ")
    out.flush()
    try:
        result = calculate(stdin.readline())
    except (ValueError, ZeroDivisionError) as exc:
        out.write(f"{exc}\n")
    else:
        out.write(f"Result: {result:.2f}\n")


def _sysinfo(out: TextIO) -> None:
    try:
        info = os.uname()
    except OSError as exc:
        sys.stderr.write(f"sysinfo: {exc.strerror}\n")
        return
    out.write(f"System:    {info.sysname}\n")
    out.write(f"Node Name: {info.nodename}\n")
    out.write(f"Release:   {info.release}\n")
    out.write(f"Version:   {info.version}\n")
    out.write(f"Machine:   {info.machine}\n")


def _walk(directory: str) -> Iterator[tuple[str, str]]:
    """Yield (path, name) for everything below ``directory``, depth first."""
    try:
        with os.scandir(directory) as entries:
            listing = list(entries)
    except OSError:
        return
    for entry in listing:
        path = os.path.join(directory, entry.name)
        yield path, entry.name
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError:
            continue
        if is_dir:
            yield from _walk(path)


def _findfile(pattern: str, out: TextIO) -> None:
    if fnmatchcase(os.curdir, pattern):
        out.write(f"{os.curdir}\n")
    for path, name in _walk(os.curdir):
        if fnmatchcase(name, pattern):
            out.write(f"{path}\n")


def _createfile(filename: str, out: TextIO) -> None:
    try:
        fd = os.open(filename, os.O_CREAT | os.O_WRONLY, 0o644)
    except OSError as exc:
        sys.stderr.write(f"createfile: {exc.strerror}\n")
        return
    os.close(fd)
    out.write(f"File '{filename}' created successfully.\n")


def handle_custom_command(
    args: Sequence[str], stdin: TextIO | None = None, out: TextIO | None = None
) -> None:
    """Carry out the extra command named by ``args[0]``.

    Raises ShellExit for ``quit``.
    """
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if out is None else out
    name = args[0]
    if name == "greet":
        out.write("👋 Hello! Welcome to MiniShell. Type 'help' to see available commands.\n")
    elif name == "clr":
        out.write("\033[H\033[J")
    elif name == "calculator":
        _calculator(stdin, out)
    elif name == "quit":
        out.write("Exiting MiniShell...\n")
        raise ShellExit(0)
    elif name == "sysinfo":
        _sysinfo(out)
    elif name == "findfile":
        if len(args) > 1:
            _findfile(args[1], out)
        else:
            out.write("Usage: findfile <filename>\n")
    elif name == "createfile":
        if len(args) > 1:
            _createfile(args[1], out)
        else:
            out.write("Usage: createfile <filename>\n")
    elif name == "help":
        out.write(_HELP)
    else:
        out.write(f"Unknown custom command: {name}\n")