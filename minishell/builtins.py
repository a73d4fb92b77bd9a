"""Commands the shell carries out itself."""

from __future__ import annotations

import os
import pwd
import re
import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

MAX_HISTORY = 100

BUILTINS = frozenset(
    {"cd", "echo", "pwd", "exit", "clear", "whoami", "help", "history", "env", "export", "unset"}
)

_INTEGER = re.compile(r"[ \t\n\v\f\r]*[+-]?\d+")

_HELP = """\
MiniShell built-in commands:
  cd [dir]       - Change directory
  pwd            - Print current directory
  echo [args]    - Echo arguments
  exit [status]  - Exit the shell
  clear          - Clear the screen
  whoami         - Show current user
  help           - Show this help message
  history        - Show command history
  env            - Show environment variables
  export VAR=VAL - Set environment variable
  unset VAR      - Unset environment variable
"""


class ShellExit(Exception):
    """Raised when a command asks the shell to exit."""

    def __init__(self, status: int = 0) -> None:
        super().__init__(status)
        self.status = status


class History:
    """Commands entered so far; entries past the limit are not kept."""

    def __init__(self, limit: int = MAX_HISTORY) -> None:
        self.limit = limit
        self._entries: list[str] = []

    def add(self, command: str) -> None:
        if len(self._entries) < self.limit:
            self._entries.append(command)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


def is_builtin(name: str) -> bool:
    """Return whether ``name`` is a built-in command."""
    return name in BUILTINS


def _cd(args: Sequence[str], out: TextIO, err: TextIO) -> None:
    target = args[1] if len(args) > 1 else os.environ.get("HOME")
    if target is None:
        err.write("minishell: cd: HOME not set\n")
        return
    if target == "-":
        previous = os.environ.get("OLDPWD")
        if previous is None:
            err.write("minishell: cd: OLDPWD not set\n")
            return
        try:
            os.chdir(previous)
        except OSError as exc:
            err.write(f"minishell: {exc.strerror}\n")
        else:
            out.write(f"{previous}\n")
        return
    try:
        os.environ["OLDPWD"] = os.getcwd()
    except OSError:
        pass
    try:
        os.chdir(target)
    except OSError as exc:
        err.write(f"minishell: {exc.strerror}\n")
        err.write(f"minishell: cd: {target}: No such file or directory\n")


def _echo(args: Sequence[str], out: TextIO) -> None:
    words = list(args[1:])
    newline = True
    if words and words[0] == "-n":
        newline = False
        words = words[1:]
    out.write(" ".join(words))
    if newline:
        out.write("\n")


def _pwd(out: TextIO, err: TextIO) -> None:
    try:
        out.write(f"{os.getcwd()}\n")
    except OSError as exc:
        err.write(f"minishell: {exc.strerror}\n")


def _exit(args: Sequence[str], err: TextIO) -> None:
    if len(args) < 2 or args[1] == "":
        raise ShellExit(0)
    text = args[1]
    if _INTEGER.fullmatch(text) is None:
        err.write(f"minishell: exit: {text}: numeric argument required\n")
        return
    raise ShellExit(int(text))


def _whoami(out: TextIO, err: TextIO) -> None:
    try:
        out.write(f"{pwd.getpwuid(os.getuid()).pw_name}\n")
    except KeyError:
        err.write("minishell: user not found\n")


def _env(out: TextIO) -> None:
    for name, value in os.environ.items():
        out.write(f"{name}={value}\n")


def _export(args: Sequence[str], out: TextIO) -> None:
    if len(args) < 2:
        _env(out)
        return
    for assignment in args[1:]:
        name, _, value = assignment.partition("=")
        try:
            os.environ[name] = value
        except ValueError:
            continue


def _unset(args: Sequence[str]) -> None:
    for name in args[1:]:
        os.environ.pop(name, None)


def handle_builtin(
    args: Sequence[str],
    history: History | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Carry out the built-in command named by ``args[0]``.

    Raises ShellExit when the command is ``exit`` with a valid status.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    if not args:
        return
    name = args[0]
    if name == "cd":
        _cd(args, out, err)
    elif name == "echo":
        _echo(args, out)
    elif name == "pwd":
        _pwd(out, err)
    elif name == "exit":
        _exit(args, err)
    elif name == "clear":
        out.write("\033[H\033[J")
    elif name == "whoami":
        _whoami(out, err)
    elif name == "help":
        out.write(_HELP)
    elif name == "history":
        for number, command in enumerate(history or (), 1):
            out.write(f"{number} {command}\n")
    elif name == "env":
        _env(out)
    elif name == "export":
        _export(args, out)
    elif name == "unset":
        _unset(args)
    else:
        err.write(f"minishell: {name}: command not found\n")