"""The interactive command loop: prompt, dispatch and redirection."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from collections.abc import Sequence
from contextlib import ExitStack
from typing import IO, TextIO

from minishell.builtins import History, ShellExit, handle_builtin, is_builtin
from minishell.custom import handle_custom_command, is_custom_command
from minishell.executor import execute_pipeline
from minishell.parser import Command, ParseError, parse_pipeline, tokenize
from minishell.suggest import suggest_commands

_RESET = "\033[0m"
_BLUE = "\033[34m"
_GREEN = "\033[32m"


def build_prompt(cwd: str) -> str:
    """Return the coloured prompt showing the working directory."""
    return f"{_BLUE}{cwd} {_GREEN}> {_RESET}"


def parse_redirection(line: str) -> Command:
    """Split a line on spaces into a command with ``<``, ``>`` or ``>>``.

    The word after an operator names the file; a later operator of the
    same kind replaces an earlier one. Operators must stand alone as words.
    """
    command = Command()
    words = iter(word for word in line.split(" ") if word)
    for word in words:
        if word in (">", ">>"):
            command.output_file = next(words, None)
            command.append = word == ">>"
        elif word == "<":
            command.input_file = next(words, None)
        else:
            command.argv.append(word)
    return command


def _flush(*streams: TextIO) -> None:
    for stream in streams:
        stream.flush()


def launch_external(
    args: Sequence[str], out: TextIO | None = None, err: TextIO | None = None
) -> int:
    """Run an external program and return its exit status.

    When the program cannot be started, report it, suggest similar
    commands and return 1.
    """
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    _flush(out, err)
    try:
        return subprocess.run(list(args)).returncode
    except OSError:
        err.write(f"\033[1;31mCommand not found:\033[0m {args[0]}\n")
        suggest_commands(args[0], out=out)
        return 1


def run_redirection(line: str) -> int:
    """Run a single command with its input or output redirected to files.

    Returns the command's exit status, or 1 when it could not be run.
    """
    command = parse_redirection(line)
    with ExitStack() as files:
        stdin: IO[bytes] | None = None
        if command.input_file is not None:
            try:
                stdin = files.enter_context(open(command.input_file, "rb"))
            except OSError as exc:
                sys.stderr.write(
                    f"Error opening input file for redirection: {exc.strerror}\n"
                )
                return 1

        stdout: IO[bytes] | None = None
        if command.output_file is not None:
            flags = os.O_WRONLY | os.O_CREAT
            flags |= os.O_APPEND if command.append else os.O_TRUNC
            try:
                fd = os.open(command.output_file, flags, 0o644)
            except OSError as exc:
                sys.stderr.write(
                    f"Error opening output file for redirection: {exc.strerror}\n"
                )
                return 1
            stdout = files.enter_context(os.fdopen(fd, "wb"))

        if not command.argv:
            sys.stderr.write("Error executing command after redirection: no command\n")
            return 1
        _flush(sys.stdout, sys.stderr)
        try:
            return subprocess.run(command.argv, stdin=stdin, stdout=stdout).returncode
        except OSError as exc:
            sys.stderr.write(
                f"Error executing command after redirection: {exc.strerror or exc}\n"
            )
            return 1


def _enable_line_editing() -> None:
    try:
        import readline  # noqa: F401
    except ImportError:
        pass


class Shell:
    """Reads command lines and carries them out until told to stop."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
        err: TextIO | None = None,
        history: History | None = None,
    ) -> None:
        self.stdin = sys.stdin if stdin is None else stdin
        self.out = sys.stdout if out is None else out
        self.err = sys.stderr if err is None else err
        self.history = History() if history is None else history
        self._editing_ready = False

    def _interactive(self) -> bool:
        return self.stdin is sys.stdin and self.stdin.isatty()

    def _read_line(self, prompt: str) -> str | None:
        if self._interactive():
            if not self._editing_ready:
                _enable_line_editing()
                self._editing_ready = True
            try:
                return input(prompt)
            except EOFError:
                return None
        self.out.write(prompt)
        self.out.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line[:-1] if line.endswith("\n") else line

    def run_line(self, line: str) -> None:
        """Carry out one command line.

        Raises ShellExit when a command asks the shell to stop.
        """
        if not line:
            return
        if "|" in line:
            try:
                commands = parse_pipeline(line)
            except ParseError as exc:
                self.err.write(f"minishell: {exc}\n")
                self.err.write("Error parsing pipeline.\n")
                return
            _flush(self.out, self.err)
            execute_pipeline(commands)
        elif ">" in line or "<" in line:
            _flush(self.out, self.err)
            run_redirection(line)
        else:
            args = tokenize(line)
            if not args:
                return
            if is_builtin(args[0]):
                handle_builtin(args, self.history, self.out, self.err)
            elif is_custom_command(args[0]):
                handle_custom_command(args, self.stdin, self.out)
            else:
                launch_external(args, self.out, self.err)

    def run(self) -> int:
        """Read and run lines until input ends or a command exits.

        Returns the exit status the shell should end with.
        """
        while True:
            try:
                cwd = os.getcwd()
            except OSError as exc:
                self.err.write(
                    f"Error getting current working directory: {exc.strerror}\n"
                )
                line = None
            else:
                line = self._read_line(build_prompt(cwd))
            if line is None:
                self.err.write("Error getting input, exiting.\n")
                break
            if line:
                self.history.add(line)
            try:
                self.run_line(line)
            except ShellExit as exc:
                return exc.status
        self.out.write("\nExiting shell...\n")
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive shell on standard input."""
    parser = argparse.ArgumentParser(
        prog="minishell", description="A small interactive command shell."
    )
    parser.parse_args(argv)
    try:
        return Shell().run()
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        return 130


if __name__ == "__main__":
    sys.exit(main())