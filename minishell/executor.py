"""Run a pipeline of external commands connected by pipes."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence
from contextlib import ExitStack
from typing import IO, Union

from minishell.parser import Command

_Source = Union[IO[bytes], int, None]


def _report(prefix: str, exc: OSError) -> None:
    sys.stderr.write(f"{prefix}: {exc.strerror or exc}\n")


def _launch(command: Command, source: _Source, piped: bool) -> subprocess.Popen | None:
    """Start one stage, or report why it could not start and return None.

    A stage reading from a pipe takes its input from the pipe even when it
    also names an input file, and a stage writing into a pipe sends its
    output there even when it names an output file; the files are still
    opened (and an output file truncated) as the redirection requests.
    """
    with ExitStack() as files:
        stdin = source
        if command.input_file is not None:
            try:
                handle = files.enter_context(open(command.input_file, "rb"))
            except OSError as exc:
                _report("open input", exc)
                return None
            if source is None:
                stdin = handle

        stdout: IO[bytes] | int | None = None
        if command.output_file is not None:
            flags = os.O_WRONLY | os.O_CREAT
            flags |= os.O_APPEND if command.append else os.O_TRUNC
            try:
                fd = os.open(command.output_file, flags, 0o644)
            except OSError as exc:
                _report("open output", exc)
                return None
            stdout = files.enter_context(os.fdopen(fd, "wb"))
        if piped:
            stdout = subprocess.PIPE

        if not command.argv:
            sys.stderr.write("execvp: empty command\n")
            return None
        try:
            return subprocess.Popen(command.argv, stdin=stdin, stdout=stdout)
        except OSError as exc:
            _report("execvp", exc)
            return None


def execute_pipeline(commands: Sequence[Command]) -> list[int]:
    """Run the commands with each one's output piped into the next.

    Returns the exit status of every stage in order; a stage that could not
    be started counts as status 1, and the stage after it reads nothing.
    """
    processes: list[subprocess.Popen | None] = []
    upstream: _Source = None
    last = len(commands) - 1
    for index, command in enumerate(commands):
        piped = index < last
        process = _launch(command, upstream, piped)
        if upstream is not None and upstream != subprocess.DEVNULL:
            upstream.close()
        if not piped:
            upstream = None
        elif process is None:
            upstream = subprocess.DEVNULL
        else:
            upstream = process.stdout
        processes.append(process)
    return [1 if process is None else process.wait() for process in processes]