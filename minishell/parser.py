"""Split command lines into words and pipelines of commands."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

MAX_COMMANDS = 10

_SPACE = " \t\n\v\f\r"
_QUOTES = "\"'"
_OPERATORS = "<>|"
_ESCAPE = re.compile(r"\\(.)", re.DOTALL)
_FILE_NAME = re.compile(r"[^ \t]+")


@dataclass
class Command:
    """One stage of a pipeline."""

    argv: list[str] = field(default_factory=list)
    input_file: str | None = None
    output_file: str | None = None
    append: bool = False


class ParseError(ValueError):
    """Raised when a command line cannot be parsed."""


def _scan_quoted(text: str, pos: int, quote: str) -> tuple[str, int]:
    """Read a quoted word starting after its opening quote.

    Backslashes protect the following character from ending the word but
    are kept in it. An unterminated quote runs to the end of the text.
    """
    start = pos
    end = len(text)
    while pos < end and text[pos] != quote:
        pos += 2 if text[pos] == "\\" and pos + 1 < end else 1
    word = text[start:pos]
    if pos < end:
        pos += 1
    return word, pos


def tokenize(line: str) -> list[str]:
    """Split a line into words, honouring quotes and backslash escapes."""
    words: list[str] = []
    pos, end = 0, len(line)
    while True:
        while pos < end and line[pos] in _SPACE:
            pos += 1
        if pos >= end:
            return words
        char = line[pos]
        if char in _QUOTES:
            word, pos = _scan_quoted(line, pos + 1, char)
        else:
            start = pos
            while pos < end and line[pos] not in _SPACE:
                pos += 2 if line[pos] == "\\" and pos + 1 < end else 1
            word = _ESCAPE.sub(r"\1", line[start:pos])
        words.append(word)


def split_args(text: str) -> list[str]:
    """Split one pipeline stage into arguments.

    Quoted words are taken verbatim; bare words end at whitespace or at
    one of ``<``, ``>`` and ``|``, which are not themselves arguments.
    """
    args: list[str] = []
    pos, end = 0, len(text)
    while True:
        while pos < end and (text[pos] in _SPACE or text[pos] in _OPERATORS):
            pos += 1
        if pos >= end:
            return args
        char = text[pos]
        if char in _QUOTES:
            word, pos = _scan_quoted(text, pos + 1, char)
        else:
            start = pos
            while pos < end and text[pos] not in _SPACE and text[pos] not in _OPERATORS:
                pos += 1
            word = text[start:pos]
        args.append(word)


def _parse_segment(segment: str) -> Command:
    match = re.search("[<>]", segment)
    if match is None:
        return Command(argv=split_args(segment))

    command = Command(argv=split_args(segment[: match.start()]))
    operator = match.group()
    rest = segment[match.end():]
    if operator == ">" and rest.startswith(">"):
        command.append = True
        rest = rest[1:]
    rest = rest.lstrip(_SPACE)
    if not rest:
        raise ParseError(f"syntax error: expected file after {operator}")

    # The file name ends at a space or tab; whatever follows it is dropped.
    filename = _FILE_NAME.match(rest).group()
    if operator == "<":
        command.input_file = filename
    else:
        command.output_file = filename
    return command


def parse_pipeline(line: str) -> list[Command]:
    """Parse a ``|``-separated line into at most ten commands.

    Empty stages between consecutive bars are skipped, and stages beyond
    the tenth are ignored. Each stage may carry one redirection.
    """
    segments = [segment for segment in line.split("|") if segment]
    return [_parse_segment(segment) for segment in segments[:MAX_COMMANDS]]