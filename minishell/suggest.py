"""Suggest executables on PATH whose names are close to a mistyped command."""

from __future__ import annotations

import os
import sys
from bisect import bisect_right
from collections.abc import Iterator
from typing import TextIO

MAX_SUGGESTIONS = 3
MAX_DISTANCE = 3


def levenshtein_distance(s1: str, s2: str) -> int:
    """Return the edit distance between two strings."""
    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, 1):
        current = [i]
        for j, c2 in enumerate(s2, 1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (c1 != c2),
                )
            )
        previous = current
    return previous[-1]


def _commands_in(directory: str) -> Iterator[str]:
    """Yield names of regular files and symbolic links in a directory."""
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    if entry.is_symlink() or entry.is_file(follow_symlinks=False):
                        yield entry.name
                except OSError:
                    continue
    except OSError:
        return


def find_suggestions(name: str, path: str | None = None) -> list[str]:
    """Return up to three commands on ``path`` closest to ``name``.

    ``path`` is a colon-separated directory list and defaults to ``$PATH``.
    Matching ignores case. Nothing is returned unless the best match is
    within an edit distance of three.
    """
    if path is None:
        path = os.environ.get("PATH")
    if path is None:
        return []

    target = name.lower()
    ranked: list[tuple[int, str]] = []
    for directory in filter(None, path.split(":")):
        for command in _commands_in(directory):
            score = levenshtein_distance(target, command.lower())
            index = bisect_right([s for s, _ in ranked], score)
            if index < MAX_SUGGESTIONS:
                ranked.insert(index, (score, command))
                del ranked[MAX_SUGGESTIONS:]

    if not ranked or ranked[0][0] > MAX_DISTANCE:
        return []
    return [command for _, command in ranked]


def suggest_commands(
    name: str, path: str | None = None, out: TextIO | None = None
) -> list[str]:
    """Print a "Did you mean" list for ``name`` and return the names shown."""
    stream = sys.stdout if out is None else out
    names = find_suggestions(name, path)
    if names:
        stream.write("\033[33mDid you mean:\n")
        for command in names:
            stream.write(f"  • {command}\n")
        stream.write("\033[0m")
    return names