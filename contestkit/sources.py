"""Open the input and output a solution reads from and writes to."""

from __future__ import annotations

import os
import re
import sys
from pathlib import Path

from contestkit.reader import Input
from contestkit.writer import Output


def latest_matching_file(pattern: str, directory: str | Path = ".") -> Path:
    """Return the file in ``directory`` whose name matches ``pattern`` and was accessed last.

    When several files share the latest access time, the first one in name
    order wins. Raises FileNotFoundError if no file name matches.
    """
    regex = re.compile(pattern)
    best: Path | None = None
    best_accessed: float | None = None
    for path in sorted(Path(directory).iterdir()):
        if not path.is_file() or not regex.search(path.name):
            continue
        accessed = os.stat(path).st_atime
        if best_accessed is None or accessed > best_accessed:
            best = path
            best_accessed = accessed
    if best is None:
        raise FileNotFoundError(f"no file in {directory} matches {pattern!r}")
    return best


def open_input_file(path: str | Path) -> Input:
    """Read input from the file at ``path``."""
    return Input(open(path, "rb"))


def open_output_file(path: str | Path) -> Output:
    """Write output to the file at ``path``, creating or truncating it."""
    return Output(open(path, "wb"))


def stdin_input() -> Input:
    """Read input from standard input."""
    return Input(sys.stdin.buffer)


def stdout_output() -> Output:
    """Write output to standard output."""
    return Output(sys.stdout.buffer)