"""Read a single argument in the textual style of online judges and call a function on it."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from contestkit.reader import Input
from contestkit.writer import Output


class InputType(Enum):
    """The shape of the single argument on the input line."""

    ARRAY = "array"  # [1,3,4,5]
    GRID = "grid"  # [[1,3,2],[4,5,3]]
    STRING = "string"  # "abcde"
    INTEGER = "integer"  # 123


def parse_array(line: str) -> list[int]:
    """Parse ``[1, 3, 4]`` into a list of integers."""
    compact = line.replace(" ", "")
    return [int(item) for item in compact[1:-1].split(",")]


def parse_grid(line: str) -> list[list[int]]:
    """Parse ``[[1,2],[3,4]]`` into a list of integer rows."""
    compact = line.replace(" ", "")
    return [
        [int(item) for item in row.replace("[", "").replace("]", "").split(",")]
        for row in compact.split("],[")
    ]


def parse_string(line: str) -> str:
    """Drop the double quotes around (and inside) a quoted string."""
    return line.replace('"', "")


def read_argument(input: Input, input_type: InputType) -> Any:
    """Read one argument of the given shape from the input."""
    if input_type is InputType.ARRAY:
        return parse_array(input.read_line())
    if input_type is InputType.GRID:
        return parse_grid(input.read_line())
    if input_type is InputType.STRING:
        return parse_string(input.read_line())
    return input.read_int()


def run_leetcode(
    input: Input,
    output: Output,
    function: Callable[[Any], Any],
    input_type: InputType = InputType.GRID,
) -> bool:
    """Call ``function`` on the parsed argument and print its result.

    Returns whether the input was fully consumed.
    """
    output.println(function(read_argument(input, input_type)))
    output.flush()
    return input.is_empty()