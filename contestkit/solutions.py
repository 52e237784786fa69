"""Worked solutions and the driver for single-function tasks."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from typing import Any

from contestkit.reader import Input
from contestkit.sources import stdin_input, stdout_output
from contestkit.task_types import TaskType, TestType, run_task
from contestkit.writer import Output

_TARGET_DIGITS = [1, 2, 2, 3, 3, 3]


def solve_123233(input: Input, out: Output, test_case: int, data: Any) -> None:
    """Print Yes if the six lowest digits are one 1, two 2s and three 3s."""
    n = input.read_int()
    digits = sorted(int(digit) for digit in f"{n % 1_000_000:06d}")
    out.println("Yes" if digits == _TARGET_DIGITS else "No")


def run_123233(input: Input, output: Output) -> bool:
    """Solve a single instance; returns whether the input was fully consumed."""
    return run_task(input, output, solve_123233, TestType.SINGLE, TaskType.CLASSIC)


def echo_line(input: Input, out: Output) -> None:
    """Print the first input line back."""
    out.println(input.read_line())


def run_practice(input: Input, output: Output) -> bool:
    return run_advent(input, output, echo_line)


def run_advent(
    input: Input, output: Output, solve: Callable[[Input, Output], None]
) -> bool:
    """Run ``solve`` once over the whole input and flush the output."""
    solve(input, output)
    output.flush()
    return input.is_empty()


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the task on standard input, writing to standard output."""
    parser = argparse.ArgumentParser(
        description="Check whether a six-digit number has digits 1, 2, 2, 3, 3, 3."
    )
    parser.parse_args(argv)
    run_123233(stdin_input(), stdout_output())
    return 0