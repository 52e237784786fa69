"""How a task's input is split into test cases, and the driver that runs them."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from contestkit.reader import Input
from contestkit.writer import Output

Solve = Callable[[Input, Output, int, Any], None]


class TestType(Enum):
    """How many test cases the input holds."""

    __test__ = False

    SINGLE = "single"
    MULTI_NUMBER = "multi_number"
    MULTI_EOF = "multi_eof"


class TaskType(Enum):
    """Whether the whole input is given up front or exchanged with a judge."""

    CLASSIC = "classic"
    INTERACTIVE = "interactive"


def run_task(
    input: Input,
    output: Output,
    solve: Solve,
    test_type: TestType = TestType.SINGLE,
    task_type: TaskType = TaskType.CLASSIC,
    pre_calc: Any = None,
) -> bool:
    """Run solve for every test case and flush the output.

    Returns whether the input was fully consumed; interactive tasks always
    report True.
    """
    if test_type is TestType.SINGLE:
        solve(input, output, 1, pre_calc)
    elif test_type is TestType.MULTI_NUMBER:
        for case in range(1, input.read_int() + 1):
            solve(input, output, case, pre_calc)
    else:
        case = 1
        while input.peek() is not None:
            solve(input, output, case, pre_calc)
            case += 1
    output.flush()
    if task_type is TaskType.CLASSIC:
        return input.is_empty()
    return True