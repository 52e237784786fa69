import io

import pytest

from contestkit.leetcode import (
    InputType,
    parse_array,
    parse_grid,
    parse_string,
    read_argument,
    run_leetcode,
)
from contestkit.reader import Input
from contestkit.writer import Output


def test_parse_array_with_spaces():
    assert parse_array("[1, 3, 4, 5]") == [1, 3, 4, 5]


def test_parse_array_rejects_non_numbers():
    with pytest.raises(ValueError):
        parse_array("[1,x]")


def test_parse_grid():
    assert parse_grid("[[1,3,2],[4,5,3]]") == [[1, 3, 2], [4, 5, 3]]


def test_parse_grid_single_row_with_spaces():
    assert parse_grid("[[7, -8]]") == [[7, -8]]


def test_parse_string():
    assert parse_string('"abcde"') == "abcde"


@pytest.mark.parametrize(
    "data, input_type, expected",
    [
        (b"[1,3,4,5]\n", InputType.ARRAY, [1, 3, 4, 5]),
        (b"[[1,3,2],[4,5,3]]\n", InputType.GRID, [[1, 3, 2], [4, 5, 3]]),
        (b'"abcde"\n', InputType.STRING, "abcde"),
        (b"123\n", InputType.INTEGER, 123),
    ],
)
def test_read_argument(data, input_type, expected):
    assert read_argument(Input(data), input_type) == expected


def test_run_leetcode_array_identity():
    sink = io.BytesIO()
    exhausted = run_leetcode(
        Input(b"[1,3,4,5]\n"), Output(sink), lambda values: values, InputType.ARRAY
    )
    assert exhausted is True
    assert sink.getvalue() == b"1 3 4 5\n"


def test_run_leetcode_defaults_to_grid():
    sink = io.BytesIO()
    seen = []

    def function(grid):
        seen.append(grid)
        return grid[0]

    run_leetcode(Input(b"[[1,3,2],[4,5,3]]\n"), Output(sink), function)
    assert seen == [[[1, 3, 2], [4, 5, 3]]]
    assert sink.getvalue() == b"1 3 2\n"


def test_run_leetcode_reports_leftover_input():
    sink = io.BytesIO()
    exhausted = run_leetcode(
        Input(b'"ab"\nextra\n'), Output(sink), str.upper, InputType.STRING
    )
    assert exhausted is False
    assert sink.getvalue() == b"AB\n"