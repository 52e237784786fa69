import io
import sys

import pytest

from contestkit.reader import Input
from contestkit.solutions import (
    echo_line,
    main,
    run_123233,
    run_advent,
    run_practice,
    solve_123233,
)
from contestkit.writer import Output


@pytest.mark.parametrize(
    "given, expected",
    [
        (b"123233\n", b"Yes\n"),
        (b"123234\n", b"No\n"),
        (b"323132\n", b"Yes\n"),
        (b"500000\n", b"No\n"),
    ],
)
def test_run_123233_samples(given, expected):
    sink = io.BytesIO()
    assert run_123233(Input(given), Output(sink)) is True
    assert sink.getvalue() == expected


def test_solve_123233_writes_one_line():
    sink = io.BytesIO()
    out = Output(sink)
    solve_123233(Input(b"323132"), out, 1, None)
    out.flush()
    assert sink.getvalue() == b"Yes\n"


def test_run_123233_reports_leftover_input():
    sink = io.BytesIO()
    assert run_123233(Input(b"123233\n42\n"), Output(sink)) is False
    assert sink.getvalue() == b"Yes\n"


def test_echo_line():
    sink = io.BytesIO()
    out = Output(sink)
    echo_line(Input(b"hello world\nnext\n"), out)
    out.flush()
    assert sink.getvalue() == b"hello world\n"


def test_run_practice_round_trip():
    sink = io.BytesIO()
    assert run_practice(Input(b"some text here\n"), Output(sink)) is True
    assert sink.getvalue() == b"some text here\n"


def test_run_advent_runs_solve_once():
    calls = []

    def solve(input, out):
        calls.append(input.read_word())
        out.println(calls[-1])

    sink = io.BytesIO()
    assert run_advent(Input(b"abc def"), Output(sink), solve) is False
    assert calls == ["abc"]
    assert sink.getvalue() == b"abc\n"


def test_main_uses_standard_streams(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"123233\n")))
    wrapper = io.TextIOWrapper(io.BytesIO())
    monkeypatch.setattr(sys, "stdout", wrapper)
    assert main([]) == 0
    assert wrapper.buffer.getvalue() == b"Yes\n"


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])