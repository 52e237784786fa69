"""Run a solution against sample tests and report verdicts."""

from __future__ import annotations

import io
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, TextIO

from contestkit.reader import Input
from contestkit.writer import Output

Run = Callable[[Input, Output], bool]

BLUE = "\x1b[34m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
RESET = "\x1b[0m"
SEPARATOR = "====================================================="


class MismatchError(Exception):
    """Raised when actual output does not match the expected tokens."""


class Verdict(Enum):
    OK = "OK"
    WRONG_ANSWER = "Wrong Answer"
    TIME_LIMIT = "Time Limit"
    RUNTIME_ERROR = "RuntimeError"


@dataclass
class TestResult:
    """Outcome of running one sample test."""

    __test__ = False

    name: str
    verdict: Verdict
    elapsed: float = 0.0
    exhausted: bool = True
    detail: str = ""
    output: bytes = b""

    @property
    def passed(self) -> bool:
        return self.verdict is Verdict.OK


def _as_bytes(data: bytes | str) -> bytes:
    return data.encode("utf-8") if isinstance(data, str) else bytes(data)


def check(expected: bytes | str, actual: bytes | str) -> None:
    """Compare two outputs token by token, ignoring whitespace layout."""
    expected_input = Input(_as_bytes(expected))
    actual_input = Input(_as_bytes(actual))
    count = 0
    while True:
        expected_token = expected_input.next_token()
        actual_token = actual_input.next_token()
        if expected_token != actual_token:
            if expected_token is None:
                raise MismatchError(f"Expected has only {count} tokens")
            if actual_token is None:
                raise MismatchError(f"Actual has only {count} tokens")
            raise MismatchError(
                f"Token #{count} differs, "
                f"expected {expected_token.decode('utf-8', errors='replace')}, "
                f"actual {actual_token.decode('utf-8', errors='replace')}"
            )
        count += 1
        if actual_token is None:
            return


def run_single(
    run: Run,
    stdin: BinaryIO | None = None,
    stdout: BinaryIO | None = None,
) -> bool:
    """Run the solution once on standard input and output."""
    source = stdin if stdin is not None else sys.stdin.buffer
    sink = stdout if stdout is not None else sys.stdout.buffer
    return run(Input(source), Output(sink))


def _read_optional(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def run_tests(
    directory: str | Path,
    run: Run,
    time_limit: int = 2000,
    out: TextIO | None = None,
) -> list[TestResult]:
    """Run every ``*.in`` file in ``directory`` and print a coloured report.

    ``time_limit`` is in milliseconds. A matching ``*.out`` file, when
    present, holds the expected answer.
    """
    stream = out if out is not None else sys.stdout

    def say(text: str = "") -> None:
        print(text, file=stream)

    results: list[TestResult] = []
    for path in sorted(Path(directory).iterdir()):
        if not path.is_file() or path.suffix != ".in":
            continue
        say(SEPARATOR)
        name = path.name[:-3]
        say(f"{BLUE}Test {name}{RESET}")
        say(f"{BLUE}Input:{RESET}")
        say(path.read_text(encoding="utf-8"))
        expected = _read_optional(path.with_name(f"{name}.out"))
        say(f"{BLUE}Expected:{RESET}")
        say(f"{YELLOW}Not provided{RESET}" if expected is None else expected)
        say(f"{BLUE}Output:{RESET}")
        try:
            buffer = io.BytesIO()
            with path.open("rb") as handle:
                started = time.perf_counter()
                exhausted = run(Input(handle), Output(buffer))
                elapsed = time.perf_counter() - started
            produced = buffer.getvalue()
            say(produced.decode("utf-8", errors="replace"))
        except Exception as exc:
            detail = f"RuntimeError ({str(exc)!r})"
            say(f"{BLUE}Verdict: {RED}{detail}{RESET}")
            results.append(TestResult(name, Verdict.RUNTIME_ERROR, detail=detail))
            continue

        say(f"{BLUE}Time elapsed: {int(elapsed * 1000) / 1000:.3f}s{RESET}")
        if not exhausted:
            say(f"{RED}Input not exhausted{RESET}")
        result = TestResult(
            name, Verdict.OK, elapsed, bool(exhausted), output=produced
        )
        if expected is not None:
            try:
                check(expected, produced)
            except MismatchError as err:
                result.verdict = Verdict.WRONG_ANSWER
                result.detail = str(err)
                say(f"{BLUE}Verdict: {RED}Wrong Answer ({err}){RESET}")
                results.append(result)
                continue
        if elapsed * 1000 > time_limit:
            result.verdict = Verdict.TIME_LIMIT
            say(f"{BLUE}Verdict: {RED}Time Limit{RESET}")
        else:
            say(f"{BLUE}Verdict: {GREEN}OK{RESET}")
        results.append(result)

    failed = sum(not result.passed for result in results)
    if failed == 0:
        say(f"{BLUE}All {GREEN}{len(results)}{BLUE} tests passed{RESET}")
    else:
        say(f"{RED}{failed}/{len(results)}{BLUE} tests failed{RESET}")
    return results


def run_main(
    run: Run,
    directory: str | Path,
    time_limit: int = 2000,
    argv: Sequence[str] | None = None,
) -> bool:
    """Run once on standard streams if ``single`` is given, else run the samples."""
    args = list(sys.argv[1:] if argv is None else argv)
    if "single" in args:
        return run_single(run)
    return all(result.passed for result in run_tests(directory, run, time_limit))