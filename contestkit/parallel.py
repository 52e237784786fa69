"""Run numbered test cases on worker threads, keeping output in case order."""

from __future__ import annotations

import io
import os
import sys
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from contestkit.reader import Input
from contestkit.writer import Output


class _InputGuard:
    """Exclusive access to the shared input until ``release`` is called.

    Attribute access is forwarded to the wrapped input while the guard is
    held; afterwards it raises RuntimeError.
    """

    def __init__(self, input: Input, lock: threading.Lock) -> None:
        self._input = input
        self._lock = lock
        self._held = True

    @property
    def released(self) -> bool:
        return not self._held

    def release(self) -> None:
        """Give the input back so the next test case can start reading."""
        if self._held:
            self._held = False
            self._lock.release()

    def __enter__(self) -> _InputGuard:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __getattr__(self, name: str) -> Any:
        if self.__dict__.get("_held"):
            return getattr(self._input, name)
        raise RuntimeError("input used after it was released")


CaseRunner = Callable[[_InputGuard, Output, int, Any], None]


def run_parallel(
    input: Input,
    output: Output,
    do_parallel: bool,
    pre_calc: Any,
    run: CaseRunner,
) -> bool:
    """Read a case count, then run every case with its own output buffer.

    Each call of ``run`` gets a guard over the shared input that it holds
    until it calls ``release`` or returns. With ``do_parallel`` the next case
    starts as soon as the previous one has released the input; otherwise
    cases run one after another. Outputs are written in case order.
    Returns whether the input was fully consumed.
    """
    total = input.read_int()
    input_lock = threading.Lock()
    counter_lock = threading.Lock()
    remaining = total
    workers = max((os.cpu_count() or 1) - 1, 1)

    def work(case: int, started: threading.Event) -> bytes:
        nonlocal remaining
        input_lock.acquire()
        guard = _InputGuard(input, input_lock)
        started.set()
        buffer = io.BytesIO()
        case_output = Output(buffer)
        try:
            run(guard, case_output, case, pre_calc)
        finally:
            guard.release()
        with counter_lock:
            remaining -= 1
            left = remaining
        print(f"Test {case} done, {left} tests remaining", file=sys.stderr)
        case_output.flush()
        return buffer.getvalue()

    pending: list[Future[bytes]] = []
    with ThreadPoolExecutor(max_workers=workers) as pool:
        for case in range(1, total + 1):
            print(f"Test {case} started", file=sys.stderr)
            started = threading.Event()
            future = pool.submit(work, case, started)
            if do_parallel:
                started.wait()
                # Wait until the running case has finished reading its input.
                with input_lock:
                    pass
                pending.append(future)
            else:
                output.write(future.result())
        for future in pending:
            output.write(future.result())
    with input_lock:
        return input.is_empty()


def run_numbered_cases(
    input: Input,
    output: Output,
    solve: CaseRunner,
    pre_calc: Any = None,
    do_parallel: bool = True,
) -> bool:
    """Run ``solve`` for each case, then add a ``Case #i:`` line to its output."""

    def case_runner(guard: _InputGuard, out: Output, case: int, data: Any) -> None:
        solve(guard, out, case, data)
        guard.release()
        out.println(f"Case #{case}:")

    exhausted = run_parallel(input, output, do_parallel, pre_calc, case_runner)
    output.flush()
    return exhausted