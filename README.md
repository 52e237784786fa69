# contestkit

A small toolkit for writing and checking competitive-programming solutions
in Python. It has no dependencies outside the standard library.

## Modules

- `contestkit.reader.Input` — a buffered reader over a binary stream (or
  over `bytes` directly). It offers `get`, `peek`, `next_token`,
  `read_word`, `read_line`, `read_char`, `read_chars`, `read_int`,
  `read_ints(count)`, `read_int_pairs(count)`, `read_int_list` (a length
  followed by that many integers), `is_exhausted` and `is_empty` (which
  skips trailing whitespace). A `\r\n` pair or a lone `\r` is read as `\n`.
  Asking for a word or character past the end raises
  `InputExhaustedError`; a token that is not an integer makes `read_int`
  raise `ValueError`.
- `contestkit.writer.Output` — a writer that buffers up to 4096 bytes
  before writing to its stream, with `print`, `println`, `print_iter`
  (space separated), `print_per_line`, `put` (one byte), `write` (raw
  bytes) and `flush`. With `auto_flush=True` every `write` is flushed at
  once. `format_value` decides how values look: strings as they are,
  integers in decimal, lists and tuples space separated, `None` as `-1`;
  booleans and other types raise `TypeError`.
- `contestkit.task_types` — `TestType` (`SINGLE`, `MULTI_NUMBER`: a count
  followed by that many cases, `MULTI_EOF`: cases until end of input) and
  `TaskType` (`CLASSIC`, `INTERACTIVE`), plus `run_task`, which calls a
  `solve(input, output, test_case, pre_calc)` function for each case,
  flushes the output and returns whether a classic task consumed all of
  its input (interactive tasks always return `True`).
- `contestkit.parallel` — `run_parallel` reads a case count and runs each
  case on a worker thread with its own output buffer. Each case gets a
  guard over the shared input and holds it until it calls `release` (or
  returns); with `do_parallel` the next case starts reading as soon as the
  previous one has released the input. Outputs are written in case order,
  and progress lines go to standard error. `run_numbered_cases` runs a
  `solve` function this way, adds a `Case #i:` line after each case's
  output, and flushes.
- `contestkit.tester` — a local judge. `check(expected, actual)` compares
  two outputs token by token and raises `MismatchError` describing the
  first difference. `run_tests(directory, run, time_limit, out)` runs a
  solution over every `*.in` file in a directory in name order, compares
  with the matching `*.out` file when there is one, prints a coloured
  report and returns a list of `TestResult` with a `Verdict` (`OK`,
  `WRONG_ANSWER`, `TIME_LIMIT`, `RUNTIME_ERROR`). The time limit is in
  milliseconds. `run_single` runs the solution once on standard input and
  output; `run_main` does that when `single` is among its arguments, and
  otherwise runs the tests and returns whether all passed.
- `contestkit.sources` — `stdin_input`, `stdout_output`,
  `open_input_file`, `open_output_file`, and `latest_matching_file`, which
  returns the file in a directory whose name matches a regular expression
  and was accessed most recently (ties go to the first name in order;
  `FileNotFoundError` if none matches).
- `contestkit.leetcode` — `InputType` (`ARRAY`, `GRID`, `STRING`,
  `INTEGER`), the parsers `parse_array`, `parse_grid` and `parse_string`
  for arguments written like `[1,3,4]`, `[[1,2],[3,4]]` and `"abc"`,
  `read_argument`, and `run_leetcode`, which calls a function on the
  parsed argument and prints its result.
- `contestkit.solutions` — worked solutions: `solve_123233` / `run_123233`
  (see the command below), `echo_line` / `run_practice` (prints the first
  input line back), and `run_advent`, which calls a `solve(input, output)`
  function once over the whole input.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Writing a solution

```python
from contestkit.sources import stdin_input, stdout_output
from contestkit.task_types import TaskType, TestType, run_task


def solve(input, out, test_case, data):
    a = input.read_int()
    b = input.read_int()
    out.println(a + b)


run_task(stdin_input(), stdout_output(), solve,
         TestType.MULTI_NUMBER, TaskType.CLASSIC, None)
```

`solve` receives the reader, the writer, the 1-based number of the current
case and the shared precomputed data.

## Checking a solution locally

Put test files such as `1.in` / `1.out` in a directory and call
`run_tests` with that directory and a function that runs your solution on
an `Input` and an `Output` and returns whether the input was consumed:

```python
from contestkit.solutions import run_123233
from contestkit.tester import run_tests

results = run_tests("tests/samples", run_123233, time_limit=2000)
```

Each test prints its input, the expected and actual output, the elapsed
time and a verdict; a summary line follows.

## Command

The package installs one command, which runs the bundled sample solution.
It reads one integer and prints `Yes` if its six lowest decimal digits
(zero padded) are exactly one `1`, two `2`s and three `3`s, otherwise `No`:

```
echo 123233 | contestkit
```

## What it does not do

contestkit does not create task directories or solution files, and does
not download problem statements or sample tests: sample `*.in` / `*.out`
files have to be put in place by hand before `run_tests` can use them.