"""Token input, buffered output, task runners and a local test harness for contest solutions."""

__version__ = "0.1.0"

__all__ = [
    "reader",
    "writer",
    "task_types",
    "parallel",
    "tester",
    "sources",
    "leetcode",
    "solutions",
]