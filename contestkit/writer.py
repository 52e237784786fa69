"""Buffered writer of space- and line-separated values."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, BinaryIO

DEFAULT_BUF_SIZE = 4096


def format_value(value: Any) -> str:
    """Render a value as text: sequences are space separated, None is -1."""
    if value is None:
        return "-1"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        raise TypeError("cannot format a bool")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (list, tuple)):
        return " ".join(format_value(item) for item in value)
    raise TypeError(f"cannot format value of type {type(value).__name__}")


class Output:
    """Collects output in a fixed-size buffer and writes it to a binary stream."""

    def __init__(self, stream: BinaryIO, auto_flush: bool = False) -> None:
        self._stream = stream
        self._buf = bytearray()
        self.auto_flush = auto_flush

    def flush(self) -> None:
        if self._buf:
            self._stream.write(bytes(self._buf))
            self._buf.clear()
            self._stream.flush()

    def print(self, value: Any) -> None:
        self.write(format_value(value).encode("utf-8"))

    def println(self, value: Any) -> None:
        self.print(value)
        self.put(ord("\n"))

    def put(self, byte: int) -> None:
        if not 0 <= byte <= 255:
            raise ValueError(f"not a byte: {byte}")
        self._buf.append(byte)
        if len(self._buf) == DEFAULT_BUF_SIZE:
            self.flush()

    def maybe_flush(self) -> None:
        if self.auto_flush:
            self.flush()

    def print_per_line(self, items: Iterable[Any]) -> None:
        for item in items:
            self.print(item)
            self.put(ord("\n"))

    def print_iter(self, items: Iterable[Any]) -> None:
        for index, item in enumerate(items):
            if index:
                self.put(ord(" "))
            self.print(item)

    def write(self, data: bytes) -> int:
        """Buffer raw bytes, flushing whenever the buffer fills."""
        view = memoryview(data)
        while view:
            room = DEFAULT_BUF_SIZE - len(self._buf)
            self._buf += view[:room]
            view = view[room:]
            if len(self._buf) == DEFAULT_BUF_SIZE:
                self.flush()
        self.maybe_flush()
        return len(data)