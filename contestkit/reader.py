"""Buffered token reader over a binary stream."""

from __future__ import annotations

import io
import re
from typing import BinaryIO

DEFAULT_BUF_SIZE = 4096

# Bytes that count as whitespace when read as Latin-1 characters.
_WHITESPACE = frozenset(b"\t\n\x0b\x0c\r \x85\xa0")
_CR = ord("\r")
_LF = ord("\n")
_INTEGER = re.compile(r"[+-]?[0-9]+")


class InputExhaustedError(EOFError):
    """Raised when a value is requested but the input has no more tokens."""


class Input:
    """Reads bytes, tokens, lines and integers from a binary stream.

    A carriage return, alone or followed by a line feed, is reported as a
    single line feed.
    """

    def __init__(
        self,
        stream: BinaryIO | bytes | bytearray | memoryview,
        buf_size: int = DEFAULT_BUF_SIZE,
    ) -> None:
        if isinstance(stream, (bytes, bytearray, memoryview)):
            stream = io.BytesIO(bytes(stream))
        if buf_size <= 0:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buf_size = buf_size
        self._buf = b""
        self._at = 0

    def _refill(self) -> bool:
        if self._at == len(self._buf):
            self._buf = self._stream.read(self._buf_size) or b""
            self._at = 0
            return bool(self._buf)
        return True

    def get(self) -> int | None:
        """Consume and return the next byte, or None at end of input."""
        if not self._refill():
            return None
        byte = self._buf[self._at]
        self._at += 1
        if byte == _CR:
            if self._refill() and self._buf[self._at] == _LF:
                self._at += 1
            return _LF
        return byte

    def peek(self) -> int | None:
        """Return the next byte without consuming it, or None at end of input."""
        if not self._refill():
            return None
        byte = self._buf[self._at]
        return _LF if byte == _CR else byte

    def skip_whitespace(self) -> None:
        while (byte := self.peek()) is not None and byte in _WHITESPACE:
            self.get()

    def next_token(self) -> bytes | None:
        """Return the next whitespace-delimited token, or None if there is none."""
        self.skip_whitespace()
        token = bytearray()
        while (byte := self.get()) is not None and byte not in _WHITESPACE:
            token.append(byte)
        return bytes(token) if token else None

    def is_exhausted(self) -> bool:
        return self.peek() is None

    def is_empty(self) -> bool:
        """True if only whitespace remains; the whitespace is consumed."""
        self.skip_whitespace()
        return self.is_exhausted()

    def read_word(self) -> str:
        token = self.next_token()
        if token is None:
            raise InputExhaustedError("Input exhausted")
        return token.decode("utf-8", errors="replace")

    def read_line(self) -> str:
        """Read up to the end of the line; the line break is consumed, not returned."""
        line = bytearray()
        while (byte := self.get()) is not None and byte != _LF:
            line.append(byte)
        return line.decode("latin-1")

    def read_char(self) -> str:
        self.skip_whitespace()
        byte = self.get()
        if byte is None:
            raise InputExhaustedError("Input exhausted")
        return chr(byte)

    def read_chars(self) -> list[str]:
        return list(self.read_line())

    def read_int(self) -> int:
        word = self.read_word()
        if not _INTEGER.fullmatch(word):
            raise ValueError(f"invalid integer: {word!r}")
        return int(word)

    def read_ints(self, count: int) -> list[int]:
        return [self.read_int() for _ in range(count)]

    def read_int_pairs(self, count: int) -> list[tuple[int, int]]:
        return [(self.read_int(), self.read_int()) for _ in range(count)]

    def read_int_list(self) -> list[int]:
        """Read a length followed by that many integers."""
        return self.read_ints(self.read_int())