"""Lazy UTF-8 decoding.

Utf8Range is a restartable, forward-only, finite view of the code points
encoded in a borrowed byte range. Iterating it decodes one code point per
step; nothing is buffered beyond the cursor.

Python 3.13+.
"""

import logging
from collections.abc import Iterator
from typing import Self

from utfconv.core import ByteCursor, DecodeFailure, DecodeResult, decode_at
from utfconv.sinks import Sink, as_sink
from utfconv.sources import as_byte_view, resolve_window, utf8_range_of

__all__ = ["Utf8Iterator", "Utf8Range", "copy_to_code_points", "decode_range"]

logger = logging.getLogger(__name__)


class Utf8Iterator(Iterator[int]):
    """Forward iterator over decoded code points.

    Every read re-decodes the sequence at the cursor, so peek() can be
    repeated any number of times without advancing and without side effects.
    Malformed input raises Utf8DecodeError (or CodePointRangeError) carrying
    the byte offset of the failure.

    Two iterators are equal iff their cursors are equal.

    Example:
        >>> it = Utf8Range(b"A\\xc2\\x80").begin()
        >>> it.peek(), it.peek()
        (65, 65)
        >>> next(it)
        65
        >>> it.position
        1
        >>> next(it)
        128
        >>> it.at_end
        True
    """

    __slots__ = ("_cursor",)

    def __init__(self, cursor: ByteCursor) -> None:
        self._cursor = cursor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Utf8Iterator):
            return NotImplemented
        return self._cursor == other._cursor

    def __hash__(self) -> int:
        return hash(self._cursor)

    def __repr__(self) -> str:
        return f"Utf8Iterator(position={self._cursor.pos}, end={self._cursor.end})"

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> int:
        if not self._cursor.has_next():
            raise StopIteration
        result = self._step()
        self._cursor = self._cursor.advance(result.length)
        return result.code_point

    @property
    def cursor(self) -> ByteCursor:
        """Immutable snapshot of the current position."""
        return self._cursor

    @property
    def position(self) -> int:
        """Byte offset of the next sequence."""
        return self._cursor.pos

    @property
    def at_end(self) -> bool:
        """True when no bytes remain."""
        return not self._cursor.has_next()

    def try_decode(self) -> DecodeResult | DecodeFailure:
        """Decode at the cursor without raising for malformed input.

        Raises:
            EOFError: If at end
        """
        return decode_at(self._cursor)

    def peek(self) -> int:
        """Decode the code point at the cursor without advancing.

        Raises:
            EOFError: If at end
            Utf8DecodeError: If the sequence at the cursor is malformed
            CodePointRangeError: If it decodes above U+10FFFF
        """
        return self._step().code_point

    def advance(self) -> Self:
        """Validate the sequence at the cursor and move past it.

        Returns:
            self, for chaining

        Raises:
            EOFError: If at end
            Utf8DecodeError: If the sequence at the cursor is malformed
        """
        result = self._step()
        self._cursor = self._cursor.advance(result.length)
        return self

    def copy(self) -> "Utf8Iterator":
        """Independent iterator at the same position."""
        return Utf8Iterator(self._cursor)

    def _step(self) -> DecodeResult:
        result = decode_at(self._cursor)
        if isinstance(result, DecodeFailure):
            raise result.to_exception()
        return result


class Utf8Range:
    """Lazy view of the code points in a byte range.

    The range borrows the source: bytes, bytearray, memoryview, or any
    buffer. Windows are given as [begin, end) byte offsets.

    Example:
        >>> list(Utf8Range(b"\\xf0\\x90\\x80\\x80"))
        [65536]
        >>> list(Utf8Range(b"xAy", 1, 2))
        [65]
    """

    __slots__ = ("_begin", "_end", "_source")

    def __init__(self, source: object, begin: int = 0, end: int | None = None) -> None:
        self._source = as_byte_view(source)
        self._begin, self._end = resolve_window(len(self._source), begin, end)

    def __iter__(self) -> Utf8Iterator:
        return self.begin()

    def __repr__(self) -> str:
        return f"Utf8Range(begin={self._begin}, end={self._end})"

    def __bool__(self) -> bool:
        return self._end > self._begin

    @property
    def source(self) -> object:
        """The borrowed byte view."""
        return self._source

    @property
    def start_offset(self) -> int:
        """Offset of the first byte in the source."""
        return self._begin

    @property
    def end_offset(self) -> int:
        """Offset one past the last byte in the source."""
        return self._end

    @property
    def byte_length(self) -> int:
        """Number of bytes in the window."""
        return self._end - self._begin

    def begin(self) -> Utf8Iterator:
        """Iterator positioned on the first sequence."""
        return Utf8Iterator(ByteCursor(self._source, self._begin, self._end))

    def end(self) -> Utf8Iterator:
        """Iterator equal to any exhausted iterator of this range."""
        return Utf8Iterator(ByteCursor(self._source, self._end, self._end))

    def window(self, begin: int = 0, end: int | None = None) -> "Utf8Range":
        """Sub-range with offsets relative to this range's start."""
        begin, end = resolve_window(self.byte_length, begin, end)
        return Utf8Range(self._source, self._begin + begin, self._begin + end)


def decode_range(source: object, begin: int = 0, end: int | None = None) -> Utf8Range:
    """Lazily decode source[begin:end] as UTF-8.

    Nothing is decoded until the result is iterated.

    Args:
        source: bytes-like UTF-8 input
        begin: First byte offset
        end: Offset one past the last byte (default: len(source))

    Returns:
        Utf8Range over the window
    """
    return Utf8Range(source, begin, end)


def copy_to_code_points(
    source: object, sink: Sink | object, begin: int = 0, end: int | None = None
) -> int:
    """Decode UTF-8 and write every code point to sink.

    On failure the exception propagates and any values already written
    must be discarded by the caller.

    Args:
        source: bytes-like UTF-8 input or a Utf8Range
        sink: Sink, list/array (appended), memoryview (indexed) or callable
        begin: First byte offset
        end: Offset one past the last byte

    Returns:
        Number of code points written

    Raises:
        Utf8DecodeError: On malformed input, with the failing byte offset
        CodePointRangeError: If a sequence decodes above U+10FFFF
    """
    code_points = utf8_range_of(source, begin, end)
    out = as_sink(sink)
    count = 0
    for code_point in code_points:
        out.put(code_point)
        count += 1
    logger.debug("Decoded %d code points from %d bytes", count, code_points.byte_length)
    return count
