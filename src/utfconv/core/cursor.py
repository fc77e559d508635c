"""Immutable byte cursor and the fallible UTF-8 decode step.

Implements the immutable cursor pattern over a borrowed byte range.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - End of range is a state (has_next), not a return value
    - Every advance() returns NEW cursor
    - decode_at() returns a tagged result and never raises for malformed input
    - Errors carry integer offsets, never the cursor or the source
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Self

from utfconv.constants import MAX_CODE_POINT
from utfconv.diagnostics import (
    CodePointRangeError,
    Diagnostic,
    DiagnosticCode,
    ErrorKind,
    ErrorTemplate,
    PositionedError,
    Utf8DecodeError,
)
from utfconv.sources import ByteSource

from .header import classify_header, fold_trailing_byte, is_trailing_byte

__all__ = ["ByteCursor", "DecodeFailure", "DecodeResult", "decode_at"]


@dataclass(frozen=True, slots=True, eq=False)
class ByteCursor:
    """Immutable position inside a borrowed byte range.

    The cursor never copies or mutates the source. Two cursors are equal when
    they view the same source object over the same window at the same offset.

    Example:
        >>> cursor = ByteCursor(b"\\xc2\\x80A", 0, 3)
        >>> cursor.peek()
        194
        >>> cursor.remaining()
        3
        >>> cursor.advance(2).peek()
        65
        >>> cursor.pos  # Original unchanged
        0
    """

    source: Sequence[int]
    pos: int
    end: int

    def __post_init__(self) -> None:
        """Validate window bounds.

        Raises:
            ValueError: If 0 <= pos <= end <= len(source) does not hold
        """
        if not 0 <= self.pos <= self.end <= len(self.source):
            msg = (
                f"Invalid cursor window: pos={self.pos}, end={self.end}, "
                f"source length={len(self.source)}"
            )
            raise ValueError(msg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ByteCursor):
            return NotImplemented
        return (
            self.source is other.source
            and self.pos == other.pos
            and self.end == other.end
        )

    def __hash__(self) -> int:
        return hash((id(self.source), self.pos, self.end))

    @property
    def position(self) -> int:
        """Current offset into the source."""
        return self.pos

    def has_next(self) -> bool:
        """Check whether at least one byte remains before end."""
        return self.pos < self.end

    def remaining(self) -> int:
        """Bytes left between the current position and end."""
        return self.end - self.pos

    def peek(self, offset: int = 0) -> int:
        """Read the byte at pos + offset without advancing.

        Raises:
            EOFError: If pos + offset is at or beyond end
        """
        target = self.pos + offset
        if target >= self.end:
            msg = f"Unexpected end of input at offset {target}"
            raise EOFError(msg)
        return self.source[target]

    def advance(self, count: int = 1) -> Self:
        """Return new cursor advanced by count bytes, clamped to end."""
        return type(self)(self.source, min(self.pos + count, self.end), self.end)


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """One successfully decoded code point.

    Attributes:
        code_point: Decoded value in [0, 0x10FFFF]
        length: Bytes consumed (1-4)
    """

    code_point: int
    length: int


@dataclass(frozen=True, slots=True)
class DecodeFailure:
    """Tagged decode error.

    Attributes:
        diagnostic: Error record with kind and source offset
    """

    diagnostic: Diagnostic

    @property
    def kind(self) -> ErrorKind:
        """Failure kind."""
        return self.diagnostic.kind

    @property
    def position(self) -> int:
        """Source byte offset of the failure."""
        span = self.diagnostic.span
        return span.start if span is not None else 0

    def to_exception(self) -> PositionedError:
        """Build the exception reporting this failure."""
        if self.diagnostic.code is DiagnosticCode.CODE_POINT_OUT_OF_RANGE:
            return CodePointRangeError(self.diagnostic)
        return Utf8DecodeError(self.diagnostic)


def decode_at(cursor: ByteSource) -> DecodeResult | DecodeFailure:
    """Decode exactly one code point at the cursor.

    Classifies the header, checks that the whole sequence fits before end,
    then folds in each trailing byte. Pure function of the cursor: calling it
    twice on the same cursor gives equal results.

    Args:
        cursor: ByteSource positioned on a header byte (usually a ByteCursor)

    Returns:
        DecodeResult on success, DecodeFailure for malformed input

    Raises:
        EOFError: If the cursor is already at end

    Example:
        >>> decode_at(ByteCursor(b"\\xe0\\xa0\\x80", 0, 3))
        DecodeResult(code_point=2048, length=3)
        >>> decode_at(ByteCursor(b"\\xc2\\xff", 0, 2)).position
        1
    """
    header = cursor.peek()
    info = classify_header(header)
    if info is None:
        return DecodeFailure(ErrorTemplate.invalid_header(cursor.position, header))

    available = cursor.remaining()
    if info.length > available:
        return DecodeFailure(
            ErrorTemplate.truncated_sequence(cursor.position, info.length, available)
        )

    code_point = info.seed
    for offset in range(1, info.length):
        byte = cursor.peek(offset)
        if not is_trailing_byte(byte):
            return DecodeFailure(
                ErrorTemplate.invalid_trailing_byte(cursor.position + offset, byte)
            )
        code_point = fold_trailing_byte(code_point, byte)

    # F4 90.. through F7 BF.. are well-formed by header shape but exceed Unicode
    if code_point > MAX_CODE_POINT:
        return DecodeFailure(
            ErrorTemplate.code_point_out_of_range(cursor.position, code_point)
        )

    return DecodeResult(code_point, info.length)
