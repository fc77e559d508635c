"""Diagnostic codes and data structures.

Defines failure kinds, error codes, byte spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "ByteSpan",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorKind",
]


class ErrorKind(StrEnum):
    """Failure kind carried by every positioned error.

    Inherits from ``StrEnum`` so that ``str(kind)`` and direct string
    comparisons work without accessing ``.value``; log aggregation receives
    plain strings (``"invalid_header"``) rather than the ``"ErrorKind.X"``
    repr that a plain ``Enum`` would produce.

    Kinds:
        INVALID_HEADER: Continuation byte used as header, or a header >= 0xF8
        TRUNCATED_SEQUENCE: Declared trailing-byte count exceeds remaining input
        INVALID_TRAILING_BYTE: Trailing byte outside [0x80, 0xBF]
        CODE_POINT_OUT_OF_RANGE: Code point above U+10FFFF
    """

    INVALID_HEADER = "invalid_header"
    TRUNCATED_SEQUENCE = "truncated_sequence"
    INVALID_TRAILING_BYTE = "invalid_trailing_byte"
    CODE_POINT_OUT_OF_RANGE = "code_point_out_of_range"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Decode errors (malformed UTF-8 input)
        2000-2999: Encode errors (code points UTF-16 cannot represent)
    """

    # Decode errors (1000-1999)
    INVALID_HEADER = 1001
    TRUNCATED_SEQUENCE = 1002
    INVALID_TRAILING_BYTE = 1003

    # Encode errors (2000-2999)
    CODE_POINT_OUT_OF_RANGE = 2001

    @property
    def kind(self) -> ErrorKind:
        """Failure kind this code reports."""
        return ErrorKind(self.name.lower())


@dataclass(frozen=True, slots=True)
class ByteSpan:
    """Offsets of the offending unit(s) for error reporting.

    Note:
        Offsets count units of the sequence the error refers to: bytes for
        decode errors, UTF-16 units or code-point indices for range errors.

    Attributes:
        start: Starting offset (0-indexed)
        end: Ending offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate ByteSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"ByteSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"ByteSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    The error record of a failed decode or encode step: a failure kind, the
    position at which it was detected, and a human-readable message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Offsets of the offending unit(s) (None when not positioned)
        hint: Suggestion for fixing the error
        offending_value: Byte or code point that caused the failure
        severity: Always "error"; every conversion failure is terminal
    """

    code: DiagnosticCode
    message: str
    span: ByteSpan | None = None
    hint: str | None = None
    offending_value: int | None = None
    severity: Literal["error"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def kind(self) -> ErrorKind:
        """Failure kind derived from the code."""
        return self.code.kind

    @property
    def position(self) -> int | None:
        """Start offset of the span, or None."""
        return self.span.start if self.span is not None else None

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[INVALID_TRAILING_BYTE]: Illegal trailing byte 0xFF
              --> offset 1
              = help: Trailing bytes must lie in [0x80, 0xBF]

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
