"""utfconv exception hierarchy with structured diagnostics.

All positioned exceptions store a Diagnostic carrying the failure kind and
an integer position snapshot. No exception keeps a reference to a live
iterator or to the source buffer.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorKind


class UnicodeConversionError(ValueError):
    """Base exception for all utfconv errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize UnicodeConversionError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PositionedError(UnicodeConversionError):
    """Failure reported with the exact offending position.

    Attributes:
        kind: Failure kind
        position: Offset at which the failure was detected
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        """Initialize PositionedError.

        Args:
            diagnostic: Diagnostic with a span

        Raises:
            ValueError: If the diagnostic carries no span
        """
        if diagnostic.span is None:
            msg = f"{type(self).__name__} requires a positioned diagnostic"
            raise ValueError(msg)
        super().__init__(diagnostic)
        self.diagnostic: Diagnostic = diagnostic
        self.kind: ErrorKind = diagnostic.kind
        self.position: int = diagnostic.span.start

    @property
    def message(self) -> str:
        """Human-readable description without location decoration."""
        return self.diagnostic.message


class Utf8DecodeError(PositionedError):
    """Malformed UTF-8 input.

    Position is the byte offset into the source: the header byte for
    invalid_header and truncated_sequence, the first bad byte for
    invalid_trailing_byte.
    """


class CodePointRangeError(PositionedError):
    """Code point above U+10FFFF.

    Position is the destination unit offset when raised while encoding,
    the code-point index when raised while sizing, and the header byte
    offset when a decoded UTF-8 sequence exceeds the Unicode range.
    """
