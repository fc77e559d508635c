"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import ByteSpan, Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def invalid_header(position: int, byte: int) -> Diagnostic:
        """Byte cannot start a UTF-8 sequence.

        Args:
            position: Byte offset of the header
            byte: The offending header byte

        Returns:
            Diagnostic for INVALID_HEADER
        """
        if 0x80 <= byte <= 0xBF:
            msg = f"Continuation byte 0x{byte:02X} used as header"
        else:
            msg = f"Invalid header byte 0x{byte:02X}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_HEADER,
            message=msg,
            span=ByteSpan(position, position + 1),
            hint="Header bytes must be 0x00-0x7F or 0xC0-0xF7",
            offending_value=byte,
        )

    @staticmethod
    def truncated_sequence(position: int, required: int, available: int) -> Diagnostic:
        """Sequence extends past the end of the source.

        Args:
            position: Byte offset of the header
            required: Total sequence length implied by the header
            available: Bytes left from the header to the end of the range

        Returns:
            Diagnostic for TRUNCATED_SEQUENCE
        """
        msg = f"Sequence needs {required} bytes but only {available} remain"
        return Diagnostic(
            code=DiagnosticCode.TRUNCATED_SEQUENCE,
            message=msg,
            span=ByteSpan(position, position + available),
            hint="The source range ends in the middle of a multi-byte sequence",
        )

    @staticmethod
    def invalid_trailing_byte(position: int, byte: int) -> Diagnostic:
        """Trailing byte outside the continuation range.

        Args:
            position: Byte offset of the bad trailing byte
            byte: The offending byte

        Returns:
            Diagnostic for INVALID_TRAILING_BYTE
        """
        msg = f"Illegal trailing byte 0x{byte:02X}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_TRAILING_BYTE,
            message=msg,
            span=ByteSpan(position, position + 1),
            hint="Trailing bytes must lie in [0x80, 0xBF]",
            offending_value=byte,
        )

    @staticmethod
    def code_point_out_of_range(position: int, code_point: int) -> Diagnostic:
        """Code point above U+10FFFF.

        Args:
            position: Offset of the failure (destination, index or source)
            code_point: The offending value

        Returns:
            Diagnostic for CODE_POINT_OUT_OF_RANGE
        """
        msg = f"Code point 0x{code_point:X} is out of UTF-16 range"
        return Diagnostic(
            code=DiagnosticCode.CODE_POINT_OUT_OF_RANGE,
            message=msg,
            span=ByteSpan(position, position + 1),
            hint="Code points must lie in [0, 0x10FFFF]",
            offending_value=code_point,
        )
