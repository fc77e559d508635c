"""Tests for error kinds, diagnostics, exceptions and formatting."""

from __future__ import annotations

import json
import pickle

import pytest

from utfconv.diagnostics import (
    ByteSpan,
    CodePointRangeError,
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorKind,
    ErrorTemplate,
    OutputFormat,
    PositionedError,
    UnicodeConversionError,
    Utf8DecodeError,
)

# ============================================================================
# CODES AND KINDS
# ============================================================================


class TestDiagnosticCode:
    """Test code/kind mapping."""

    @pytest.mark.parametrize(
        ("code", "kind"),
        [
            (DiagnosticCode.INVALID_HEADER, ErrorKind.INVALID_HEADER),
            (DiagnosticCode.TRUNCATED_SEQUENCE, ErrorKind.TRUNCATED_SEQUENCE),
            (DiagnosticCode.INVALID_TRAILING_BYTE, ErrorKind.INVALID_TRAILING_BYTE),
            (DiagnosticCode.CODE_POINT_OUT_OF_RANGE, ErrorKind.CODE_POINT_OUT_OF_RANGE),
        ],
    )
    def test_every_code_has_a_kind(self, code: DiagnosticCode, kind: ErrorKind) -> None:
        """Each code maps to exactly one failure kind."""
        assert code.kind is kind

    def test_kinds_are_strings(self) -> None:
        """ErrorKind compares equal to its plain string value."""
        assert ErrorKind.INVALID_HEADER == "invalid_header"
        assert str(ErrorKind.CODE_POINT_OUT_OF_RANGE) == "code_point_out_of_range"


class TestByteSpan:
    """Test span validation."""

    def test_negative_start_rejected(self) -> None:
        """Offsets are never negative."""
        with pytest.raises(ValueError, match="must be >= 0"):
            ByteSpan(-1, 0)

    def test_reversed_span_rejected(self) -> None:
        """end must not precede start."""
        with pytest.raises(ValueError, match="must be >= start"):
            ByteSpan(3, 2)


# ============================================================================
# TEMPLATES
# ============================================================================


class TestErrorTemplate:
    """Test diagnostic construction."""

    def test_invalid_header_continuation(self) -> None:
        """Continuation headers get a specific message."""
        diagnostic = ErrorTemplate.invalid_header(4, 0x80)

        assert diagnostic.kind is ErrorKind.INVALID_HEADER
        assert diagnostic.position == 4
        assert diagnostic.offending_value == 0x80
        assert "Continuation byte 0x80" in diagnostic.message

    def test_invalid_header_legacy(self) -> None:
        """Legacy long-form headers are reported as invalid headers."""
        diagnostic = ErrorTemplate.invalid_header(0, 0xFC)

        assert diagnostic.message == "Invalid header byte 0xFC"

    def test_truncated_span_covers_remaining_bytes(self) -> None:
        """The truncated span runs to the end of input."""
        diagnostic = ErrorTemplate.truncated_sequence(2, 4, 3)

        assert diagnostic.span == ByteSpan(2, 5)
        assert "needs 4 bytes but only 3 remain" in diagnostic.message

    def test_code_point_out_of_range(self) -> None:
        """Range errors name the offending value in hex."""
        diagnostic = ErrorTemplate.code_point_out_of_range(0, 0x110000)

        assert diagnostic.message == "Code point 0x110000 is out of UTF-16 range"

    def test_every_template_is_an_error(self) -> None:
        """All failure kinds are terminal errors."""
        diagnostics = [
            ErrorTemplate.invalid_header(0, 0x80),
            ErrorTemplate.truncated_sequence(0, 2, 1),
            ErrorTemplate.invalid_trailing_byte(1, 0xFF),
            ErrorTemplate.code_point_out_of_range(0, 0x110000),
        ]

        assert {d.severity for d in diagnostics} == {"error"}


# ============================================================================
# EXCEPTIONS
# ============================================================================


class TestExceptions:
    """Test exception hierarchy and payload."""

    def test_hierarchy(self) -> None:
        """All errors are ValueErrors under one base."""
        assert issubclass(Utf8DecodeError, PositionedError)
        assert issubclass(CodePointRangeError, PositionedError)
        assert issubclass(PositionedError, UnicodeConversionError)
        assert issubclass(UnicodeConversionError, ValueError)

    def test_positioned_error_snapshot(self) -> None:
        """Errors hold the kind and an integer position."""
        error = Utf8DecodeError(ErrorTemplate.invalid_trailing_byte(1, 0xFF))

        assert error.kind is ErrorKind.INVALID_TRAILING_BYTE
        assert error.position == 1
        assert error.message == "Illegal trailing byte 0xFF"
        assert "INVALID_TRAILING_BYTE" in str(error)

    def test_positioned_error_requires_span(self) -> None:
        """A diagnostic without a span cannot be positioned."""
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_HEADER, message="x")

        with pytest.raises(ValueError, match="requires a positioned diagnostic"):
            Utf8DecodeError(diagnostic)

    def test_plain_message(self) -> None:
        """The base error accepts a plain string."""
        error = UnicodeConversionError("boom")

        assert error.diagnostic is None
        assert str(error) == "boom"

    def test_error_is_picklable_snapshot(self) -> None:
        """Errors carry no live references and survive pickling."""
        diagnostic = ErrorTemplate.invalid_header(0, 0x80)

        restored = pickle.loads(pickle.dumps(diagnostic))

        assert restored == diagnostic


# ============================================================================
# FORMATTER
# ============================================================================


class TestDiagnosticFormatter:
    """Test output formats."""

    def test_rust_format(self) -> None:
        """Default output is compiler style with offset and hint."""
        text = ErrorTemplate.invalid_header(0, 0x80).format_error()

        assert text.splitlines() == [
            "error[INVALID_HEADER]: Continuation byte 0x80 used as header",
            "  --> offset 0",
            "  = help: Header bytes must be 0x00-0x7F or 0xC0-0xF7",
        ]

    def test_simple_format(self) -> None:
        """Simple output is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        text = formatter.format(ErrorTemplate.invalid_trailing_byte(1, 0xFF))

        assert text == "INVALID_TRAILING_BYTE at 1: Illegal trailing byte 0xFF"

    def test_simple_format_without_span(self) -> None:
        """Unpositioned diagnostics omit the offset."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostic = Diagnostic(code=DiagnosticCode.INVALID_HEADER, message="bad")

        assert formatter.format(diagnostic) == "INVALID_HEADER: bad"

    def test_json_format(self) -> None:
        """JSON output carries code, kind and span."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(ErrorTemplate.truncated_sequence(0, 4, 3)))

        assert data["code"] == "TRUNCATED_SEQUENCE"
        assert data["code_value"] == 1002
        assert data["kind"] == "truncated_sequence"
        assert (data["start"], data["end"]) == (0, 3)

    def test_color(self) -> None:
        """Color output wraps the severity in ANSI codes."""
        formatter = DiagnosticFormatter(color=True)

        text = formatter.format(ErrorTemplate.invalid_header(0, 0xFF))

        assert text.startswith("\033[1;31merror\033[0m[INVALID_HEADER]")

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        diagnostics = [
            ErrorTemplate.invalid_header(0, 0x80),
            ErrorTemplate.invalid_header(1, 0x81),
        ]

        assert formatter.format_all(diagnostics).count("\n\n") == 1
