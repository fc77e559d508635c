"""Diagnostic system for conversion errors.

Provides structured error diagnostics with failure kinds, codes, spans, and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import ByteSpan, Diagnostic, DiagnosticCode, ErrorKind
from .errors import (
    CodePointRangeError,
    PositionedError,
    UnicodeConversionError,
    Utf8DecodeError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ByteSpan",
    "CodePointRangeError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorKind",
    "ErrorTemplate",
    "OutputFormat",
    "PositionedError",
    "UnicodeConversionError",
    "Utf8DecodeError",
]
