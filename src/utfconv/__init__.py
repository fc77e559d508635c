"""utfconv - UTF-8 / UTF-16 / UTF-32 conversion without full-buffer copies.

Decodes UTF-8 lazily into code points, sizes UTF-16 destinations before
allocating them, and encodes code points into UTF-16 with surrogate pairing.

Public API:
    convert - Two-pass UTF-8 to UTF-16 (count, then fill) with a sentinel result
    decode_range - Lazy view of the code points in a UTF-8 byte range
    copy_to_code_points - Drain decoded UTF-8 into a code point sink (UTF-32)
    encode_to_utf16 - Write UTF-16 units for UTF-8 or code point input
    utf16_unit_count - Count UTF-16 units without writing
    Utf8Range, Utf8Iterator - Lazy decoding types
    Utf16Encoder - Explicit emit-one-code-point encoder

Exceptions:
    UnicodeConversionError - Base exception class (a ValueError)
    PositionedError - Failure carrying kind and offset
    Utf8DecodeError - Malformed UTF-8
    CodePointRangeError - Code point above U+10FFFF

Submodules:
    utfconv.core - Header classification, byte cursor, fallible decode step
    utfconv.diagnostics - Error kinds, codes, diagnostics and formatting
    utfconv.sinks - Output adapters (array, growable buffer, callback)
    utfconv.sources - Input adapters and the ByteSource interface
    utfconv.constants - Unicode bounds and the conversion sentinel
"""

from .constants import CONVERSION_FAILED, MAX_CODE_POINT
from .conversion import convert
from .decoding import Utf8Iterator, Utf8Range, copy_to_code_points, decode_range
from .diagnostics import (
    CodePointRangeError,
    ErrorKind,
    PositionedError,
    UnicodeConversionError,
    Utf8DecodeError,
)
from .encoding import Utf16Encoder, encode_code_point, encode_to_utf16
from .sinks import ArraySink, BufferSink, CallbackSink
from .sizing import utf16_unit_count

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("utfconv")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

__all__ = [
    "CONVERSION_FAILED",
    "MAX_CODE_POINT",
    "ArraySink",
    "BufferSink",
    "CallbackSink",
    "CodePointRangeError",
    "ErrorKind",
    "PositionedError",
    "UnicodeConversionError",
    "Utf16Encoder",
    "Utf8DecodeError",
    "Utf8Iterator",
    "Utf8Range",
    "__version__",
    "convert",
    "copy_to_code_points",
    "decode_range",
    "encode_code_point",
    "encode_to_utf16",
    "utf16_unit_count",
]
