"""Core decoding primitives shared by every conversion path.

Exports:
    HeaderInfo, classify_header: Header byte classification
    ByteCursor: Immutable position inside a borrowed byte range
    DecodeResult, DecodeFailure, decode_at: Fallible single-step decode

Python 3.13+.
"""

from .cursor import ByteCursor, DecodeFailure, DecodeResult, decode_at
from .header import HeaderInfo, classify_header, fold_trailing_byte, is_trailing_byte

__all__ = [
    "ByteCursor",
    "DecodeFailure",
    "DecodeResult",
    "HeaderInfo",
    "classify_header",
    "decode_at",
    "fold_trailing_byte",
    "is_trailing_byte",
]
