"""Shared constants for utfconv.

This module provides centralized Unicode constants used across the core,
decoding, encoding and sizing modules. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Code point limits: Unicode scalar range and the BMP boundary
- Surrogates: UTF-16 surrogate pair construction
- UTF-8 structure: Continuation byte range and payload mask
- Sentinels: Out-of-band return values

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Code point limits
    "MAX_CODE_POINT",
    "MAX_ASCII",
    "MAX_BMP_CODE_POINT",
    "SUPPLEMENTARY_OFFSET",
    # Surrogates
    "HIGH_SURROGATE_START",
    "HIGH_SURROGATE_END",
    "LOW_SURROGATE_START",
    "LOW_SURROGATE_END",
    "SURROGATE_PAYLOAD_BITS",
    "SURROGATE_PAYLOAD_MASK",
    # UTF-8 structure
    "CONTINUATION_MIN",
    "CONTINUATION_MAX",
    "CONTINUATION_PAYLOAD_BITS",
    "CONTINUATION_PAYLOAD_MASK",
    "MAX_TRAILING_BYTES",
    # Sentinels
    "CONVERSION_FAILED",
]

# ============================================================================
# CODE POINT LIMITS
# ============================================================================

# Highest Unicode code point. Anything above is rejected at encode time.
MAX_CODE_POINT: int = 0x10FFFF

# Highest single-byte UTF-8 value.
MAX_ASCII: int = 0x7F

# Highest code point that fits in a single UTF-16 unit.
MAX_BMP_CODE_POINT: int = 0xFFFF

# First supplementary-plane code point; subtracted before splitting into a pair.
SUPPLEMENTARY_OFFSET: int = 0x10000

# ============================================================================
# SURROGATES
# ============================================================================

HIGH_SURROGATE_START: int = 0xD800
HIGH_SURROGATE_END: int = 0xDBFF
LOW_SURROGATE_START: int = 0xDC00
LOW_SURROGATE_END: int = 0xDFFF

# Each surrogate carries 10 bits of the (code point - 0x10000) value.
SURROGATE_PAYLOAD_BITS: int = 10
SURROGATE_PAYLOAD_MASK: int = 0x3FF

# ============================================================================
# UTF-8 STRUCTURE
# ============================================================================

# Every trailing byte of a multi-byte sequence lies in [0x80, 0xBF].
CONTINUATION_MIN: int = 0x80
CONTINUATION_MAX: int = 0xBF

# Each trailing byte contributes its low 6 bits.
CONTINUATION_PAYLOAD_BITS: int = 6
CONTINUATION_PAYLOAD_MASK: int = 0x3F

# 4-byte sequences are the longest accepted form (5-/6-byte forms rejected).
MAX_TRAILING_BYTES: int = 3

# ============================================================================
# SENTINELS
# ============================================================================

# Returned by convert() on any malformed input. Never a valid unit count.
CONVERSION_FAILED: int = -1
