"""Hypothesis strategies for utfconv property-based testing.

Usage:
    from tests.strategies import utf8_text_bytes, scalar_values
    from tests.strategies.unicode import truncated_sequences
"""

from .unicode import (
    ascii_bytes,
    bad_trailing_sequences,
    continuation_bytes,
    invalid_header_sequences,
    non_continuation_bytes,
    out_of_range_code_points,
    scalar_values,
    supplementary_code_points,
    truncated_sequences,
    unicode_text,
    utf8_by_width,
    utf8_text_bytes,
)

__all__ = [
    "ascii_bytes",
    "bad_trailing_sequences",
    "continuation_bytes",
    "invalid_header_sequences",
    "non_continuation_bytes",
    "out_of_range_code_points",
    "scalar_values",
    "supplementary_code_points",
    "truncated_sequences",
    "unicode_text",
    "utf8_by_width",
    "utf8_text_bytes",
]
