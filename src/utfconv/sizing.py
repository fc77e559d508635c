"""UTF-16 size estimation.

Counts the UTF-16 units a source would produce without writing anything,
so callers can allocate a destination before the encode pass.

Python 3.13+.
"""

from collections.abc import Iterable

from utfconv.constants import MAX_BMP_CODE_POINT, MAX_CODE_POINT
from utfconv.diagnostics import CodePointRangeError, ErrorTemplate
from utfconv.enums import SourceKind
from utfconv.sources import classify_source, iter_code_points, utf8_range_of

__all__ = ["utf16_length", "utf16_unit_count"]


def utf16_length(code_point: int) -> int:
    """Units needed for one in-range code point (1 or 2)."""
    return 1 if code_point <= MAX_BMP_CODE_POINT else 2


def _count_code_points(code_points: Iterable[int]) -> int:
    size = 0
    for index, code_point in enumerate(code_points):
        if not 0 <= code_point <= MAX_CODE_POINT:
            raise CodePointRangeError(
                ErrorTemplate.code_point_out_of_range(index, code_point)
            )
        size += utf16_length(code_point)
    return size


def utf16_unit_count(source: object, begin: int = 0, end: int | None = None) -> int:
    """Count the UTF-16 units source would encode to.

    Accepts the same inputs as encode_to_utf16(): UTF-8 bytes or a
    Utf8Range are decoded (decode errors surface before any count is
    returned); str and iterables of int are counted directly.

    Args:
        source: UTF-8 bytes, Utf8Range, str, or iterable of code points
        begin: First byte offset (UTF-8) or element index (code points)
        end: End offset/index (exclusive)

    Returns:
        Number of UTF-16 units

    Raises:
        Utf8DecodeError: On malformed UTF-8, with the failing byte offset
        CodePointRangeError: On a code point above U+10FFFF; positioned at
            its index for code point sources

    Example:
        >>> utf16_unit_count(b"A\\xf0\\x90\\x80\\x80")
        3
        >>> utf16_unit_count([0x41, 0x1F600])
        3
    """
    if classify_source(source) is SourceKind.UTF8:
        # Decoded values are already range-checked by the decoder.
        return sum(utf16_length(cp) for cp in utf8_range_of(source, begin, end))
    return _count_code_points(iter_code_points(source, begin, end))  # type: ignore[arg-type]
