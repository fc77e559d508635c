"""UTF-16 encoding.

Code points up to U+FFFF map to one unit; U+10000 to U+10FFFF map to a
surrogate pair:

    v = cp - 0x10000
    high = (v >> 10) + 0xD800
    low = (v & 0x3FF) + 0xDC00

Encoding is a pure function of the current code point: no look-ahead and
no state carried between code points.

Python 3.13+.
"""

import logging
from collections.abc import Iterable

from utfconv.constants import (
    HIGH_SURROGATE_START,
    LOW_SURROGATE_START,
    MAX_BMP_CODE_POINT,
    MAX_CODE_POINT,
    SUPPLEMENTARY_OFFSET,
    SURROGATE_PAYLOAD_BITS,
    SURROGATE_PAYLOAD_MASK,
)
from utfconv.diagnostics import CodePointRangeError, ErrorTemplate
from utfconv.enums import SourceKind
from utfconv.sinks import Sink, as_sink
from utfconv.sources import classify_source, iter_code_points, utf8_range_of

__all__ = ["Utf16Encoder", "encode_code_point", "encode_to_utf16", "split_surrogates"]

logger = logging.getLogger(__name__)


def split_surrogates(code_point: int) -> tuple[int, int]:
    """Split a supplementary code point into (high, low) surrogates.

    The caller guarantees 0x10000 <= code_point <= 0x10FFFF.
    """
    value = code_point - SUPPLEMENTARY_OFFSET
    return (
        (value >> SURROGATE_PAYLOAD_BITS) + HIGH_SURROGATE_START,
        (value & SURROGATE_PAYLOAD_MASK) + LOW_SURROGATE_START,
    )


def encode_code_point(code_point: int, position: int = 0) -> tuple[int, ...]:
    """Encode one code point as UTF-16 units.

    Args:
        code_point: Value to encode
        position: Offset reported if the value is out of range

    Returns:
        One unit, or a (high, low) surrogate pair

    Raises:
        CodePointRangeError: If code_point is negative or above U+10FFFF

    Example:
        >>> encode_code_point(0x41)
        (65,)
        >>> [hex(u) for u in encode_code_point(0x10FFFF)]
        ['0xdbff', '0xdfff']
    """
    if 0 <= code_point <= MAX_BMP_CODE_POINT:
        return (code_point,)
    if MAX_BMP_CODE_POINT < code_point <= MAX_CODE_POINT:
        return split_surrogates(code_point)
    raise CodePointRangeError(ErrorTemplate.code_point_out_of_range(position, code_point))


class Utf16Encoder:
    """Writes UTF-16 units for each emitted code point.

    Out-of-range code points raise CodePointRangeError positioned at the
    destination offset where the units would have been written.

    Example:
        >>> units = []
        >>> encoder = Utf16Encoder(units)
        >>> encoder.emit(0x10000)
        2
        >>> [hex(u) for u in units]
        ['0xd800', '0xdc00']
        >>> encoder.written
        2
    """

    __slots__ = ("_sink", "_written")

    def __init__(self, sink: Sink | object) -> None:
        self._sink = as_sink(sink)
        self._written = 0

    @property
    def written(self) -> int:
        """UTF-16 units written so far."""
        return self._written

    def emit(self, code_point: int) -> int:
        """Encode one code point and write its units.

        Returns:
            Number of units written (1 or 2)

        Raises:
            CodePointRangeError: If code_point is out of range
        """
        units = encode_code_point(code_point, self._written)
        for unit in units:
            self._sink.put(unit)
        self._written += len(units)
        return len(units)

    def emit_all(self, code_points: Iterable[int]) -> int:
        """Emit every code point in order.

        Returns:
            Number of units written by this call
        """
        start = self._written
        for code_point in code_points:
            self.emit(code_point)
        return self._written - start


def encode_to_utf16(
    source: object, sink: Sink | object, begin: int = 0, end: int | None = None
) -> int:
    """Write the UTF-16 encoding of source to sink.

    UTF-8 sources (bytes-like or Utf8Range) are decoded lazily on the way;
    str and iterables of int are consumed as code points directly.

    Args:
        source: UTF-8 bytes, Utf8Range, str, or iterable of code points
        sink: Sink, list/array (appended), memoryview (indexed) or callable
        begin: First byte offset (UTF-8) or element index (code points)
        end: End offset/index (exclusive)

    Returns:
        Number of UTF-16 units written

    Raises:
        Utf8DecodeError: On malformed UTF-8, with the failing byte offset
        CodePointRangeError: On a code point above U+10FFFF
    """
    kind = classify_source(source)
    if kind is SourceKind.UTF8:
        code_points: Iterable[int] = utf8_range_of(source, begin, end)
    else:
        code_points = iter_code_points(source, begin, end)  # type: ignore[arg-type]

    written = Utf16Encoder(sink).emit_all(code_points)
    logger.debug("Encoded %s source to %d UTF-16 units", kind, written)
    return written
