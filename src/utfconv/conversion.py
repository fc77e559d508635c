"""Two-pass UTF-8 to UTF-16 conversion with a sentinel result.

convert() runs one code path for both passes: without a destination it
only counts, with one it counts and writes. A caller sizes the buffer,
allocates it, then calls again to fill it, and both calls agree.

Malformed input yields CONVERSION_FAILED. No position or failure kind is
reported to the caller; use encode_to_utf16() for positioned errors.

Input is checked and written in one forward pass. A preallocated
destination that runs out of room raises IndexError at the first code
point that does not fit, before later bytes are examined; size the
destination with a count-only call first.

Python 3.13+.
"""

import logging
from collections.abc import MutableSequence

from utfconv.constants import CONVERSION_FAILED
from utfconv.core import ByteCursor, DecodeFailure, decode_at
from utfconv.encoding import encode_code_point
from utfconv.sinks import ArraySink, Sink
from utfconv.sources import as_byte_view, resolve_window

__all__ = ["convert"]

logger = logging.getLogger(__name__)


def convert(
    source: object,
    destination: MutableSequence[int] | Sink | None = None,
    begin: int = 0,
    end: int | None = None,
) -> int:
    """Convert UTF-8 to UTF-16, or only count the units needed.

    Args:
        source: bytes-like UTF-8 input
        destination: None to count only; a preallocated mutable sequence
            (written from index 0) or a Sink to fill
        begin: First byte offset
        end: Offset one past the last byte (default: len(source))

    Returns:
        UTF-16 unit count (required or written), or CONVERSION_FAILED

    Raises:
        IndexError: If a preallocated destination is too short; raised when
            the first code point that does not fit is reached, even if the
            input is malformed further on. No surrogate pair is split.
        ValueError: If [begin, end) is not a valid window

    Example:
        >>> data = "h\\u00e9\\U0001F600".encode()
        >>> size = convert(data)
        >>> size
        4
        >>> units = [0] * size
        >>> convert(data, units)
        4
        >>> convert(b"\\x80")
        -1
    """
    view = as_byte_view(source)
    begin, end = resolve_window(len(view), begin, end)

    out: Sink | None
    if destination is None or isinstance(destination, Sink):
        out = destination
    else:
        out = ArraySink(destination)

    cursor = ByteCursor(view, begin, end)
    size = 0
    while cursor.has_next():
        result = decode_at(cursor)
        if isinstance(result, DecodeFailure):
            logger.debug(
                "Conversion failed: %s at byte %d", result.kind, result.position
            )
            return CONVERSION_FAILED

        units = encode_code_point(result.code_point)
        if isinstance(out, ArraySink) and out.capacity < len(units):
            msg = f"Destination too short: {len(units)} units needed at index {out.written}"
            raise IndexError(msg)
        if out is not None:
            for unit in units:
                out.put(unit)
        size += len(units)
        cursor = cursor.advance(result.length)

    logger.debug(
        "Converted %d bytes to %d UTF-16 units (%s)",
        end - begin,
        size,
        "count only" if out is None else "written",
    )
    return size
