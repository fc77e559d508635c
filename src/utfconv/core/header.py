"""UTF-8 header byte classification.

A header byte determines how many trailing bytes follow and seeds the
code point with its payload bits:

    0x00-0x7F  0 trailing bytes, code point = byte
    0x80-0xBF  invalid (continuation byte)
    0xC0-0xDF  1 trailing byte,  low 5 bits
    0xE0-0xEF  2 trailing bytes, low 4 bits
    0xF0-0xF7  3 trailing bytes, low 3 bits
    0xF8-0xFF  invalid (legacy 5-/6-byte forms)

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from utfconv.constants import (
    CONTINUATION_MAX,
    CONTINUATION_MIN,
    CONTINUATION_PAYLOAD_BITS,
    CONTINUATION_PAYLOAD_MASK,
    MAX_ASCII,
)

__all__ = ["HeaderInfo", "classify_header", "fold_trailing_byte", "is_trailing_byte"]


@dataclass(frozen=True, slots=True)
class HeaderInfo:
    """Parsed header byte.

    Attributes:
        trailing: Number of continuation bytes that follow (0-3)
        seed: Payload bits extracted from the header
    """

    trailing: int
    seed: int

    @property
    def length(self) -> int:
        """Total sequence length in bytes."""
        return self.trailing + 1


# (upper bound exclusive, trailing count, payload mask) for multi-byte headers
_MULTI_BYTE_HEADERS: tuple[tuple[int, int, int], ...] = (
    (0xE0, 1, 0x1F),
    (0xF0, 2, 0x0F),
    (0xF8, 3, 0x07),
)


def classify_header(byte: int) -> HeaderInfo | None:
    """Classify a header byte.

    Args:
        byte: Integer in [0, 255]

    Returns:
        HeaderInfo, or None if the byte cannot start a sequence

    Example:
        >>> classify_header(0x41)
        HeaderInfo(trailing=0, seed=65)
        >>> classify_header(0xC2)
        HeaderInfo(trailing=1, seed=2)
        >>> classify_header(0x80) is None
        True
    """
    if byte <= MAX_ASCII:
        return HeaderInfo(0, byte)
    if byte < 0xC0:
        return None
    for upper, trailing, mask in _MULTI_BYTE_HEADERS:
        if byte < upper:
            return HeaderInfo(trailing, byte & mask)
    return None


def is_trailing_byte(byte: int) -> bool:
    """Check that a byte lies in the continuation range [0x80, 0xBF]."""
    return CONTINUATION_MIN <= byte <= CONTINUATION_MAX


def fold_trailing_byte(code_point: int, byte: int) -> int:
    """Shift a trailing byte's payload into the code point.

    The caller validates the byte with is_trailing_byte() first.
    """
    return (code_point << CONTINUATION_PAYLOAD_BITS) | (byte & CONTINUATION_PAYLOAD_MASK)
