"""Input adapters.

Defines the byte source capability interface and normalizes the inputs
accepted by the public operations:

- UTF-8 input: bytes, bytearray, memoryview, any buffer, or a Utf8Range
- Code point input: str (its code points) or any iterable of int

Python 3.13+.
"""

from collections.abc import Buffer, Iterable, Iterator, Sequence
from itertools import islice
from typing import TYPE_CHECKING, Protocol, Self, runtime_checkable

from utfconv.enums import SourceKind

if TYPE_CHECKING:
    from utfconv.decoding import Utf8Range

__all__ = [
    "ByteSource",
    "as_byte_view",
    "classify_source",
    "iter_code_points",
    "resolve_window",
    "utf8_range_of",
]


# pylint: disable=unnecessary-ellipsis
# Ellipsis (...) is the standard Protocol method body per PEP 544
@runtime_checkable
class ByteSource(Protocol):
    """Read-only view of the remaining bytes of a source.

    ByteCursor is the concrete implementation over arrays and buffers.
    """

    @property
    def position(self) -> int:
        """Current offset into the source."""
        ...

    def has_next(self) -> bool:
        """True while at least one byte remains."""
        ...

    def peek(self, offset: int = 0) -> int:
        """Byte at position + offset, without advancing."""
        ...

    def remaining(self) -> int:
        """Bytes left before end."""
        ...

    def advance(self, count: int = 1) -> Self:
        """New source advanced by count bytes."""
        ...


def as_byte_view(source: object) -> Sequence[int]:
    """Return an indexable view of source's bytes without copying buffers.

    bytes and bytearray are used as-is; other buffers are viewed through an
    unsigned-byte memoryview. Sequences of int (lists, tuples) are converted
    with bytes(), which validates every element is in [0, 255].

    Raises:
        TypeError: If source is a str or not byte-like
        ValueError: If a sequence element is outside [0, 255]
    """
    if isinstance(source, bytes | bytearray):
        return source
    if isinstance(source, memoryview):
        return source if source.format == "B" and source.ndim == 1 else source.cast("B")
    if isinstance(source, str):
        msg = "UTF-8 source must be bytes-like, not str; encode it first"
        raise TypeError(msg)
    if isinstance(source, Buffer):
        return memoryview(source).cast("B")
    if isinstance(source, Sequence):
        return bytes(source)
    msg = f"Expected a bytes-like UTF-8 source, got {type(source).__name__}"
    raise TypeError(msg)


def resolve_window(length: int, begin: int = 0, end: int | None = None) -> tuple[int, int]:
    """Validate a [begin, end) window over a source of the given length.

    Returns:
        (begin, end) with end defaulted to length

    Raises:
        ValueError: If the window is negative, reversed, or past length
    """
    if end is None:
        end = length
    if begin < 0 or end < begin or end > length:
        msg = f"Invalid range [{begin}, {end}) for source of length {length}"
        raise ValueError(msg)
    return begin, end


def classify_source(source: object) -> SourceKind:
    """Decide whether an overloaded operation receives UTF-8 or code points.

    Only buffers of single-byte items (bytes, bytearray, array("B"), byte
    memoryviews) are UTF-8. Wider buffers such as array("I") hold code
    points, as does a list of ints. Wrap byte lists in bytes() or a
    Utf8Range to have them decoded.

    Raises:
        TypeError: If source is neither
    """
    from utfconv.decoding import Utf8Range  # noqa: PLC0415 - circular

    if isinstance(source, Utf8Range):
        return SourceKind.UTF8
    if isinstance(source, Buffer):
        with memoryview(source) as view:
            if view.itemsize == 1:
                return SourceKind.UTF8
    if isinstance(source, str | Iterable):
        return SourceKind.CODE_POINTS
    msg = f"Expected UTF-8 bytes or code points, got {type(source).__name__}"
    raise TypeError(msg)


def iter_code_points(
    source: str | Iterable[int], begin: int = 0, end: int | None = None
) -> Iterator[int]:
    """Iterate code points of a str or an iterable of int, windowed."""
    values: Iterable[int] = map(ord, source) if isinstance(source, str) else source
    if begin == 0 and end is None:
        return iter(values)
    if begin < 0 or (end is not None and end < begin):
        msg = f"Invalid range [{begin}, {end})"
        raise ValueError(msg)
    return islice(values, begin, end)


def utf8_range_of(source: "Utf8Range | object", begin: int = 0, end: int | None = None) -> "Utf8Range":
    """Wrap source in a Utf8Range unless it already is one."""
    from utfconv.decoding import Utf8Range  # noqa: PLC0415 - circular

    if isinstance(source, Utf8Range):
        if begin == 0 and end is None:
            return source
        return source.window(begin, end)
    return Utf8Range(source, begin, end)
