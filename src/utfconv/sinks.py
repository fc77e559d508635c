"""Output adapters.

Every conversion writes through a sink that accepts one value at a time.
The library never allocates the destination; the caller supplies it:

- ArraySink: fixed-size, preallocated mutable sequence (list, array, memoryview)
- BufferSink: growable container with append() (list, array.array)
- CallbackSink: any callable taking one int

Python 3.13+.
"""

from array import array as ArrayType
from collections.abc import Callable, MutableSequence
from typing import Protocol, runtime_checkable

__all__ = [
    "ArraySink",
    "BufferSink",
    "CallbackSink",
    "CodePointSink",
    "Sink",
    "UnitSink",
    "as_sink",
]


# pylint: disable=unnecessary-ellipsis
@runtime_checkable
class Sink(Protocol):
    """Accepts one output value per call."""

    def put(self, value: int) -> None:
        """Write a single value."""
        ...


# Same capability, named by what flows through it.
type CodePointSink = Sink
type UnitSink = Sink


class ArraySink:
    """Writes into a preallocated mutable sequence by index.

    Example:
        >>> buffer = [0] * 2
        >>> sink = ArraySink(buffer)
        >>> sink.put(0xD800)
        >>> sink.put(0xDC00)
        >>> buffer
        [55296, 56320]
        >>> sink.written
        2
    """

    __slots__ = ("_array", "_index")

    def __init__(self, array: MutableSequence[int], start: int = 0) -> None:
        if not 0 <= start <= len(array):
            msg = f"Start index {start} outside array of length {len(array)}"
            raise ValueError(msg)
        self._array = array
        self._index = start

    @property
    def written(self) -> int:
        """Index of the next write."""
        return self._index

    @property
    def capacity(self) -> int:
        """Slots left before the array is full."""
        return len(self._array) - self._index

    def put(self, value: int) -> None:
        """Write value at the next index.

        Raises:
            IndexError: If the array is full
        """
        if self._index >= len(self._array):
            msg = f"Destination array full after {self._index} values"
            raise IndexError(msg)
        self._array[self._index] = value
        self._index += 1


class BufferSink:
    """Appends to a growable container.

    Defaults to a new list when no buffer is given.
    """

    __slots__ = ("_buffer", "_count")

    def __init__(self, buffer: MutableSequence[int] | None = None) -> None:
        self._buffer: MutableSequence[int] = [] if buffer is None else buffer
        self._count = 0

    @property
    def buffer(self) -> MutableSequence[int]:
        """The underlying container."""
        return self._buffer

    @property
    def written(self) -> int:
        """Values appended through this sink."""
        return self._count

    def put(self, value: int) -> None:
        self._buffer.append(value)
        self._count += 1


class CallbackSink:
    """Forwards each value to a callable."""

    __slots__ = ("_callback", "_count")

    def __init__(self, callback: Callable[[int], object]) -> None:
        self._callback = callback
        self._count = 0

    @property
    def written(self) -> int:
        """Values forwarded so far."""
        return self._count

    def put(self, value: int) -> None:
        self._callback(value)
        self._count += 1


def as_sink(target: object) -> Sink:
    """Adapt a destination to the Sink interface.

    Objects with put() are used as-is. memoryview targets are written by
    index; other mutable sequences (list, array.array, bytearray) are
    appended to; callables become CallbackSink.

    Raises:
        TypeError: If target cannot accept values
    """
    if isinstance(target, Sink):
        return target
    if isinstance(target, memoryview):
        return ArraySink(target)
    if isinstance(target, MutableSequence | ArrayType):
        return BufferSink(target)
    if callable(target):
        return CallbackSink(target)
    msg = f"Cannot write output to {type(target).__name__}"
    raise TypeError(msg)
