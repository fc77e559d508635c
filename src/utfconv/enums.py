"""Enumerations for utfconv type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class SourceKind(StrEnum):
    """Kind of input accepted by the overloaded operations.

    StrEnum provides automatic string conversion: str(SourceKind.UTF8) == "utf8"
    """

    UTF8 = "utf8"
    """Raw UTF-8 bytes (bytes, bytearray, memoryview, or a Utf8Range)"""

    CODE_POINTS = "code_points"
    """Already-decoded code points (any iterable of int)"""


__all__ = [
    "SourceKind",
]
