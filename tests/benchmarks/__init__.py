"""Performance benchmarks for utfconv.

Benchmarks use pytest-benchmark to measure decode, sizing and encode throughput.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
