"""pytest-benchmark configuration for utfconv benchmarks.

Configures benchmark defaults and custom options.

Python 3.13+.
"""

from __future__ import annotations

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add utfconv metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "utfconv"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def mixed_text() -> bytes:
    """About 16 KiB of UTF-8 mixing all four sequence widths."""
    return ("ascii é € 😀 " * 1024).encode("utf-8")
