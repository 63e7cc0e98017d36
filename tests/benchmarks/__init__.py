"""Performance benchmarks for treelang.

Benchmarks use pytest-benchmark to measure and track performance of critical operations.
Prevents performance regressions in scanning, tree building, and diagnostics rendering.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
