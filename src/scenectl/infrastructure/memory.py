"""Heap allocation measurement around a block of code.

``measure_allocations(label)`` wraps a block with ``tracemalloc`` and
reports the net and peak bytes allocated inside it. Figures are
illustrative: they include interpreter bookkeeping and vary by Python
version.

Usage::

    with measure_allocations("test scene") as usage:
        scene = builder.build_test_scene()
    usage.net_bytes  # bytes still held after the block
"""

from __future__ import annotations

import logging
import tracemalloc
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass
class MemoryUsage:
    """Allocation figures for one measured block."""

    label: str
    net_bytes: int = 0
    peak_bytes: int = 0

    def to_dict(self) -> dict[str, int | str]:
        return {
            "label": self.label,
            "net_bytes": self.net_bytes,
            "peak_bytes": self.peak_bytes,
        }


@contextmanager
def measure_allocations(label: str) -> Generator[MemoryUsage]:
    """Measure allocations made inside the ``with`` block.

    Safe to nest; only the outermost call starts and stops tracing.
    Nested blocks reset the peak counter seen by the enclosing block.
    """
    already_tracing = tracemalloc.is_tracing()
    if not already_tracing:
        tracemalloc.start()

    usage = MemoryUsage(label=label)
    baseline, _peak = tracemalloc.get_traced_memory()
    tracemalloc.reset_peak()
    try:
        yield usage
    finally:
        current, peak = tracemalloc.get_traced_memory()
        usage.net_bytes = max(0, current - baseline)
        usage.peak_bytes = max(usage.net_bytes, peak - baseline)
        if not already_tracing:
            tracemalloc.stop()
        logger.debug("[mem] %s: +%d B net, %d B peak", label, usage.net_bytes, usage.peak_bytes)
