from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from loadreport.config import DEFAULT_PERCENTILES


@dataclass(frozen=True, slots=True)
class Histogram:
    edges: tuple[float, ...]
    counts: tuple[int, ...]
    max_count: int

    def bar_length(self, index: int, width: int) -> int:
        if self.max_count <= 0:
            return 0
        return self.counts[index] * width // self.max_count


def percentiles(
    latencies: Sequence[float],
    targets: Sequence[int] = DEFAULT_PERCENTILES,
) -> dict[int, float]:
    """Nearest-rank percentiles of ascending ``latencies`` in one pass.

    For each index ``i`` the rank is ``i * 100 // n``; the first sample whose
    rank reaches the next pending target is recorded for it. Targets never
    reached are left out of the result.
    """
    found: dict[int, float] = {}
    ordered = sorted(targets)
    n = len(latencies)
    j = 0
    for i in range(n):
        if j >= len(ordered):
            break
        current = i * 100 // n
        if current >= ordered[j]:
            found[ordered[j]] = latencies[i]
            j += 1
    return found


def histogram(latencies: Sequence[float], buckets: int = 10) -> Histogram:
    """Count ascending ``latencies`` into ``buckets + 1`` evenly spaced edges.

    Each sample lands on the first edge it does not exceed.
    """
    if not latencies:
        return Histogram(edges=(), counts=(), max_count=0)
    fastest = latencies[0]
    slowest = latencies[-1]
    # linspace pins the last edge to slowest exactly
    edges = [float(edge) for edge in np.linspace(fastest, slowest, buckets + 1)]
    counts = [0] * len(edges)
    bucket = 0
    max_count = 0
    i = 0
    while i < len(latencies):
        if latencies[i] <= edges[bucket]:
            counts[bucket] += 1
            max_count = max(max_count, counts[bucket])
            i += 1
        elif bucket < len(edges) - 1:
            bucket += 1
    return Histogram(edges=tuple(edges), counts=tuple(counts), max_count=max_count)
