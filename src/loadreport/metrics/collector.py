from __future__ import annotations

import logging
from collections import Counter
from types import MappingProxyType
from typing import Iterable

from loadreport.metrics.models import Report, Result
from loadreport.metrics.queue import ResultQueue

logger = logging.getLogger(__name__)


def collect(results: ResultQueue, total: float) -> Report:
    """Drain a closed queue and fold every result into a report."""
    return aggregate(results.drain(), total)


def aggregate(results: Iterable[Result], total: float) -> Report:
    latencies: list[float] = []
    status_codes: Counter[int] = Counter()
    errors: Counter[str] = Counter()
    duration_total = 0.0
    size_total = 0
    success_count = 0
    for res in results:
        if res.error is not None:
            errors[res.error] += 1
            continue
        latencies.append(res.duration)
        duration_total += res.duration
        status_codes[res.status_code] += 1
        if res.content_length > 0:
            size_total += res.content_length
        if 200 <= res.status_code < 300:
            success_count += 1
    logger.debug(
        "Aggregated %d results (%d errors) over %.4f secs",
        len(latencies) + sum(errors.values()),
        sum(errors.values()),
        total,
    )
    latencies.sort()
    return Report(
        total=total,
        latencies=tuple(latencies),
        status_codes=MappingProxyType(dict(sorted(status_codes.items()))),
        errors=MappingProxyType(dict(sorted(errors.items()))),
        size_total=size_total,
        success_count=success_count,
        rps=_rate(len(latencies), total),
        success_rps=_rate(success_count, total),
        average=duration_total / len(latencies) if latencies else 0.0,
        fastest=latencies[0] if latencies else 0.0,
        slowest=latencies[-1] if latencies else 0.0,
    )


def _rate(count: int, total: float) -> float:
    if total <= 0:
        return 0.0
    return count / total
