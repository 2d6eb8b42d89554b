from __future__ import annotations

from loadreport.metrics.collector import aggregate, collect
from loadreport.metrics.models import Report, Result
from loadreport.metrics.queue import QueueClosedError, QueueNotClosedError, ResultQueue
from loadreport.metrics.stats import Histogram, histogram, percentiles

__all__ = [
    "Histogram",
    "QueueClosedError",
    "QueueNotClosedError",
    "Report",
    "Result",
    "ResultQueue",
    "aggregate",
    "collect",
    "histogram",
    "percentiles",
]
