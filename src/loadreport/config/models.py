from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class OutputMode(str, Enum):
    HUMAN = ""
    QUIET = "quiet"
    CSV = "csv"


DEFAULT_PERCENTILES: tuple[int, ...] = (10, 25, 50, 75, 90, 95, 99)


@dataclass(frozen=True, slots=True)
class TargetConfig:
    url: str
    method: str = "GET"
    timeout_sec: float = 20.0
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""

    def __post_init__(self) -> None:
        if self.timeout_sec <= 0:
            msg = f"timeout must be positive, got {self.timeout_sec}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class WorkloadConfig:
    requests: int = 200
    concurrency: int = 50
    qps: float = 0.0  # per worker, 0 means unlimited

    def __post_init__(self) -> None:
        if self.requests < 1:
            msg = f"number of requests must be at least 1, got {self.requests}"
            raise ValueError(msg)
        if self.concurrency < 1:
            msg = f"concurrency must be at least 1, got {self.concurrency}"
            raise ValueError(msg)
        if self.concurrency > self.requests:
            msg = "concurrency cannot be greater than the number of requests"
            raise ValueError(msg)
        if self.qps < 0:
            msg = f"qps cannot be negative, got {self.qps}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ReportConfig:
    output: OutputMode = OutputMode.HUMAN
    bar_char: str = "∎"
    bar_width: int = 40
    bucket_count: int = 10
    percentiles: tuple[int, ...] = DEFAULT_PERCENTILES


@dataclass(frozen=True, slots=True)
class RunConfig:
    target: TargetConfig
    workload: WorkloadConfig = field(default_factory=WorkloadConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
