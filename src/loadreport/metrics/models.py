from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True, slots=True)
class Result:
    duration: float
    status_code: int = 0
    content_length: int = 0
    error: str | None = None

    @classmethod
    def failure(cls, duration: float, error: str) -> Result:
        return cls(duration=duration, error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None


@dataclass(frozen=True, slots=True)
class Report:
    """Aggregated outcome of a single run. Latencies are sorted ascending."""

    total: float
    latencies: tuple[float, ...]
    status_codes: Mapping[int, int]
    errors: Mapping[str, int]
    size_total: int
    success_count: int
    rps: float
    success_rps: float
    average: float
    fastest: float
    slowest: float

    @property
    def error_count(self) -> int:
        return sum(self.errors.values())

    @property
    def requests(self) -> int:
        return len(self.latencies) + self.error_count
