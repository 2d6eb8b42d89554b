from __future__ import annotations

from loadreport.config.models import (
    DEFAULT_PERCENTILES,
    OutputMode,
    ReportConfig,
    RunConfig,
    TargetConfig,
    WorkloadConfig,
)

__all__ = [
    "DEFAULT_PERCENTILES",
    "OutputMode",
    "ReportConfig",
    "RunConfig",
    "TargetConfig",
    "WorkloadConfig",
]
