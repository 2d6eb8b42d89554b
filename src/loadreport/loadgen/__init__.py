from __future__ import annotations

from loadreport.loadgen.client import send_request
from loadreport.loadgen.runner import run, run_workload

__all__ = ["run", "run_workload", "send_request"]
