from __future__ import annotations

from loadreport.report.renderer import Reporter

__all__ = ["Reporter"]
