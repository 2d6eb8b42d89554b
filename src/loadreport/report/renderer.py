from __future__ import annotations

import io
import sys
from typing import TextIO

import pandas as pd

from loadreport.config import OutputMode, ReportConfig
from loadreport.metrics import Report, histogram, percentiles


class Reporter:
    """Renders a finished report as a human summary, errors only, or CSV."""

    def __init__(self, config: ReportConfig | None = None, out: TextIO | None = None) -> None:
        self.config = config or ReportConfig()
        self._out = out

    def render(self, report: Report) -> None:
        out = self._out if self._out is not None else sys.stdout
        out.write(self.render_to_string(report))
        out.flush()

    def render_to_string(self, report: Report) -> str:
        buf = io.StringIO()
        output = OutputMode(self.config.output)
        if output is OutputMode.CSV:
            self._write_csv(buf, report)
            return buf.getvalue()
        if report.latencies and output is not OutputMode.QUIET:
            self._write_summary(buf, report)
            self._write_status_codes(buf, report)
            self._write_histogram(buf, report)
            self._write_latencies(buf, report)
        if report.error_count > 0:
            self._write_errors(buf, report)
        return buf.getvalue()

    def _write_csv(self, buf: io.StringIO, report: Report) -> None:
        if not report.latencies:
            return
        frame = pd.DataFrame(
            {"latency": report.latencies},
            index=pd.RangeIndex(1, len(report.latencies) + 1),
        )
        frame.to_csv(buf, header=False, float_format="%4.4f", lineterminator="\n")

    def _write_summary(self, buf: io.StringIO, report: Report) -> None:
        buf.write("\nSummary:\n")
        buf.write(f"  Total:\t{report.total:4.4f} secs.\n")
        buf.write(f"  Slowest:\t{report.slowest:4.4f} secs.\n")
        buf.write(f"  Fastest:\t{report.fastest:4.4f} secs.\n")
        buf.write(f"  Average:\t{report.average:4.4f} secs.\n")
        buf.write(f"  Requests/sec:\t{report.rps:4.4f}\n")
        if report.size_total > 0:
            per_request = report.size_total // len(report.latencies)
            buf.write(f"  Total Data Received:\t{report.size_total} bytes.\n")
            buf.write(f"  Response Size per Request:\t{per_request} bytes.\n")

    def _write_status_codes(self, buf: io.StringIO, report: Report) -> None:
        buf.write("\nStatus code distribution:\n")
        for code, count in sorted(report.status_codes.items()):
            buf.write(f"  [{code}]\t{count} responses\n")

    def _write_histogram(self, buf: io.StringIO, report: Report) -> None:
        hist = histogram(report.latencies, self.config.bucket_count)
        buf.write("\nResponse time histogram:\n")
        for i, edge in enumerate(hist.edges):
            bar = self.config.bar_char * hist.bar_length(i, self.config.bar_width)
            buf.write(f"  {edge:4.3f} [{hist.counts[i]}]\t|{bar}\n")

    def _write_latencies(self, buf: io.StringIO, report: Report) -> None:
        values = percentiles(report.latencies, self.config.percentiles)
        buf.write("\nLatency distribution:\n")
        for pct, value in values.items():
            buf.write(f"  {pct}% in {value:4.4f} secs.\n")

    def _write_errors(self, buf: io.StringIO, report: Report) -> None:
        buf.write("\nError distribution:\n")
        for description, count in sorted(report.errors.items()):
            if count > 0:
                buf.write(f"  [{count}]\t{description}\n")
