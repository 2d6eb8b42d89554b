from __future__ import annotations

import io

from hypothesis import given, strategies as st

from loadreport.config import OutputMode, ReportConfig
from loadreport.metrics import Result, aggregate
from loadreport.report import Reporter


def _render(results: list[Result], output: OutputMode = OutputMode.HUMAN, total: float = 1.0) -> str:
    reporter = Reporter(ReportConfig(output=output))
    return reporter.render_to_string(aggregate(results, total))


def test_human_report_sections_in_order() -> None:
    text = _render(
        [
            Result(duration=0.05, status_code=200, content_length=100),
            Result.failure(0.2, "timeout"),
        ]
    )
    assert text.startswith("\nSummary:\n")
    assert "  Total:\t1.0000 secs.\n" in text
    assert "  Slowest:\t0.0500 secs.\n" in text
    assert "  Fastest:\t0.0500 secs.\n" in text
    assert "  Average:\t0.0500 secs.\n" in text
    assert "  Requests/sec:\t1.0000\n" in text
    assert "  Total Data Received:\t100 bytes.\n" in text
    assert "  Response Size per Request:\t100 bytes.\n" in text
    assert "  [200]\t1 responses\n" in text
    assert text.endswith("\nError distribution:\n  [1]\ttimeout\n")
    positions = [
        text.index(header)
        for header in (
            "Status code distribution:",
            "Response time histogram:",
            "Latency distribution:",
            "Error distribution:",
        )
    ]
    assert positions == sorted(positions)


def test_size_lines_omitted_without_content() -> None:
    text = _render([Result(duration=0.1, status_code=200), Result(duration=0.2, status_code=200)])
    assert "Total Data Received" not in text
    assert "Response Size per Request" not in text


def test_size_per_request_truncates() -> None:
    text = _render(
        [
            Result(duration=0.1, status_code=200, content_length=10),
            Result(duration=0.2, status_code=200, content_length=0),
            Result(duration=0.3, status_code=200, content_length=1),
        ]
    )
    assert "  Total Data Received:\t11 bytes.\n" in text
    assert "  Response Size per Request:\t3 bytes.\n" in text


def test_all_failures_prints_only_errors() -> None:
    text = _render(
        [
            Result.failure(0.1, "timeout"),
            Result.failure(0.1, "connection refused"),
            Result.failure(0.1, "timeout"),
        ]
    )
    assert text == "\nError distribution:\n  [1]\tconnection refused\n  [2]\ttimeout\n"


def test_empty_report_renders_nothing() -> None:
    assert _render([]) == ""
    assert _render([], OutputMode.CSV) == ""


def test_quiet_mode_prints_errors_only() -> None:
    results = [Result(duration=0.1, status_code=200), Result.failure(0.3, "timeout")]
    assert _render(results, OutputMode.QUIET) == "\nError distribution:\n  [1]\ttimeout\n"
    assert _render(results[:1], OutputMode.QUIET) == ""


def test_csv_mode_lists_sorted_latencies() -> None:
    results = [
        Result(duration=0.3, status_code=200),
        Result.failure(0.9, "timeout"),
        Result(duration=0.1, status_code=500),
        Result(duration=0.25, status_code=200),
    ]
    assert _render(results, OutputMode.CSV) == "1,0.1000\n2,0.2500\n3,0.3000\n"


def test_status_codes_sorted() -> None:
    text = _render(
        [
            Result(duration=0.1, status_code=500),
            Result(duration=0.1, status_code=200),
            Result(duration=0.1, status_code=404),
            Result(duration=0.1, status_code=200),
        ]
    )
    assert "  [200]\t2 responses\n  [404]\t1 responses\n  [500]\t1 responses\n" in text


def test_percentile_section() -> None:
    results = [Result(duration=d, status_code=200) for d in (0.5, 0.1, 0.4, 0.2, 0.3)]
    text = _render(results)
    section = text.split("\nLatency distribution:\n")[1]
    assert section == (
        "  10% in 0.2000 secs.\n"
        "  25% in 0.3000 secs.\n"
        "  50% in 0.4000 secs.\n"
        "  75% in 0.5000 secs.\n"
    )


def test_histogram_section_uses_configured_bar() -> None:
    results = [Result(duration=d, status_code=200) for d in (1.0, 1.0, 2.0, 3.0, 11.0)]
    config = ReportConfig(bar_char="#", bar_width=10, bucket_count=10)
    text = Reporter(config).render_to_string(aggregate(results, 1.0))
    section = text.split("\nResponse time histogram:\n")[1].split("\nLatency distribution:\n")[0]
    lines = section.splitlines()
    assert len(lines) == 11
    assert lines[0] == "  1.000 [2]\t|##########"
    assert lines[1] == "  2.000 [1]\t|#####"
    assert lines[3] == "  4.000 [0]\t|"
    assert lines[10] == "  11.000 [1]\t|#####"


def test_render_writes_to_stream() -> None:
    out = io.StringIO()
    Reporter(ReportConfig(output=OutputMode.CSV), out).render(aggregate([Result(duration=0.5, status_code=200)], 1.0))
    assert out.getvalue() == "1,0.5000\n"


@given(
    durations=st.lists(st.floats(min_value=0.0, max_value=10.0), min_size=1, max_size=100),
    errors=st.lists(st.sampled_from(["timeout", "reset"]), max_size=10),
)
def test_rendering_is_idempotent(durations: list[float], errors: list[str]) -> None:
    results = [Result(duration=d, status_code=200) for d in durations]
    results += [Result.failure(0.0, e) for e in errors]
    report = aggregate(results, 2.0)
    reporter = Reporter()
    assert reporter.render_to_string(report) == reporter.render_to_string(report)
    csv = Reporter(ReportConfig(output=OutputMode.CSV)).render_to_string(report)
    lines = csv.splitlines()
    assert len(lines) == len(durations)
    for i, line in enumerate(lines, start=1):
        index, value = line.split(",")
        assert int(index) == i
        assert value == f"{report.latencies[i - 1]:4.4f}"
