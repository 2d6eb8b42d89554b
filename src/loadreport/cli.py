from __future__ import annotations

import argparse
import asyncio
import logging

import httpx

from loadreport.config import OutputMode, ReportConfig, RunConfig, TargetConfig, WorkloadConfig
from loadreport.loadgen import run


def _parse_header(value: str) -> tuple[str, str]:
    name, sep, content = value.partition(":")
    if not sep or not name.strip():
        msg = f"invalid header {value!r}, expected 'Name: value'"
        raise argparse.ArgumentTypeError(msg)
    try:
        value.encode("ascii")
    except UnicodeEncodeError as exc:
        msg = f"invalid header {value!r}, only ASCII is allowed"
        raise argparse.ArgumentTypeError(msg) from exc
    return name.strip(), content.strip()


def _check_url(value: str) -> str:
    try:
        url = httpx.URL(value)
    except httpx.InvalidURL as exc:
        msg = f"invalid url {value!r}: {exc}"
        raise ValueError(msg) from exc
    if url.scheme not in ("http", "https") or not url.host:
        msg = f"invalid url {value!r}, expected an absolute http or https URL"
        raise ValueError(msg)
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loadreport",
        description="Send load to an HTTP endpoint and report latency statistics",
    )
    parser.add_argument("url", help="Target URL")
    parser.add_argument("-n", dest="requests", type=int, default=200, help="Number of requests to run")
    parser.add_argument("-c", dest="concurrency", type=int, default=50, help="Number of concurrent workers")
    parser.add_argument("-q", dest="qps", type=float, default=0.0, help="Rate limit per worker, in QPS")
    parser.add_argument("-m", dest="method", default="GET", help="HTTP method")
    parser.add_argument(
        "-H",
        dest="headers",
        type=_parse_header,
        action="append",
        default=[],
        help="Custom HTTP header, repeatable, e.g. -H 'Accept: text/html'",
    )
    parser.add_argument("-d", dest="body", default="", help="HTTP request body")
    parser.add_argument("-t", dest="timeout", type=float, default=20.0, help="Timeout per request in seconds")
    parser.add_argument(
        "-o",
        dest="output",
        choices=[OutputMode.CSV.value, OutputMode.QUIET.value],
        default=OutputMode.HUMAN.value,
        help="Output type: csv prints every latency, quiet prints errors only",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def build_config(args: argparse.Namespace) -> RunConfig:
    target = TargetConfig(
        url=_check_url(args.url),
        method=args.method.upper(),
        timeout_sec=args.timeout,
        headers=dict(args.headers),
        body=args.body,
    )
    workload = WorkloadConfig(
        requests=args.requests,
        concurrency=args.concurrency,
        qps=args.qps,
    )
    return RunConfig(target=target, workload=workload, report=ReportConfig(output=OutputMode(args.output)))


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        config = build_config(args)
    except ValueError as exc:
        parser.error(str(exc))
    asyncio.run(run(config))


if __name__ == "__main__":
    main()
