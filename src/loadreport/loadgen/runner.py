from __future__ import annotations

import asyncio
import logging
import time
from typing import TextIO

import httpx

from loadreport.config import RunConfig
from loadreport.loadgen.client import send_request
from loadreport.metrics import Report, ResultQueue, collect
from loadreport.report import Reporter

logger = logging.getLogger(__name__)


async def run(
    config: RunConfig,
    out: TextIO | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Report:
    results = ResultQueue()
    total = await run_workload(config, results, transport)
    report = collect(results, total)
    Reporter(config.report, out).render(report)
    return report


async def run_workload(
    config: RunConfig,
    results: ResultQueue,
    transport: httpx.AsyncBaseTransport | None = None,
) -> float:
    """Fire every request, then close ``results``. Returns elapsed seconds."""
    workload = config.workload
    shares = _split(workload.requests, workload.concurrency)
    logger.debug(
        "Firing %d requests at %s with %d workers",
        workload.requests,
        config.target.url,
        workload.concurrency,
    )
    started = time.perf_counter()
    try:
        async with httpx.AsyncClient(transport=transport) as client:
            tasks = [
                asyncio.create_task(_worker(client, config, results, share))
                for share in shares
            ]
            try:
                await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise
    finally:
        results.close()
    total = time.perf_counter() - started
    logger.debug("Workload finished in %.4f secs", total)
    return total


async def _worker(
    client: httpx.AsyncClient,
    config: RunConfig,
    results: ResultQueue,
    count: int,
) -> None:
    interval = 1.0 / config.workload.qps if config.workload.qps > 0 else 0.0
    next_at = time.perf_counter()
    for _ in range(count):
        if interval:
            await _sleep_until_time(next_at)
            next_at += interval
        results.put(await send_request(client, config.target))


def _split(requests: int, workers: int) -> list[int]:
    base, extra = divmod(requests, workers)
    return [base + 1 if i < extra else base for i in range(workers)]


async def _sleep_until_time(target: float) -> None:
    delay = max(0.0, target - time.perf_counter())
    if delay > 0:
        await asyncio.sleep(delay)
