from __future__ import annotations

import logging
import time

import httpx

from loadreport.config import TargetConfig
from loadreport.metrics import Result

logger = logging.getLogger(__name__)


async def send_request(client: httpx.AsyncClient, target: TargetConfig) -> Result:
    start = time.perf_counter()
    try:
        resp = await client.request(
            target.method,
            target.url,
            headers=dict(target.headers),
            content=target.body.encode() if target.body else None,
            timeout=target.timeout_sec,
        )
    except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as exc:
        duration = time.perf_counter() - start
        description = str(exc) or type(exc).__name__
        logger.debug("Request to %s failed: %s", target.url, description)
        return Result.failure(duration, description)
    duration = time.perf_counter() - start
    return Result(
        duration=duration,
        status_code=resp.status_code,
        content_length=len(resp.content or b""),
    )
