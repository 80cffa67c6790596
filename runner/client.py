from __future__ import annotations

import asyncio
import time

import httpx

from app.logging_conf import get_logger
from runner.types import HealthCheckError, HomeProbe, PageCheckError
from runner.utils import parse_debugger_status

logger = get_logger("runner.client")


async def wait_for_health(
    base_url: str,
    timeout_s: float = 20.0,
    *,
    poll_interval_s: float = 0.25,
    transport: httpx.AsyncBaseTransport | None = None,
) -> None:
    """Ping /health until it returns ok or raise after a timeout.

    Always polls at least once; a non-JSON or non-object body counts as not ok.
    """
    deadline = time.monotonic() + timeout_s
    async with httpx.AsyncClient(base_url=base_url, timeout=5.0, transport=transport) as client:
        while True:
            try:
                r = await client.get("/health")
                body = r.json() if r.status_code == 200 else None
                if isinstance(body, dict) and body.get("ok") is True:
                    logger.info("health.ok", extra={"event": "health_ok"})
                    return
            except (httpx.HTTPError, ValueError) as e:
                logger.debug("health.waiting", extra={"event": "health_waiting", "error": str(e)})
            if time.monotonic() >= deadline:
                break
            await asyncio.sleep(poll_interval_s)
    raise HealthCheckError("Health check did not pass within timeout")


async def fetch_home(
    base_url: str,
    session: str | None = None,
    *,
    retries: int = 3,
    transport: httpx.AsyncBaseTransport | None = None,
) -> HomeProbe:
    """GET / and return what was observed, with basic retry.

    - `session` is sent as XDEBUG_SESSION to mimic an IDE-triggered request
    - Retries transport errors up to `retries` times
    """
    params = {"XDEBUG_SESSION": session} if session else None
    last_err: Exception | None = None
    for attempt in range(retries):
        try:
            async with httpx.AsyncClient(
                base_url=base_url, timeout=10.0, transport=transport
            ) as client:
                r = await client.get("/", params=params)
            probe = HomeProbe(
                status_code=r.status_code,
                content_type=r.headers.get("content-type", ""),
                debugger_status=parse_debugger_status(r.text),
                body=r.text,
            )
            logger.info(
                "home.fetched",
                extra={
                    "event": "home_fetched",
                    "status_code": probe.status_code,
                    "attempt": attempt + 1,
                },
            )
            return probe
        except httpx.HTTPError as e:
            last_err = e
            logger.warning(
                "home.retry",
                extra={"event": "home_retry", "attempt": attempt + 1, "error": str(e)},
            )
    raise PageCheckError(str(last_err) if last_err else "fetch_home failed")
