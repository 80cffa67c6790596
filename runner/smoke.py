#!/usr/bin/env python3
"""Smoke check for a running debug probe instance.

Steps:
- wait for server health
- fetch the home page (optionally with an XDEBUG_SESSION trigger)
- validate the page and report whether the debugger is attached
- emit a compact summary and exit code
"""
from __future__ import annotations

import asyncio
import sys

import httpx

from app.logging_conf import get_logger, setup_logging
from runner.cli import parse_args
from runner.client import fetch_home, wait_for_health
from runner.types import SmokeError
from runner.utils import check_home, summarize

setup_logging()
logger = get_logger("runner")


async def run_smoke(
    *,
    base_url: str,
    session: str | None = None,
    expect_debugger: bool = False,
    timeout_s: float = 20.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> int:
    try:
        await wait_for_health(base_url, timeout_s, transport=transport)
        probe = await fetch_home(base_url, session, transport=transport)
    except SmokeError as e:
        logger.error("runner.failed", extra={"event": "runner_failed", "error": str(e)})
        return 1
    summary, exit_code = summarize(probe, check_home(probe), expect_debugger=expect_debugger)
    logger.info("runner.summary", extra=summary)
    return exit_code


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    code = asyncio.run(
        run_smoke(
            base_url=args.base_url,
            session=args.session,
            expect_debugger=args.expect_debugger,
            timeout_s=args.timeout,
        )
    )
    raise SystemExit(code)


if __name__ == "__main__":
    main()
