from __future__ import annotations

from dataclasses import dataclass

from app.domain.debugger import DebuggerStatus


@dataclass
class HomeProbe:
    """What the runner observed when fetching the home page."""

    status_code: int
    content_type: str
    debugger_status: DebuggerStatus | None
    body: str


class SmokeError(RuntimeError):
    """Raised when the smoke check cannot proceed."""


class HealthCheckError(SmokeError):
    """Raised when /health never reports ok within the timeout."""


class PageCheckError(SmokeError):
    """Raised when the home page cannot be fetched after retries."""
