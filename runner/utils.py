from __future__ import annotations

import re

from app.domain.debugger import DebuggerStatus, status_class
from app.domain.page import GREETING
from runner.types import HomeProbe

EXPECTED_CONTENT_TYPE = "text/html; charset=UTF-8"
EXPECTED_HEADING = "Simple Xdebug Test"

_STATUS_RE = re.compile(
    r'<div class="status (?P<cls>\w+)">\s*<strong>Xdebug Status:</strong>\s*(?P<status>[a-z ]+?)\s*</div>'
)
_HEADING_RE = re.compile(r"<h1>(?P<text>.*?)</h1>", re.DOTALL)


def parse_debugger_status(body: str) -> DebuggerStatus | None:
    """Extract the debugger status line from a rendered home page."""
    m = _STATUS_RE.search(body)
    if not m:
        return None
    try:
        return DebuggerStatus(m.group("status"))
    except ValueError:
        return None


def check_home(probe: HomeProbe) -> list[str]:
    """Return a list of problems with the fetched page (empty when healthy)."""
    problems: list[str] = []
    if probe.status_code != 200:
        problems.append(f"unexpected status code {probe.status_code}")
    if probe.content_type != EXPECTED_CONTENT_TYPE:
        problems.append(f"unexpected content type {probe.content_type!r}")
    if GREETING not in probe.body:
        problems.append("greeting missing")
    heading = _HEADING_RE.search(probe.body)
    if not heading or heading.group("text").strip() != EXPECTED_HEADING:
        problems.append("heading missing")
    if probe.debugger_status is None:
        problems.append("debugger status line missing")
    else:
        m = _STATUS_RE.search(probe.body)
        if m and m.group("cls") != status_class(probe.debugger_status):
            problems.append(f"status class {m.group('cls')!r} does not match status")
    return problems


def summarize(probe: HomeProbe, problems: list[str], *, expect_debugger: bool) -> tuple[dict, int]:
    """Compute summary dict and an exit code from the probe."""
    failures = list(problems)
    loaded = probe.debugger_status is DebuggerStatus.loaded
    if expect_debugger and not loaded:
        failures.append("debugger not loaded")
    summary = {
        "component": "runner",
        "event": "summary",
        "status_code": probe.status_code,
        "content_type": probe.content_type,
        "debugger": probe.debugger_status.value if probe.debugger_status else None,
        "failures": failures,
    }
    return summary, 0 if not failures else 1
