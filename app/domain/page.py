"""Static HTML for the home page.

Rendering is deterministic: the same status and message always produce the
same bytes, so repeated requests can be compared directly.
"""
from __future__ import annotations

from html import escape

from .debugger import DebuggerStatus, status_class

__all__ = ["GREETING", "HANDLER_SOURCE", "render_home"]

GREETING = "Hello from Symfony!"
HANDLER_SOURCE = "app/api/routes.py"

_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>Simple Debug Test</title>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 40px; }}
        .status {{ padding: 10px; border-radius: 5px; margin: 10px 0; }}
        .success {{ background: #d4edda; color: #155724; }}
        .warning {{ background: #fff3cd; color: #856404; }}
    </style>
</head>
<body>
    <h1>Simple Xdebug Test</h1>
    <div class="status {status_class}">
        <strong>Xdebug Status:</strong> {status}
    </div>
    <div class="status success">
        <strong>Message:</strong> {message}
    </div>
    <p>Set a breakpoint in <code>{source}</code> inside <code>home()</code></p>
</body>
</html>
"""


def render_home(status: DebuggerStatus, message: str = GREETING) -> str:
    """Render the full home page document for the given debugger status."""
    return _TEMPLATE.format(
        status_class=status_class(status),
        status=status.value,
        message=escape(message),
        source=HANDLER_SOURCE,
    )
