from __future__ import annotations

from fastapi import APIRouter, Response

from ..domain.debugger import DebuggerStatus, debugger_loaded
from ..domain.page import GREETING, render_home
from ..logging_conf import get_logger

router = APIRouter()
logger = get_logger("api")

HTML_CONTENT_TYPE = "text/html; charset=UTF-8"


@router.get(
    "/",
    name="app_home",
    response_class=Response,
    summary="Debugger status page",
)
async def home() -> Response:
    """Report whether a step debugger is loaded; query params are ignored."""
    # Put a breakpoint here.
    message = GREETING
    status = DebuggerStatus.from_flag(debugger_loaded())
    logger.info("home.render", extra={"event": "home_render", "debugger": status.value})
    return Response(content=render_home(status, message), media_type=HTML_CONTENT_TYPE)
