"""FastAPI app factory: home page, health check and request logging."""
from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request, Response

from app.api import router as home_router
from app.api.models import HealthResponse
from app.config import Settings, get_settings
from app.domain.debugger import debugger_loaded
from app.logging_conf import get_logger, setup_logging

setup_logging()
logger = get_logger("app")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "startup",
            extra={
                "event": "startup",
                "environment": settings.environment,
                "debug": settings.debug,
                "debugger_loaded": debugger_loaded(),
            },
        )
        yield
        logger.info("shutdown", extra={"event": "shutdown"})

    app = FastAPI(
        title="Debug Probe",
        version=settings.version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings

    @app.middleware("http")
    async def request_logger(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Log start/end of every request and echo or mint X-Request-ID."""
        request_id = request.headers.get("X-Request-ID") or str(uuid4())
        request.state.request_id = request_id

        start = time.perf_counter()
        logger.info(
            "request.start",
            extra={
                "event": "request_start",
                "method": request.method,
                "path": request.url.path,
                "request_id": request_id,
            },
        )
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "request.error",
                extra={
                    "event": "request_error",
                    "method": request.method,
                    "path": request.url.path,
                    "request_id": request_id,
                },
            )
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        response.headers["X-Request-ID"] = request_id
        logger.info(
            "request.end",
            extra={
                "event": "request_end",
                "status_code": response.status_code,
                "elapsed_ms": round(elapsed_ms, 2),
                "request_id": request_id,
            },
        )
        return response

    @app.get("/health", response_model=HealthResponse, summary="Liveness check")
    async def health() -> HealthResponse:
        return HealthResponse(ok=True)

    app.include_router(home_router)
    return app


# ASGI entrypoint: `uvicorn app.main:app --host 0.0.0.0 --port 8000`
app = create_app()
