"""Runtime settings read from the process environment.

The debugger flag is deliberately absent: it comes from interpreter
introspection (see ``app.domain.debugger``), never from configuration.
"""
from __future__ import annotations

import os

from pydantic import BaseModel, Field

__all__ = ["Settings", "get_settings"]


class Settings(BaseModel):
    environment: str = Field(default="dev", min_length=1)
    debug: bool = True
    version: str = "0.1.0"


def get_settings() -> Settings:
    """Build settings from APP_ENV, APP_DEBUG and APP_VERSION.

    APP_DEBUG defaults to on for every environment except "prod". Bad values
    surface as a pydantic ``ValidationError`` (a ``ValueError``).
    """
    environment = os.getenv("APP_ENV", "dev").strip() or "dev"
    debug = os.getenv("APP_DEBUG", "false" if environment == "prod" else "true")
    return Settings(
        environment=environment,
        debug=debug,
        version=os.getenv("APP_VERSION", "0.1.0"),
    )
