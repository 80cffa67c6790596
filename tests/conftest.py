"""Shared fixtures: a test-environment app and client, plus debugger toggles."""
from __future__ import annotations

import sys
import types

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.domain.debugger import DEBUGGER_MODULES
from app.main import create_app


@pytest.fixture
def test_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.delenv("APP_DEBUG", raising=False)


@pytest.fixture
def app(test_env) -> FastAPI:
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    with TestClient(app) as c:
        yield c


@pytest.fixture
def no_debugger(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide any debugger the test session itself may be running under."""
    for name in DEBUGGER_MODULES:
        monkeypatch.delitem(sys.modules, name, raising=False)


@pytest.fixture
def with_debugger(no_debugger, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "debugpy", types.ModuleType("debugpy"))
