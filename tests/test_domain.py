from __future__ import annotations

import sys
import types

from app.domain.debugger import (
    DebuggerStatus,
    debugger_loaded,
    extension_loaded,
    status_class,
)
from app.domain.page import GREETING, render_home


def test_extension_loaded_reads_sys_modules(monkeypatch):
    monkeypatch.delitem(sys.modules, "pydevd", raising=False)
    assert extension_loaded("pydevd") is False
    monkeypatch.setitem(sys.modules, "pydevd", types.ModuleType("pydevd"))
    assert extension_loaded("pydevd") is True


def test_debugger_loaded_any_of(no_debugger, monkeypatch):
    assert debugger_loaded() is False
    monkeypatch.setitem(sys.modules, "pydevd", types.ModuleType("pydevd"))
    assert debugger_loaded() is True
    assert debugger_loaded(names=("debugpy",)) is False


def test_status_values():
    assert DebuggerStatus.from_flag(True).value == "loaded"
    assert DebuggerStatus.from_flag(False).value == "not loaded"
    assert status_class(DebuggerStatus.loaded) == "success"
    assert status_class(DebuggerStatus.not_loaded) == "warning"


def test_render_home_is_a_full_document():
    html = render_home(DebuggerStatus.not_loaded)
    assert html.startswith("<!DOCTYPE html>")
    assert html.rstrip().endswith("</html>")
    assert "<title>Simple Debug Test</title>" in html
    assert f"<strong>Message:</strong> {GREETING}" in html


def test_render_home_escapes_message():
    html = render_home(DebuggerStatus.loaded, message="<b>hi</b>")
    assert "&lt;b&gt;hi&lt;/b&gt;" in html
    assert "<b>hi</b>" not in html
