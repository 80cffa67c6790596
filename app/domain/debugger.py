from __future__ import annotations

import sys
from collections.abc import Iterable
from enum import Enum

__all__ = [
    "DEBUGGER_MODULES",
    "DebuggerStatus",
    "extension_loaded",
    "debugger_loaded",
    "status_class",
]

# debugpy backs VS Code; pydevd backs PyCharm (and is vendored inside debugpy).
DEBUGGER_MODULES: tuple[str, ...] = ("debugpy", "pydevd")


class DebuggerStatus(str, Enum):
    loaded = "loaded"
    not_loaded = "not loaded"

    @classmethod
    def from_flag(cls, flag: bool) -> "DebuggerStatus":
        return cls.loaded if flag else cls.not_loaded


def extension_loaded(name: str) -> bool:
    """Return True if module `name` has been imported into this process."""
    return name in sys.modules


def debugger_loaded(names: Iterable[str] = DEBUGGER_MODULES) -> bool:
    """Return True if any known step-debugger module is loaded."""
    return any(extension_loaded(n) for n in names)


def status_class(status: DebuggerStatus) -> str:
    """Map a status to the CSS class used on the page."""
    return "success" if status is DebuggerStatus.loaded else "warning"
