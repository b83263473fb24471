"""shellbox: textual command interpreter for a terminal-like input box.

    from shellbox import command
    command("set x 5 && calc <x> * 2")   # -> "Success<br />10"
"""

from __future__ import annotations

import threading

from shellbox.core import CommandError, Core, init_core

__all__ = ["command", "get_core", "init_core", "Core", "CommandError"]

_CORE_SINGLETON: Core | None = None
_CORE_LOCK = threading.Lock()


def get_core() -> Core:
    """Process-wide core, created on first use."""
    global _CORE_SINGLETON
    with _CORE_LOCK:
        if _CORE_SINGLETON is None:
            _CORE_SINGLETON = init_core()
        return _CORE_SINGLETON


def command(text: str) -> str:
    """Run one input line against the process-wide core. Never raises."""
    return get_core().execute(text)
