# shellbox/lib/stores.py
# Store-based primitives (no Core dependency).
#
# Both stores are append-only lists of entries keyed by their first field.
# Lookup is first-match in insertion order, so a redefinition shadows
# nothing: the earliest entry for a name keeps winning.

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class FunctionDef:
    name: str
    body: str
    params: Tuple[str, ...] = ()


class AppendStore:
    """List of entries with a per-store lock around every read and append."""

    def __init__(self):
        self._entries: list = []
        self._lock = threading.Lock()

    def append(self, entry) -> None:
        with self._lock:
            self._entries.append(entry)

    def snapshot(self) -> list:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class VariableStore(AppendStore):
    # entry: (name, value)

    def set(self, name: str, value: str) -> None:
        self.append((name, value))

    def get(self, name: str) -> Optional[str]:
        for k, v in self.snapshot():
            if k == name:
                return v
        return None

    def names(self) -> List[str]:
        return [k for k, _ in self.snapshot()]


class FunctionStore(AppendStore):
    # entry: FunctionDef

    def add(self, name: str, body: str, params) -> FunctionDef:
        fd = FunctionDef(name=name, body=body, params=tuple(params))
        self.append(fd)
        return fd

    def get(self, name: str) -> Optional[FunctionDef]:
        for fd in self.snapshot():
            if fd.name == name:
                return fd
        return None

    def names(self) -> List[str]:
        return [fd.name for fd in self.snapshot()]
