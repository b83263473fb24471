"""shellbox/core.py

Core runtime + init_core() wiring.

Important: avoid importing shellbox.topics (ALL_COMMANDS) at module import
time, to prevent circular-import issues while building the command table.
"""

from __future__ import annotations

import json
import re
import threading
from pathlib import Path

from shellbox.lib.stores import FunctionStore, VariableStore
from shellbox.model.syntax import BR, NOT_FOUND, SEPARATOR

DEFAULT_CONFIG = {
    "max_depth": 48,
    "log_limit": 1000,
}

_EVAL_RE = re.compile(r"eval\((.+?)\)")


class CommandError(ValueError):
    """User-level failure; its message becomes the segment's output."""


class Core:
    def __init__(self, max_depth=DEFAULT_CONFIG["max_depth"], log_limit=DEFAULT_CONFIG["log_limit"]):
        # session stores (append-only, each guarded by its own lock)
        self.vars = VariableStore()
        self.fns = FunctionStore()

        self.commands = {}   # cmd -> {handler, help, usage}
        self.log = []
        self.log_limit = log_limit
        self.expanders = []
        self.max_depth = max_depth
        self._depth = 0
        self._sealed = False

        # handlers re-enter dispatch (eval/exec/repeat/if), so re-entrant
        self.exec_lock = threading.RLock()

    def register(self, name, handler, help_text="", usage=""):
        if self._sealed:
            raise ValueError(f"Command table is sealed: {name}")
        if name in self.commands:
            raise ValueError(f"Duplicate command: {name}")
        self.commands[name] = {"handler": handler, "help": help_text, "usage": usage}

    def seal(self):
        self._sealed = True

    def is_command(self, name):
        return name in self.commands

    def add_expander(self, fn):
        self.expanders.append(fn)

    def _record(self, entry):
        self.log.append(entry)
        if self.log_limit and len(self.log) > self.log_limit:
            del self.log[: len(self.log) - self.log_limit]

    # ---- expansion ----
    def expand(self, text):
        # one sweep per directive kind, in registration order
        for ex in self.expanders:
            text = ex(text)
        return text

    def expand_eval(self, text):
        return _EVAL_RE.sub(lambda m: self.dispatch(m.group(1)), text)

    # ---- dispatch ----
    def dispatch(self, line):
        with self.exec_lock:
            if self._depth >= self.max_depth:
                raise CommandError(f"Recursion depth exceeded (max_depth={self.max_depth})")
            self._depth += 1
            try:
                return self._dispatch(line)
            finally:
                self._depth -= 1

    def _dispatch(self, line):
        output = []
        found = False

        for segment in line.split(SEPARATOR):
            words = segment.split()
            name = words[0] if words else ""
            entry = self.commands.get(name)
            if not entry:
                continue

            found = True
            argv = self.expand(segment).split()[1:]
            try:
                output.append(entry["handler"](self, *argv))
            except CommandError as e:
                output.append(str(e))

        if not found:
            return NOT_FOUND
        return BR.join(output)

    def execute(self, raw):
        with self.exec_lock:
            self._record({"in": raw})
            try:
                out = self.dispatch(raw)
            except Exception as e:
                out = f"Error: {e}"
            self._record({"out": out})
            return out


# ---------- help ----------
def help_cmd(core, name=None, *_):
    if name:
        entry = core.commands.get(name)
        if entry is None:
            return f"No such command: '{name}'"
        return entry["help"]

    return (
        "Type |help command_name| for further info on each command"
        + BR
        + " - ".join(core.commands.keys())
    )


def _load_core_config(path):
    p = Path(path)
    if not p.exists():
        return {}
    try:
        cfg = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return cfg if isinstance(cfg, dict) else {}


def _int_setting(cfg, key):
    try:
        return int(cfg.get(key, DEFAULT_CONFIG[key]))
    except (TypeError, ValueError):
        return DEFAULT_CONFIG[key]


def init_core(config_path="config/core.json"):
    # Late imports to avoid circular-import issues.
    from shellbox.topics import ALL_COMMANDS
    from shellbox.topics import directives

    cfg = _load_core_config(config_path)
    core = Core(
        max_depth=_int_setting(cfg, "max_depth"),
        log_limit=_int_setting(cfg, "log_limit"),
    )

    # register commands (help included)
    for name, (handler, help_text, usage) in ALL_COMMANDS.items():
        core.register(name, handler, help_text, usage)
    core.seal()

    # directive expanders, fixed order
    for ex in directives.EXPANDERS:
        core.add_expander(lambda text, ex=ex: ex(core, text))

    return core
