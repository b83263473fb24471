# ShellBox.py
import readline
from shellbox.core import init_core
from shellbox.model.syntax import BR, SEPARATOR

# host-side themes: prompt colour (ANSI SGR)
THEMES = {
    "default": "0",
    "aqua":    "36",
    "lime":    "92",
    "amber":   "33",
    "rose":    "95",
}


class Host:
    """Terminal host. Renders output and performs the host-delegated commands."""

    def __init__(self):
        self.theme = "default"
        self.full = False

    def prompt(self):
        mark = ">>" if self.full else ">"
        return f"\x1b[{THEMES[self.theme]}m{mark}\x1b[0m "

    def handle(self, line, out):
        # core returns "" for these; the effect happens here, per segment
        for segment in line.split(SEPARATOR):
            self._effect(*(segment.split() or [""]))

        if out:
            print(out.replace(BR, "\n"))

    def _effect(self, head, *rest):
        if head == "reset":
            print("\x1b[2J\x1b[H", end="")
        elif head == "theme":
            name = rest[0] if rest else "default"
            if name in THEMES:
                self.theme = name
            else:
                print("Unknown theme. Available: " + ", ".join(THEMES))
        elif head == "full":
            self.full = not self.full


def main():
    core = init_core()
    host = Host()
    print("ShellBox (directives -> dispatch -> output)")
    print("Commands: help (lists commands).")
    print("Exit: quit/exit\n")

    while True:
        try:
            line = input(host.prompt())
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if line.strip() in ("quit", "exit"):
            break
        if not line.strip():
            continue
        host.handle(line, core.execute(line))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
