# shellbox/topics/host.py
#
# Host-delegated commands. The core only reserves the names; the host
# sees the command name and performs the effect itself.

from shellbox.model.syntax import HOST_COMMANDS


def host_noop(core, *_):
    return ""


_HELP = {
    "reset": ("[HOST-SIDE] Clears the terminal. Variables are still kept.", "reset"),
    "theme": ("[HOST-SIDE] Changes the theme. Example: |theme aqua|",        "theme <name>"),
    "full":  ("[HOST-SIDE] Toggles fullscreen.",                             "full"),
}

COMMANDS = {name: (host_noop,) + _HELP[name] for name in HOST_COMMANDS}
