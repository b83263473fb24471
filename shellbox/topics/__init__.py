# shellbox/topics/__init__.py
#
# Command table, in the order users see it in |help| and |list cmd|.

from shellbox.core import help_cmd
from shellbox.topics import control, functions, host, numbers, text, variables

_HELP = (
    help_cmd,
    "|help| will list all commands. |help command_name| will give a description of how you use that command.",
    "help [command_name]",
)

_TABLE = {"help": _HELP}
for _topic in (text, control, variables, functions, numbers, host):
    _TABLE.update(_topic.COMMANDS)

ORDER = (
    "return", "repeat", "help", "set", "get", "ol", "olc", "fn", "exec",
    "list", "replace", "random", "calc", "if", "reset", "theme", "full",
)

ALL_COMMANDS = {name: _TABLE[name] for name in ORDER}
