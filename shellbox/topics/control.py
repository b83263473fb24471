# shellbox/topics/control.py
#
# Control flow.
#   repeat <N> <index> <command...>          #index -> 0..N-1
#   if (<condition>) {<do>} else {<else>}
#
# Both re-enter the dispatcher for their bodies.

import re

from shellbox.core import CommandError
from shellbox.lib import reduce as red
from shellbox.model.syntax import BR, INDEX_MARK

_IF_RE = re.compile(r"\((.+)\) \{(.+)\} else \{(.+)\}")


def _parse_count(s):
    try:
        return int(s)
    except ValueError:
        return 1


def repeat(core, count=None, index_name=None, *command_parts):
    if count is None:
        raise CommandError("Num-repeat not specified! Type |help repeat| for further info.")
    if index_name is None:
        raise CommandError("Index not specified! Type |help repeat| for further info.")
    if not command_parts:
        raise CommandError("No command to repeat was specified! Type |help repeat| for further info.")

    n = _parse_count(count)
    command = " ".join(command_parts)
    marker = INDEX_MARK + index_name

    out = []
    for i in range(n):
        line = core.expand_eval(command.replace(marker, str(i)))
        out.append(core.dispatch(line))
    return BR.join(out)


def parse_condition(core, text):
    try:
        return red.condition(core.expand_eval(text))
    except red.ReduceError as e:
        raise CommandError("Error parsing condition") from e


def if_(core, *parts):
    m = _IF_RE.fullmatch(" ".join(parts))
    if not m:
        raise CommandError("Invalid if statement! Type |help if| for further info.")
    condition, do, else_ = m.groups()

    if parse_condition(core, condition):
        return core.dispatch(do)
    return core.dispatch(else_)


COMMANDS = {
    "repeat": (repeat, "Repeat commands x number of times. Example: |repeat 10 i return index: #i|", "repeat <N> <index> <command...>"),
    "if":     (if_,    "Execute a commands depending on a condition. Example: |if (eval(calc 5 * 5) == 25) {return yes} else {return this will never be called}|", "if (<condition>) {<do>} else {<else>}"),
}
