# shellbox/topics/variables.py
#
# Session variables + listings.
# set appends; get (and every directive lookup) returns the first match.

from shellbox.model.syntax import NULL


def set_(core, name="", value="", *_):
    core.vars.set(name, value)
    return "Success"


def get(core, name="", *_):
    v = core.vars.get(name)
    return NULL if v is None else v


def list_(core, what="", *_):
    if what == "var":
        names = core.vars.names()
    elif what == "fn":
        names = core.fns.names()
    elif what == "cmd":
        names = list(core.commands.keys())
    else:
        return "Couldn't list that. Type |help list| for further info."
    return " | ".join(names)


COMMANDS = {
    "set":  (set_,  "Set a variable. |set variable_name variable_value|", "set <name> <value>"),
    "get":  (get,   "Get a variable. |get variable_name|",               "get <name>"),
    "list": (list_, "List globals. Example: |list var|, |list cmd|, |list fn|", "list var|fn|cmd"),
}
