# shellbox/topics/functions.py
#
# User functions.
#   fn   name(p1,p2) <command...>   body kept literal; __AND__ -> &&
#   exec name(a1,a2)                --p1/--p2 bound positionally, body dispatched
#
# Names are checked against the command table; functions never shadow it.

import re

from shellbox.core import CommandError
from shellbox.model.syntax import NULL, PARAM_AND, PARAM_MARK, SEPARATOR

_DECL_RE = re.compile(r"(.+?)\((.*?)\)")
# greedy: arguments may hold eval(...) and spaces
_CALL_RE = re.compile(r"(.+?)\((.*)\)")


def _parse_call(tok, pattern=_DECL_RE):
    m = pattern.search(tok)
    if not m:
        return None
    return m.group(1), [p.strip() for p in m.group(2).split(",")]


def fn(core, decl=None, *body_parts):
    if decl is None:
        raise CommandError("Function name not specified! Type |help fn| for further info.")

    parsed = _parse_call(decl)
    if parsed is None:
        raise CommandError("Invalid fn declaration! Type |help fn| for further info.")
    name, params = parsed
    params = [p for p in params if p]

    if core.is_command(name):
        raise CommandError(f"Function name '{name}' is reserved!")

    if not body_parts:
        raise CommandError("No command was specified! Type |help fn| for further info.")

    body = " ".join(body_parts).replace(PARAM_AND, SEPARATOR)
    core.fns.add(name, body, params)
    return "Success!"


def exec_(core, *parts):
    parsed = _parse_call(" ".join(parts), _CALL_RE)
    if parsed is None:
        raise CommandError("Invalid exec declaration! Type |help exec| for further info.")
    name, args = parsed
    args = [core.expand_eval(a) for a in args]

    fd = core.fns.get(name)
    if fd is None:
        return NULL

    bound = {p: (args[i] if i < len(args) else "") for i, p in enumerate(fd.params)}
    body = fd.body
    # longest first, so --ab is not eaten by --a
    for p in sorted(bound, key=len, reverse=True):
        body = body.replace(PARAM_MARK + p, bound[p])

    return core.dispatch(body)


COMMANDS = {
    "fn":   (fn,    "Create a function. Example: |fn function_name(param1,param2) return p1: --param1, p2: --param2|", "fn <name(params)> <command...>"),
    "exec": (exec_, "Execute a function. Example: |exec function_name(param1,param2)|", "exec <name(args)>"),
}
