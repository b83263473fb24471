# shellbox/topics/directives.py
#
# Inline directive expanders, applied to a whole segment before dispatch.
#
#   \n  \_                  escapes (line break, space)
#   <name>                  variable value
#   :random MIN-MAX:        integer in [MIN, MAX)
#   var(name)               variable value
#   replace(src,find,with)  substring replacement
#
# Each expander is a single non-recursive sweep; order is EXPANDERS order.

import math
import random
import re

from shellbox.model.syntax import ESCAPES, NOTHING_MARK, NULL, SPACE_MARK

_VAR_REF_RE = re.compile(r"<([^<>\s]+)>")
_RANDOM_RE = re.compile(r":random\s([0-9]+)-([0-9]+):")
_VAR_FN_RE = re.compile(r"var\((.+?)\)")
_REPLACE_FN_RE = re.compile(r"replace\((.+?)\)")


def sample(lo: int, hi: int) -> int:
    # uniform in [lo, hi); an empty range gives lo
    if hi <= lo:
        return lo
    return min(math.floor(random.random() * (hi - lo) + lo), hi - 1)


def lookup(core, name: str) -> str:
    v = core.vars.get(name)
    return NULL if v is None else v


def expand_escapes(core, text):
    for tok, rendered in ESCAPES:
        text = text.replace(tok, rendered)
    return text


def expand_var_refs(core, text):
    return _VAR_REF_RE.sub(lambda m: lookup(core, m.group(1)), text)


def expand_random(core, text):
    return _RANDOM_RE.sub(lambda m: str(sample(int(m.group(1)), int(m.group(2)))), text)


def expand_var_fn(core, text):
    return _VAR_FN_RE.sub(lambda m: lookup(core, m.group(1)), text)


def _replace_one(m):
    parts = m.group(1).split(",")
    if len(parts) < 3:
        return "Invalid replace command!"
    src, find, with_ = parts[0], parts[1], parts[2]
    if find == SPACE_MARK:
        find = " "
    if with_ == NOTHING_MARK:
        with_ = ""
    return src.replace(find, with_)


def expand_replace_fn(core, text):
    return _REPLACE_FN_RE.sub(_replace_one, text)


EXPANDERS = (
    expand_escapes,
    expand_var_refs,
    expand_random,
    expand_var_fn,
    expand_replace_fn,
)
