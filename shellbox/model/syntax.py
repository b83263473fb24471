# shellbox/model/syntax.py
#
# Surface syntax of the interpreter.
#
# This file provides:
# - separator / escape tokens shared by the dispatcher and the expanders
# - fixed result strings returned to the host
#
# NOTE:
# Tokens here are bit-exact contracts with the host (it renders BR and
# intercepts HOST_COMMANDS). Keep them stable.

# -----------------------------
# tokens
# -----------------------------

SEPARATOR = "&&"          # splits one input line into segments
BR = "<br />"             # rendered line break; joins segment outputs
PARAM_AND = "__AND__"     # written inside fn bodies, restored to SEPARATOR
PARAM_MARK = "--"         # --param placeholder inside fn bodies
INDEX_MARK = "#"          # #index placeholder inside repeat bodies

ESCAPES = (
    ("\\n", BR),
    ("\\_", " "),
)

SPACE_MARK = ":space:"
NOTHING_MARK = ":nothing:"


# -----------------------------
# fixed results
# -----------------------------

NULL = "null"
NOT_FOUND = "Command not found!"

HOST_COMMANDS = ("reset", "theme", "full")
