# shellbox/topics/text.py
#
# Text output commands.
#   return <text...>
#   ol  <command...>    run, output on one line (breaks -> space)
#   olc <command...>    run, output on one line (breaks removed)
#   replace <text...> <find> <with>

from shellbox.core import CommandError
from shellbox.model.syntax import BR, NOTHING_MARK, SPACE_MARK


def return_(core, *text_parts):
    return " ".join(text_parts)


def _one_line(core, parts, joiner):
    out = core.dispatch(" ".join(parts))
    return out.replace(BR, joiner).replace("\n", "")


def ol(core, *command_parts):
    return _one_line(core, command_parts, " ")


def olc(core, *command_parts):
    return _one_line(core, command_parts, "")


def replace(core, *parts):
    if len(parts) < 3:
        missing = ("String to replace", "Character to replace", "What to replace with")[len(parts)]
        raise CommandError(f"{missing} not specified. Type |help replace| for more info.")

    *text_parts, find, with_ = parts
    text = core.expand_eval(" ".join(text_parts))

    if find == SPACE_MARK:
        find = " "
    if with_ == NOTHING_MARK:
        with_ = ""
    return text.replace(find, with_)


COMMANDS = {
    "return":  (return_, "Print text to the terminal. Example: |return hello world!|", "return <text...>"),
    "ol":      (ol,      "Runs commands, but makes their output one-line. Example: |ol repeat 15 i return hello|", "ol <command...>"),
    "olc":     (olc,     "Runs commands, but makes their output one-line, without spaces. Example: |olc repeat 15 i return hello|", "olc <command...>"),
    "replace": (replace, "Replace strings inside of a string. Example: |replace hello lo loooo|, |replace hi hi :space: :nothing:|", "replace <text...> <find> <with>"),
}
