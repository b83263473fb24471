# shellbox/topics/numbers.py
#
# Numbers.
#   random <min> <max>     integer in [min, max)
#   calc <expression...>   flat reduction: power(! or ^), *, /, +, -

from shellbox.core import CommandError
from shellbox.lib import reduce as red
from shellbox.topics.directives import sample


def _parse_int(s):
    try:
        return int(s)
    except ValueError:
        return 0


def random_(core, lo=None, hi=None, *_):
    if lo is None:
        raise CommandError("Minimum val not specified. Type |help random| for further info.")
    if hi is None:
        raise CommandError("Maximum val not specified. Type |help random| for further info.")
    return str(sample(_parse_int(lo), _parse_int(hi)))


def calc(core, *parts):
    text = core.expand_eval(" ".join(parts))
    try:
        return red.calc(text)
    except red.ReduceError as e:
        raise CommandError("Error parsing calculation") from e


COMMANDS = {
    "random": (random_, "Get a random number. Example: |random 1 100|", "random <min> <max>"),
    "calc":   (calc,    "Calculate things. Example: |calc 5 * 2 + 1 - 4 / 5|, |calc 2 ! 8|", "calc <expression...>"),
}
