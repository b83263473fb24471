# shellbox/lib/reduce.py
# Flat expression reduction (no Core dependency).
#
# Text is tokenized into numbers, single-char operators and opaque text,
# then each operator pass folds every NUMBER op NUMBER left to right.
# Pass order is the precedence: there are no parentheses and no
# re-scan of earlier passes. Tokens no pass touched keep their text.

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

NUM = "num"
OP = "op"
TXT = "txt"

_NUM_CHARS = "0123456789."


class ReduceError(ValueError):
    pass


@dataclass
class Token:
    kind: str
    text: str
    value: Optional[float] = None

    def number(self) -> float:
        if self.value is not None:
            return self.value
        return parse_num(self.text)


def parse_num(text: str) -> float:
    """Malformed numeric text ("1.2.3", ".") reads as 0."""
    try:
        return float(text)
    except ValueError:
        return 0.0


def format_num(x: float) -> str:
    if math.isfinite(x) and x == int(x) and abs(x) < 1e15:
        return str(int(x))
    return f"{x:.12g}"


def _pow(a: float, b: float) -> float:
    return math.pow(a, b)


# (operator symbols, fn) in pass order
CALC_PASSES: Tuple[Tuple[str, Callable], ...] = (
    ("!^", _pow),
    ("*", operator.mul),
    ("/", operator.truediv),
    ("+", operator.add),
    ("-", operator.sub),
)

CONDITION_PASSES: Tuple[Tuple[str, Callable], ...] = (
    ("%", math.fmod),
    (">", operator.gt),
    ("<", operator.lt),
)


def tokenize(text: str, ops: str) -> List[Token]:
    out: List[Token] = []
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        signed = (
            ch == "-"
            and i + 1 < n
            and text[i + 1] in _NUM_CHARS
            and (not out or out[-1].kind == OP)
        )
        if ch in _NUM_CHARS or signed:
            j = i + 1
            while j < n and text[j] in _NUM_CHARS:
                j += 1
            out.append(Token(NUM, text[i:j]))
            i = j
            continue
        if ch in ops:
            out.append(Token(OP, ch))
        elif out and out[-1].kind == TXT:
            out[-1].text += ch
        else:
            out.append(Token(TXT, ch))
        i += 1
    return out


def _result_token(res) -> Token:
    if isinstance(res, bool):
        return Token(TXT, "true" if res else "false")
    return Token(NUM, format_num(res), float(res))


def fold(tokens: Sequence[Token], symbols: str, fn: Callable) -> List[Token]:
    out: List[Token] = []
    for tok in tokens:
        if (
            tok.kind == NUM
            and len(out) >= 2
            and out[-1].kind == OP
            and out[-1].text in symbols
            and out[-2].kind == NUM
        ):
            out.pop()
            lhs = out.pop()
            try:
                res = fn(lhs.number(), tok.number())
            except (ZeroDivisionError, ValueError, OverflowError) as e:
                raise ReduceError(str(e)) from e
            out.append(_result_token(res))
        else:
            out.append(tok)
    return out


def reduce_text(text: str, passes) -> str:
    ops = "".join(symbols for symbols, _ in passes)
    tokens = tokenize(text, ops)
    for symbols, fn in passes:
        tokens = fold(tokens, symbols, fn)
    return "".join(t.text for t in tokens)


def strip_ws(text: str) -> str:
    return "".join(text.split())


def calc(text: str) -> str:
    return reduce_text(strip_ws(text), CALC_PASSES)


def condition(text: str) -> bool:
    s = reduce_text(strip_ws(text), CONDITION_PASSES)

    # raw text equality, split on the last '=='
    if "==" in s:
        left, right = s.rsplit("==", 1)
        if left and right:
            s = "true" if left == right else "false"

    if s == "true":
        return True
    if s == "false":
        return False
    raise ReduceError(f"Not a boolean: {s!r}")
