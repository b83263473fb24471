"""Tests for inline directive expansion."""

import pytest


def test_escapes(core):
    assert core.expand("a\\nb\\_c") == "a<br />b c"


def test_variable_reference(core):
    core.vars.set("x", "1")
    assert core.expand("<x>!") == "1!"
    assert core.expand("<nope>") == "null"


def test_variable_reference_uses_first_binding(core):
    core.vars.set("x", "first")
    core.vars.set("x", "second")
    assert core.expand("<x> <x>") == "first first"


def test_line_break_token_is_not_a_variable(core):
    assert core.expand("a<br />b") == "a<br />b"


def test_random(core, monkeypatch):
    monkeypatch.setattr("random.random", lambda: 0.5)
    assert core.expand(":random 10-20:") == "15"


def test_random_stays_in_range(core):
    for _ in range(50):
        assert 3 <= int(core.expand(":random 3-7:")) < 7


def test_var_function(core):
    core.vars.set("name", "Ada")
    assert core.expand("hi var(name), var(ghost)") == "hi Ada, null"


@pytest.mark.parametrize("text,expected", [
    ("replace(hello,lo,loooo)", "helloooo"),
    ("replace(a b c,:space:,:nothing:)", "abc"),
    ("replace(a-b-c,-,+)", "a+b+c"),
    ("replace(a,b)", "Invalid replace command!"),
])
def test_replace_function(core, text, expected):
    assert core.expand(text) == expected


def test_expansion_is_single_pass(core):
    # a value that looks like a directive is not expanded again
    core.vars.set("a", "<b>")
    core.vars.set("b", "deep")
    assert core.expand("<a>") == "<b>"


def test_resolved_text_is_unchanged(core):
    text = "plain (text) with <br /> tokens, commas and 3 < 4"
    assert core.expand(text) == text
    assert core.expand(core.expand(text)) == text


def test_eval_splices_command_output(core):
    assert core.expand_eval("x=eval(calc 2 * 3);") == "x=6;"


def test_eval_ends_at_first_close_paren(core):
    assert core.expand_eval("eval(return a) b)") == "a b)"
