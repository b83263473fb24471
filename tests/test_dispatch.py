"""Tests for segment splitting, dispatch and the execute boundary."""

from shellbox.core import CommandError, Core


def test_single_command(run):
    assert run("return hello world") == "hello world"


def test_whitespace_is_collapsed(run):
    assert run("return   a    b ") == "a b"


def test_unknown_command(run):
    assert run("nope") == "Command not found!"
    assert run("") == "Command not found!"


def test_compound_outputs_are_joined(run):
    assert run("return a && return b") == "a<br />b"


def test_unmatched_segments_are_skipped(run):
    assert run("return a && nope && return b") == "a<br />b"


def test_segments_expand_after_earlier_segments_ran(run):
    assert run("set x 1 && return <x>") == "Success<br />1"


def test_handler_error_becomes_segment_output(run):
    assert run("random && return ok") == (
        "Minimum val not specified. Type |help random| for further info.<br />ok"
    )


def test_execute_is_logged(core):
    core.execute("return hi")
    assert core.log[-2:] == [{"in": "return hi"}, {"out": "hi"}]


def test_log_is_bounded(core):
    core.log_limit = 4
    for i in range(10):
        core.execute(f"return {i}")
    assert len(core.log) == 4
    assert core.log[-1] == {"out": "9"}


def test_unexpected_exception_does_not_escape():
    core = Core()

    def boom(core, *args):
        raise RuntimeError("boom")

    core.register("boom", boom)
    assert core.execute("boom") == "Error: boom"


def test_recursion_is_bounded(run):
    run("fn loop() exec loop()")
    assert run("exec loop()") == "Recursion depth exceeded (max_depth=48)"


def test_command_error_is_a_value_error():
    assert issubclass(CommandError, ValueError)
