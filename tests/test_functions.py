"""Tests for fn / exec."""


def test_declare_and_call(run):
    assert run("fn greet(name) return Hello --name") == "Success!"
    assert run("exec greet(World)") == "Hello World"


def test_several_params(run):
    run("fn pair(a,b) return p1: --a, p2: --b")
    assert run("exec pair(1,2)") == "p1: 1, p2: 2"


def test_missing_argument_binds_empty(run):
    run("fn two(a,b) return [--a] [--b]")
    assert run("exec two(1)") == "[1] []"


def test_longer_param_names_bind_first(run):
    run("fn p(a,ab) return --ab --a")
    assert run("exec p(1,2)") == "2 1"


def test_empty_param_list(run):
    run("fn hi() return hi there")
    assert run("exec hi()") == "hi there"


def test_separator_escape_in_body(run):
    run("fn both() return one __AND__ return two")
    assert run("exec both()") == "one<br />two"


def test_arguments_are_eval_expanded(run):
    run("fn greet(name) return Hello --name")
    assert run("exec greet(eval(calc 2 + 3))") == "Hello 5"


def test_first_declaration_wins(run):
    run("fn f() return first")
    run("fn f() return second")
    assert run("exec f()") == "first"
    assert run("list fn") == "f | f"


def test_unknown_function_is_null(run):
    assert run("exec ghost()") == "null"


def test_declaration_errors(run):
    assert run("fn") == "Function name not specified! Type |help fn| for further info."
    assert run("fn bad") == "Invalid fn declaration! Type |help fn| for further info."
    assert run("fn f(x)") == "No command was specified! Type |help fn| for further info."


def test_builtin_names_are_reserved(run):
    assert run("fn calc(x) return x") == "Function name 'calc' is reserved!"
    assert run("fn theme() return x") == "Function name 'theme' is reserved!"
    assert run("list fn") == ""


def test_invalid_exec(run):
    assert run("exec ghost") == "Invalid exec declaration! Type |help exec| for further info."


def test_declared_params_are_trimmed(core):
    from shellbox.topics import functions

    functions.fn(core, "pad( a , b )", "return", "--a/--b")
    assert core.fns.get("pad").params == ("a", "b")
    assert core.execute("exec pad(x,y)") == "x/y"
