import pytest

from lisper import errors
from lisper.builtins import is_equal, equals, not_equals


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 1 2 3)", True),
        ("(< 2 5 3)", False),
        ("(<= 1 1 2)", True),
        ("(> 3 2 1)", True),
        ("(> 3 3)", False),
        ("(>= 8 6 8 2)", False),
        ("(>= 8 6 (+ 3 3) 2)", True),
        ("(< 4)", True),
        ("(= 2 2 (+ 2 0) (- 4 2))", True),
        ("(= 1 2)", False),
        ("(= 5)", True),
        ("(= true true)", True),
        ("(= 1 true)", False),
        ("(= (1 2) (1 2))", True),
        ("(= (1 2) (1 2 3))", False),
        ("(!= 2 (+ 1 2))", True),
        ("(!= 2 2 2)", False),
        ("(!= 2 2 3)", True),
        ("(!= 7)", False),
        ("(and true false)", False),
        ("(and true true true)", True),
        ("(and false)", False),
        ("(or false false)", False),
        ("(or false true)", True),
        ("(or false)", False),
        ("(not true)", False),
        ("(not false)", True),
        ("(not (< 1 2))", False),
        ("(if (= 4 (+ 2 2)) 42 0)", 42),
    ]
)
def test_comparison_and_logic(run, source, expected):
    result = run(source)
    assert type(result) is type(expected)
    assert result == expected


def test_ge_checks_every_adjacent_pair(run):
    # 8 >= 6 holds but 6 >= 8 does not
    assert run("(>= 8 6 8 2)") is False
    assert run("(>= 8 8 6 2)") is True


@pytest.mark.parametrize("source", ["(< 1 true)", "(>= (1) 2)", "(> false true)"])
def test_ordering_requires_integers(run, source):
    with pytest.raises(errors.IllegalArgumentError):
        run(source)


@pytest.mark.parametrize("source", ["(and true 1)", "(or 0 false)"])
def test_logic_requires_booleans(run, source):
    with pytest.raises(errors.IllegalArgumentError) as exc:
        run(source)
    assert exc.value.reason == "All arguments must be booleans"


def test_logic_operators_do_not_short_circuit(run, capsys):
    assert run("(and false (print true))") is False
    assert run("(or true (print false))") is True
    assert capsys.readouterr().out == "true\nfalse\n"


def test_not_arity(run):
    with pytest.raises(errors.ArgumentCountError) as exc:
        run("(not true false)")
    assert exc.value.name == "not"
    assert exc.value.expected == 1

    with pytest.raises(errors.ArgumentCountError):
        run("(not)")


def test_not_evaluates_its_argument(run):
    run("(def flag true)")
    assert run("(not flag)") is False


def test_not_requires_boolean(run):
    with pytest.raises(errors.IllegalArgumentError):
        run("(not 1)")


@pytest.mark.parametrize("source", ["(=)", "(!=)", "(<)", "(and)", "(or)"])
def test_operators_need_an_argument(run, source):
    with pytest.raises(errors.ArgumentCountError):
        run(source)


def test_equality_helpers_directly():
    assert is_equal(1, 1)
    assert not is_equal(1, True)
    assert not is_equal(0, False)
    assert is_equal([1, [2, True]], [1, [2, True]])
    assert equals(None, [])
    assert not_equals(None, []) is False
