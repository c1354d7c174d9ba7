import pytest

from lisper import errors
from lisper.types import Environment, Symbol, Operator, Keyword, If, Unit, Closure
from lisper.evaluation.evaluator import evaluate

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def env():
    env = Environment()
    env.set(Symbol("x"), 42)
    env.set(Symbol("y"), 100)
    env.set(Symbol("flag"), True)
    return env

# -----------------------------------------------------
# Tests
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(-7, env) == -7
    assert evaluate(True, env) is True
    assert evaluate(False, env) is False


def test_symbol_lookup(env):
    assert evaluate(Symbol("x"), env) == 42
    assert evaluate(Symbol("flag"), env) is True
    with pytest.raises(errors.UndefinedVariableError):
        evaluate(Symbol("z"), env)


def test_empty_list_is_identity(env):
    assert evaluate([], env) == []


def test_simple_operator_call(env):
    assert evaluate([Operator("+"), Symbol("x"), 8], env) == 50


def test_list_with_literal_head_evaluates_each_element(env):
    expr = [1, Symbol("x"), [Operator("*"), 2, 3], True]
    assert evaluate(expr, env) == [1, 42, 6, True]


def test_list_with_nested_list_head(env):
    expr = [[Operator("+"), 1, 1], [2, 3]]
    assert evaluate(expr, env) == [2, [2, 3]]


def test_list_evaluation_stops_at_first_error(env, capsys):
    expr = [1, [Keyword("print"), 1], Symbol("missing"), [Keyword("print"), 2]]
    with pytest.raises(errors.UndefinedVariableError):
        evaluate(expr, env)
    assert capsys.readouterr().out == "1\n"


def test_if_expression(env):
    assert evaluate([If, True, 1, 2], env) == 1
    assert evaluate([If, False, 1, 2], env) == 2
    assert evaluate([If, Symbol("flag"), Symbol("x"), Symbol("missing")], env) == 42


def test_if_requires_boolean_condition(env):
    with pytest.raises(errors.IllegalArgumentError) as exc:
        evaluate([If, 1, 1, 2], env)
    assert exc.value.name == "if"


@pytest.mark.parametrize("expr", [[If, True, 1], [If, True, 1, 2, 3], [If]])
def test_if_arity(env, expr):
    with pytest.raises(errors.ArgumentCountError) as exc:
        evaluate(expr, env)
    assert exc.value.expected == 4


def test_def_and_lookup(env):
    assert evaluate([Keyword("def"), Symbol("z"), [Operator("+"), 1, 2]], env) is Unit
    assert evaluate(Symbol("z"), env) == 3


def test_def_overwrites_in_current_frame(env):
    evaluate([Keyword("def"), Symbol("x"), 1], env)
    assert env.vars["x"] == 1


def test_def_requires_symbol_name(env):
    with pytest.raises(errors.IllegalArgumentError):
        evaluate([Keyword("def"), 5, 1], env)
    with pytest.raises(errors.ArgumentCountError):
        evaluate([Keyword("def"), Symbol("a")], env)


def test_def_failure_leaves_no_binding(env):
    with pytest.raises(errors.UndefinedVariableError):
        evaluate([Keyword("def"), Symbol("a"), Symbol("nope")], env)
    assert env.get("a") is None


def test_lambda_produces_closure_capturing_current_env(env):
    closure = evaluate(
        [Keyword("lambda"), [Symbol("a")], [Operator("+"), Symbol("a"), Symbol("x")]], env
    )
    assert isinstance(closure, Closure)
    assert closure.env is env
    assert closure.formals == [Symbol("a")]


def test_bare_closure_evaluates_to_unit(env):
    closure = Closure([], [Operator("+"), 1, 1], env)
    assert evaluate(closure, env) is Unit


def test_closure_as_value_is_unimplemented(env):
    env.set("f", Closure([], [1], env, name="f"))
    with pytest.raises(errors.UnimplementedError):
        evaluate(Symbol("f"), env)


@pytest.mark.parametrize("atom", [If, Operator("+"), Keyword("def"), Unit])
def test_markers_outside_call_position_are_unimplemented(env, atom):
    with pytest.raises(errors.UnimplementedError):
        evaluate(atom, env)


@pytest.mark.parametrize("keyword", ["len", "concat"])
def test_reserved_keywords_are_unimplemented(env, keyword):
    with pytest.raises(errors.UnimplementedError):
        evaluate([Keyword(keyword), 1], env)


def test_calling_unbound_symbol(env):
    with pytest.raises(errors.UndefinedFunctionError) as exc:
        evaluate([Symbol("nope"), 1], env)
    assert exc.value.name == "nope"


def test_calling_non_closure(env):
    with pytest.raises(errors.UndefinedFunctionError) as exc:
        evaluate([Symbol("x"), 1], env)
    assert exc.value.name == "x"


def test_closure_call_binds_parameters(env):
    env.set("add", Closure([Symbol("a"), Symbol("b")], [Operator("+"), Symbol("a"), Symbol("b")], env))
    assert evaluate([Symbol("add"), 2, Symbol("x")], env) == 44
