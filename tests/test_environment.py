import pytest

from lisper import errors
from lisper.types.environment import Environment
from lisper.types.symbol import Symbol


def test_set_and_get():
    env = Environment()
    env.set(Symbol("a"), 1)
    env.set("b", True)
    assert env.get(Symbol("a")) == 1
    assert env.get("a") == 1
    assert env.get(Symbol("b")) is True


def test_get_miss_returns_none():
    assert Environment().get("missing") is None


def test_lookup_miss_raises():
    with pytest.raises(errors.UndefinedVariableError) as exc:
        Environment().lookup(Symbol("missing"))
    assert exc.value.name == "missing"


def test_get_walks_parent_chain():
    root = Environment()
    root.set("a", 1)
    child = Environment.extend(root)
    grandchild = Environment.extend(child)
    assert grandchild.get("a") == 1
    assert grandchild.find("a") is root


def test_set_only_touches_current_frame():
    root = Environment()
    root.set("a", 1)
    child = Environment.extend(root)
    child.set("a", 2)
    assert child.get("a") == 2
    assert root.get("a") == 1


def test_extend_creates_empty_frame_sharing_parent():
    root = Environment()
    child = Environment.extend(root)
    assert child.vars == {}
    assert child.outer is root
    # the parent is shared, not copied
    root.set("late", 7)
    assert child.get("late") == 7


def test_contains_searches_the_chain():
    env = Environment()
    env.set("a", 1)
    env = Environment.extend(env)
    env.set(Symbol("b"), 2)
    assert "a" in env
    assert Symbol("b") in env
    assert "c" not in env


def test_string_forms():
    root = Environment()
    root.set("a", 1)
    child = Environment.extend(root)
    child.set("b", 2)
    assert str(child) == "{b: 2} -> ..."
    assert repr(child) == "<Environment chain: {b: 2} -> {a: 1}>"


def test_lookup_chain_is_not_cached():
    root = Environment()
    root.set("a", 1)
    child = Environment.extend(root)
    assert child.get("a") == 1
    child.set("a", 5)
    assert child.get("a") == 5
