import pytest

from filipe.types.environment import Binding, Environment, ScopeKind
from filipe.types.errors import FilipeNameError, FilipeTypeError
from filipe.types.null import Null
from filipe.types.type_system import TypeTag


def test_define_and_lookup():
    env = Environment()
    env.define("x", 42)
    assert env.lookup("x") == 42
    assert env.type_of("x") is TypeTag.INT
    assert env.kind is ScopeKind.GLOBAL


def test_redeclare_in_same_scope_is_name_error():
    env = Environment()
    env.define("x", 1)
    with pytest.raises(FilipeNameError):
        env.define("x", 2)


def test_shadowing_in_child_scope():
    env = Environment()
    env.define("x", 1)
    inner = env.child()
    inner.define("x", "shadow")
    assert inner.lookup("x") == "shadow"
    assert inner.type_of("x") is TypeTag.STRING
    assert env.lookup("x") == 1
    assert inner.kind is ScopeKind.BLOCK


def test_lookup_walks_outward():
    env = Environment()
    env.define("x", 1)
    inner = env.child(ScopeKind.FUNCTION).child(ScopeKind.LOOP)
    assert inner.lookup("x") == 1
    assert inner.find("x") is env
    assert not inner.has("x")
    assert inner.is_declared("x")


def test_undeclared_name():
    env = Environment()
    with pytest.raises(FilipeNameError, match="'nope' is not declared"):
        env.lookup("nope")
    assert not env.is_declared("nope")


def test_assign_writes_through_to_owning_scope():
    env = Environment()
    env.define("x", 1)
    inner = env.child()
    inner.assign("x", 5)
    assert env.lookup("x") == 5
    assert "x" not in inner.vars


def test_assign_mismatched_type():
    env = Environment()
    env.define("x", 1)
    with pytest.raises(FilipeTypeError):
        env.assign("x", "one")
    assert env.lookup("x") == 1


def test_assign_immutable():
    env = Environment()
    env.define("x", 1, mutable=False)
    with pytest.raises(FilipeNameError, match="not assignable"):
        env.assign("x", 2)


def test_declared_type_must_match_value():
    env = Environment()
    env.define("f", 1.5, TypeTag.FLOAT)
    with pytest.raises(FilipeTypeError):
        env.define("g", 1, TypeTag.STRING)
    assert not env.has("g")


def test_update_rejects_duplicates():
    env = Environment()
    env.update({"null": Binding(Null, TypeTag.NULL, mutable=False)})
    with pytest.raises(FilipeNameError):
        env.update({"null": Binding(Null, TypeTag.NULL, mutable=False)})


def test_builtins_are_registered(env):
    for name in ("print", "exit", "len", "random", "typeof", "range"):
        assert env.type_of(name) is TypeTag.FUNCTION
    assert env.lookup("true") is True
    assert env.lookup("false") is False
    assert env.lookup("null") is Null
    with pytest.raises(FilipeNameError):
        env.assign("true", False)


def test_repr_shows_chain():
    env = Environment()
    env.define("x", 1)
    inner = env.child(ScopeKind.LOOP)
    inner.define("i", 0)
    text = repr(inner)
    assert text.startswith("<Environment chain: loop {i:")
    assert "global {x:" in text
    assert str(inner).endswith(" -> ...")
