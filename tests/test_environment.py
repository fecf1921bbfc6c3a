import pytest

from teddy.types.environment import Environment
from teddy.types.errors import TeddyTypeError, TeddyUnboundSymbol
from teddy.types.expr import qexpr
from teddy.types.lambda_fn import Lambda
from teddy.types.symbol import Symbol

x, y = Symbol("x"), Symbol("y")


def test_define_and_lookup():
    env = Environment()
    env.define(x, 1)
    assert env.lookup(x) == 1


def test_lookup_walks_parent_chain():
    root = Environment()
    root.define(x, 1)
    child = Environment(outer=Environment(outer=root))
    assert child.lookup(x) == 1


def test_inner_binding_shadows_outer():
    root = Environment()
    root.define(x, 1)
    child = Environment(outer=root)
    child.define(x, 2)
    assert child.lookup(x) == 2
    assert root.lookup(x) == 1


def test_unbound_symbol_raises():
    env = Environment(outer=Environment())
    with pytest.raises(TeddyUnboundSymbol, match="Unbound Symbol 'x'"):
        env.lookup(x)


def test_define_requires_symbol():
    with pytest.raises(TeddyTypeError):
        Environment().define("x", 1)


def test_define_is_local():
    root = Environment()
    child = Environment(outer=root)
    child.define(x, 1)
    assert x not in root
    assert x in child


def test_define_global_walks_to_root():
    root = Environment()
    child = Environment(outer=Environment(outer=root))
    child.define_global(x, 5)
    assert root.vars == {x: 5}
    assert child.vars == {}


def test_lookup_returns_copy_of_lists():
    env = Environment()
    env.define(x, qexpr(1, qexpr(2)))
    got = env.lookup(x)
    got[1].append(3)
    got.append(4)
    assert env.lookup(x) == qexpr(1, qexpr(2))


def test_lookup_copies_closure_but_shares_env():
    captured = Environment()
    fn = Lambda(qexpr(y), qexpr(y), captured)
    env = Environment()
    env.define(x, fn)
    got = env.lookup(x)
    assert got == fn
    assert got is not fn
    assert got.formals is not fn.formals
    assert got.env is captured


def test_names_innermost_first_without_repeats():
    root = Environment()
    root.update({x: 1, y: 2})
    child = Environment(outer=root)
    child.define(y, 3)
    assert child.names() == [y, x]


def test_flatten_inner_shadows_outer():
    root = Environment()
    root.update({x: 1, y: 2})
    child = Environment(outer=root)
    child.define(y, 3)
    assert child.flatten() == {x: 1, y: 3}
