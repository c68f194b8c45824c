import pytest

from yasl import collections_lib
from yasl.errors import YaslTypeError
from yasl.state import State
from yasl.values import List, Table, UserData


@pytest.fixture
def state():
    s = State()
    s.err.to_string()
    collections_lib.declare(s)
    return s


def call(state, fn, *args):
    state.push(fn)
    for arg in args:
        state.push(arg)
    count = state.function_call(len(args))
    return state.pop() if count else None


def ctor(state, name):
    state.load_global("collections")
    table = state.pop()
    return table[name]


def method(state, name):
    return state.metatables[collections_lib.SET_NAME][name]


def make_set(state, *items):
    return call(state, ctor(state, "set"), *items)


def items_of(state, s):
    return list(call(state, method(state, "tolist"), s))


def test_list_constructor_keeps_argument_order(state):
    result = call(state, ctor(state, "list"), 1, "a", 2.5)
    assert isinstance(result, List)
    assert list(result) == [1, "a", 2.5]


def test_table_constructor_pairs_arguments(state):
    result = call(state, ctor(state, "table"), "a", 1, "b", 2)
    assert isinstance(result, Table)
    assert dict(result.items()) == {"a": 1, "b": 2}


def test_table_constructor_odd_arguments_gets_undef(state):
    result = call(state, ctor(state, "table"), "a", 1, "b")
    assert result["b"] is None
    assert result["a"] == 1


def test_table_constructor_rejects_mutable_key(state):
    with pytest.raises(YaslTypeError):
        call(state, ctor(state, "table"), List([1]), 1)
    assert "unable to use mutable object of type list as key." in state.err.string


def test_set_has_tag_and_metatable(state):
    s = make_set(state, 1, 2, 3)
    assert isinstance(s, UserData)
    assert s.tag == "collections.set"
    assert s.mt is state.metatables["collections.set"]


def test_set_deduplicates(state):
    s = make_set(state, 1, 1, 2)
    assert call(state, method(state, "__len"), s) == 2
    assert sorted(items_of(state, s)) == [1, 2]


def test_set_from_single_list(state):
    s = make_set(state, List([4, 5, 4]))
    assert sorted(items_of(state, s)) == [4, 5]


def test_set_from_list_with_mutable_item(state):
    with pytest.raises(YaslTypeError):
        make_set(state, List([List()]))


def test_set_rejects_mutable_argument(state):
    with pytest.raises(YaslTypeError):
        make_set(state, 1, Table())
    assert "as key." in state.err.string


def test_tostr_empty(state):
    assert call(state, method(state, "tostr"), make_set(state)) == "set()"


def test_tostr_single_element(state):
    assert call(state, method(state, "tostr"), make_set(state, "x")) == "set(x)"


def test_membership(state):
    s = make_set(state, 1, "b")
    get = method(state, "__get")
    assert call(state, get, s, 1) is True
    assert call(state, get, s, "b") is True
    assert call(state, get, s, 2) is False
    assert call(state, get, s, 1.0) is False


def test_union_intersection_difference(state):
    left = make_set(state, 1, 2, 3)
    right = make_set(state, 2, 3, 4)
    assert set(items_of(state, call(state, method(state, "__bor"), left, right))) == {1, 2, 3, 4}
    assert set(items_of(state, call(state, method(state, "__band"), left, right))) == {2, 3}
    assert set(items_of(state, call(state, method(state, "__bandnot"), left, right))) == {1}
    assert set(items_of(state, call(state, method(state, "__bxor"), left, right))) == {1, 4}


def test_binop_does_not_modify_operands(state):
    left = make_set(state, 1, 2)
    right = make_set(state, 2, 3)
    call(state, method(state, "__bor"), left, right)
    assert sorted(items_of(state, left)) == [1, 2]
    assert sorted(items_of(state, right)) == [2, 3]


def test_equality(state):
    eq = method(state, "__eq")
    assert call(state, eq, make_set(state, 1, 2), make_set(state, 2, 1)) is True
    assert call(state, eq, make_set(state, 1, 2), make_set(state, 1, 3)) is False
    assert call(state, eq, make_set(state, 1), make_set(state, 1, 2)) is False


def test_subset_comparisons(state):
    small = make_set(state, 1)
    big = make_set(state, 1, 2)
    other = make_set(state, 3)
    assert call(state, method(state, "__lt"), small, big) is True
    assert call(state, method(state, "__le"), small, small) is True
    assert call(state, method(state, "__lt"), small, small) is False
    assert call(state, method(state, "__gt"), big, small) is True
    assert call(state, method(state, "__ge"), big, big) is True
    assert call(state, method(state, "__gt"), big, other) is False
    assert call(state, method(state, "__le"), other, big) is False


def test_add_returns_set_and_inserts(state):
    s = make_set(state)
    result = call(state, method(state, "add"), s, 7)
    assert result is s
    assert items_of(state, s) == [7]


def test_add_mutable_raises(state):
    with pytest.raises(YaslTypeError):
        call(state, method(state, "add"), make_set(state), List())


def test_remove_returns_value(state):
    s = make_set(state, 1, 2)
    assert call(state, method(state, "remove"), s, 1) == 1
    assert items_of(state, s) == [2]


def test_copy_is_independent(state):
    s = make_set(state, 1)
    dup = call(state, method(state, "copy"), s)
    call(state, method(state, "add"), dup, 2)
    assert items_of(state, s) == [1]
    assert sorted(items_of(state, dup)) == [1, 2]


def test_clear_empties(state):
    s = make_set(state, 1, 2, 3)
    call(state, method(state, "clear"), s)
    assert call(state, method(state, "__len"), s) == 0


def test_method_rejects_non_set(state):
    with pytest.raises(YaslTypeError):
        call(state, method(state, "__len"), 5)
    assert state.err.string == (
        "TypeError: collections.set.__len expected arg in position 0 "
        "to be of type collections.set, got arg of type int.\n"
    )


def test_binop_checks_right_operand_first(state):
    with pytest.raises(YaslTypeError):
        call(state, method(state, "__bor"), 1, "x")
    assert "position 1" in state.err.string