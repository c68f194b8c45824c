"""The ``collections`` library: sets and variadic list and table constructors."""

from __future__ import annotations

from typing import Callable, Iterable

from .argcheck import MSG_TYPE_ERROR, check_userdata, init_global
from .errors import YaslTypeError
from .floatfmt import float_to_str
from .values import List, Table, YaslType, type_of, typename

SET_NAME = "collections.set"
_SET_PRE = "collections.set"


def _report_mutable_key(state, value) -> None:
    state.print_err(
        f"{MSG_TYPE_ERROR}unable to use mutable object of type {typename(value)} as key."
    )
    state.throw(YaslTypeError)


def _fill(state, target: Table, values: Iterable) -> None:
    for value in values:
        try:
            target.insert(value, True)
        except YaslTypeError:
            _report_mutable_key(state, value)


def _push_set(state, items: Table) -> int:
    state.push_userdata(items, SET_NAME)
    state.load_mt(SET_NAME)
    state.set_mt()
    return 1


def _check_set(state, name: str, n: int) -> Table:
    return check_userdata(state, SET_NAME, name, n)


def _stringify(value) -> str:
    if value is None:
        return "undef"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return float_to_str(value)
    if isinstance(value, (int, str)):
        return str(value)
    return typename(value)


# Constructors ----------------------------------------------------------------


def _set_new(state) -> int:
    count = state.vargs_count()
    if count == 1 and state.stack.is_a(YaslType.LIST):
        items = Table()
        _fill(state, items, state.stack.peek())
        return _push_set(state, items)

    items = Table()
    for _ in range(count):
        value = state.stack.peek()
        _fill(state, items, (value,))
        state.pop()
    return _push_set(state, items)


def _list_new(state) -> int:
    count = state.vargs_count()
    values = [state.pop() for _ in range(count)]
    values.reverse()
    state.push(List(values, mt=state.builtin_metatables[YaslType.LIST]))
    return 1


def _table_new(state) -> int:
    count = state.vargs_count()
    if count % 2:
        state.push(None)
    table = Table()
    while count > 0:
        value = state.pop()
        key = state.pop()
        try:
            table.insert(key, value)
        except YaslTypeError:
            _report_mutable_key(state, key)
        count -= 2
    table.mt = state.builtin_metatables[YaslType.TABLE]
    state.push(table)
    return 1


# Set methods -----------------------------------------------------------------


def _set_tostr(state) -> int:
    items = _check_set(state, _SET_PRE + ".tostr", 0)
    state.push("set(" + ", ".join(_stringify(item) for item in items) + ")")
    return 1


def _set_tolist(state) -> int:
    items = _check_set(state, _SET_PRE + ".tolist", 0)
    state.push(List(items, mt=state.builtin_metatables[YaslType.LIST]))
    return 1


def _binop(name: str, combine: Callable[[Table, Table], Iterable]) -> Callable:
    def method(state) -> int:
        right = _check_set(state, f"{_SET_PRE}.{name}", 1)
        left = _check_set(state, f"{_SET_PRE}.{name}", 0)
        result = Table()
        for item in combine(left, right):
            result.insert(item, True)
        return _push_set(state, result)

    return method


def _intersection(left: Table, right: Table):
    return (item for item in left if item in right)


def _union(left: Table, right: Table):
    yield from left
    yield from right


def _symmetric_difference(left: Table, right: Table):
    yield from (item for item in left if item not in right)
    yield from (item for item in right if item not in left)


def _difference(left: Table, right: Table):
    return (item for item in left if item not in right)


def _compare(name: str, subset_side: str, length_test: Callable[[int, int], bool]) -> Callable:
    """Build a comparison: every item of one side must lie in the other."""

    def method(state) -> int:
        right = _check_set(state, f"{_SET_PRE}.{name}", 1)
        left = _check_set(state, f"{_SET_PRE}.{name}", 0)
        inner, outer = (left, right) if subset_side == "left" else (right, left)
        if not all(item in outer for item in inner):
            state.push(False)
        else:
            state.push(length_test(len(left), len(right)))
        return 1

    return method


def _set_eq(state) -> int:
    right = _check_set(state, _SET_PRE + ".__eq", 1)
    left = _check_set(state, _SET_PRE + ".__eq", 0)
    state.push(len(left) == len(right) and all(item in right for item in left))
    return 1


def _set_len(state) -> int:
    items = _check_set(state, _SET_PRE + ".__len", 0)
    state.push(len(items))
    return 1


def _set_add(state) -> int:
    value = state.pop()
    items = _check_set(state, _SET_PRE + ".add", 0)
    _fill(state, items, (value,))
    return 1


def _set_remove(state) -> int:
    value = state.pop()
    items = _check_set(state, _SET_PRE + ".remove", 0)
    items.remove(value)
    state.push(value)
    return 1


def _set_copy(state) -> int:
    items = _check_set(state, _SET_PRE + ".copy", 0)
    return _push_set(state, Table((item, True) for item in items))


def _set_clear(state) -> int:
    items = _check_set(state, _SET_PRE + ".clear", 0)
    items.clear()
    return 1


def _set_get(state) -> int:
    value = state.pop()
    items = _check_set(state, _SET_PRE + ".__get", 0)
    state.push(value in items)
    return 1


_SET_METHODS = (
    ("tostr", _set_tostr, 1),
    ("tolist", _set_tolist, 1),
    ("__band", _binop("__band", _intersection), 2),
    ("__bor", _binop("__bor", _union), 2),
    ("__bxor", _binop("__bxor", _symmetric_difference), 2),
    ("__bandnot", _binop("__bandnot", _difference), 2),
    ("__len", _set_len, 1),
    ("__eq", _set_eq, 2),
    ("__gt", _compare("__gt", "right", lambda a, b: a > b), 2),
    ("__ge", _compare("__ge", "right", lambda a, b: a >= b), 2),
    ("__lt", _compare("__lt", "left", lambda a, b: a < b), 2),
    ("__le", _compare("__le", "left", lambda a, b: a <= b), 2),
    ("add", _set_add, 2),
    ("remove", _set_remove, 2),
    ("copy", _set_copy, 1),
    ("clear", _set_clear, 1),
    ("__get", _set_get, 2),
)

_CONSTRUCTORS = (
    ("set", _set_new),
    ("list", _list_new),
    ("table", _table_new),
)


def declare(state) -> None:
    """Register the set metatable and the ``collections`` global."""
    state.push_table()
    state.register_mt(SET_NAME)

    state.load_mt(SET_NAME)
    for name, fn, num_args in _SET_METHODS:
        state.push(name)
        state.push_function(fn, num_args)
        state.table_set()
    state.pop()

    state.push_table()
    init_global(state, "collections")

    state.load_global("collections")
    for name, fn in _CONSTRUCTORS:
        state.push(name)
        state.push_function(fn, -1)
        state.table_set()
    state.pop()