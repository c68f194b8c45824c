"""The ``mt`` library: reading and replacing metatables."""

from __future__ import annotations

from .argcheck import MSG_TYPE_ERROR, print_err_bad_arg_type
from .errors import YaslTypeError
from .values import YaslType, type_of

_MT_TARGETS = (YaslType.USERDATA, YaslType.LIST, YaslType.TABLE)


def _getmt(state) -> int:
    value = state.pop()
    if type_of(value) in _MT_TARGETS:
        state.push(value.mt)
    else:
        state.push(state.builtin_metatables.get(type_of(value)))
    return 1


def _setmt(state) -> int:
    if not state.stack.is_a(YaslType.TABLE):
        print_err_bad_arg_type(state, "mt.set", 1, "table", state.stack.typename())
        state.throw(YaslTypeError)

    mt = state.pop()
    target = state.stack.peek()
    if type_of(target) not in _MT_TARGETS:
        state.print_err(
            f"{MSG_TYPE_ERROR}cannot set metatable for value of type {state.stack.typename()}."
        )
        state.throw(YaslTypeError)
    target.mt = mt
    return 1


def declare(state) -> None:
    """Define the ``mt`` global with ``get`` and ``set``."""
    state.declare_global("mt")
    state.push_table()
    state.set_global("mt")

    state.load_global("mt")
    state.push("get")
    state.push_function(_getmt, 1)
    state.table_set()

    state.push("set")
    state.push_function(_setmt, 2)
    state.table_set()
    state.pop()