"""Argument checks for host functions, reporting type errors on failure."""

from __future__ import annotations

from .errors import YaslTypeError
from .values import UserData, YaslType

MSG_TYPE_ERROR = "TypeError: "


def _is_at(state, kind: YaslType, n: int) -> bool:
    try:
        return state.stack.is_a(kind, n)
    except IndexError:
        return False


def _top_typename(state) -> str:
    return state.stack.typename() if len(state.stack) else "undef"


def _typename_at(state, n: int) -> str:
    try:
        return state.stack.typename_at(n)
    except IndexError:
        return "undef"


def init_global(state, name: str) -> None:
    """Declare global ``name`` and pop the top of the stack into it."""
    state.declare_global(name)
    state.set_global(name)


def print_err_bad_arg_type(state, fn_name: str, position: int, expected: str, actual: str) -> None:
    """Report that argument ``position`` of ``fn_name`` had the wrong type."""
    state.print_err(
        f"{MSG_TYPE_ERROR}{fn_name} expected arg in position {position} "
        f"to be of type {expected}, got arg of type {actual}."
    )


def _check(state, kind: YaslType, expected: str, name: str, n: int, actual: str):
    if not _is_at(state, kind, n):
        print_err_bad_arg_type(state, name, n, expected, actual)
        state.throw(YaslTypeError)
    return state.stack.peek_at(n)


def check_int(state, name: str, n: int) -> int:
    """Return argument ``n`` if it is an int, else raise YaslTypeError."""
    return _check(state, YaslType.INT, "int", name, n, _top_typename(state))


def check_float(state, name: str, n: int) -> float:
    """Return argument ``n`` if it is a float, else raise YaslTypeError."""
    return _check(state, YaslType.FLOAT, "float", name, n, _top_typename(state))


def check_bool(state, name: str, n: int) -> bool:
    """Return argument ``n`` if it is a bool, else raise YaslTypeError."""
    return _check(state, YaslType.BOOL, "bool", name, n, _top_typename(state))


def check_undef(state, name: str, n: int) -> None:
    """Raise YaslTypeError unless argument ``n`` is undef."""
    _check(state, YaslType.UNDEF, "undef", name, n, _typename_at(state, n))


def check_userdata(state, tag: str, name: str, n: int):
    """Return the data of argument ``n`` if it is userdata tagged ``tag``."""
    try:
        value = state.stack.peek_at(n)
    except IndexError:
        value = None
    if not isinstance(value, UserData) or value.tag != tag:
        print_err_bad_arg_type(state, name, n, tag, _typename_at(state, n))
        state.throw(YaslTypeError)
    return value.data