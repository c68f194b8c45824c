"""The ``error`` global, which raises a script error."""

from __future__ import annotations

from .argcheck import print_err_bad_arg_type
from .errors import YaslError, YaslTypeError
from .values import YaslType


def _error(state) -> int:
    if state.stack.is_a(YaslType.UNDEF):
        state.print_err("Error")
        state.throw(YaslError)

    message = state.stack.peek_str()
    if message is None:
        print_err_bad_arg_type(state, "error", 0, "str", state.stack.typename_at(0))
        state.throw(YaslTypeError)

    state.print_err(f"Error: {message}")
    state.throw(YaslError)
    return 0


def declare(state) -> None:
    """Define the ``error`` global."""
    state.declare_global("error")
    state.push_function(_error, 1)
    state.set_global("error")