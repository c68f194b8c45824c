"""The ``io`` library: opening, reading, writing and seeking files."""

from __future__ import annotations

import io
import os
import sys

from .argcheck import check_userdata, print_err_bad_arg_type
from .errors import YaslTypeError, YaslValueError
from .values import UserData, YaslType

FILE_NAME = "io.file"
_FILE_PRE = "io.file"
MSG_VALUE_ERROR = "ValueError: "

_WHENCE = {"set": os.SEEK_SET, "cur": os.SEEK_CUR, "end": os.SEEK_END}


def _is_binary(f) -> bool:
    return isinstance(f, (io.RawIOBase, io.BufferedIOBase))


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogateescape")


def _decode(data) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode("utf-8", "surrogateescape")
    return data


def _value_error(state, message: str) -> None:
    state.print_err(MSG_VALUE_ERROR + message)
    state.throw(YaslValueError)


def _type_error(state, fn_name: str, position: int, expected: str = "str") -> None:
    print_err_bad_arg_type(state, fn_name, position, expected, state.stack.typename())
    state.throw(YaslTypeError)


def _pop_file(state, fn_name: str, position: int):
    top = state.stack.peek()
    if not isinstance(top, UserData) or top.tag != FILE_NAME:
        _type_error(state, fn_name, position, FILE_NAME)
    return state.pop().data


def _push_file(state, f) -> None:
    state.push_userdata(f, FILE_NAME)
    state.load_mt(FILE_NAME)
    state.set_mt()


def _open(state) -> int:
    if state.stack.is_a(YaslType.UNDEF):
        mode = "r"
    elif state.stack.is_a(YaslType.STR):
        mode = state.stack.peek()
        if not 1 <= len(mode) <= 2 or (len(mode) == 2 and mode[1] != "+"):
            _value_error(state, f"io.open was passed invalid mode: {mode}.")
    else:
        _type_error(state, "io.open", 1)
    state.pop()

    if not state.stack.is_a(YaslType.STR):
        _type_error(state, "io.open", 0)
    filename = state.pop()

    if mode[0] not in ("r", "w", "a"):
        _value_error(state, f"io.open was passed invalid mode: {mode}.")

    try:
        f = open(filename, mode[0] + ("+" if len(mode) == 2 else "") + "b")
    except OSError:
        state.push(None)
    else:
        _push_file(state, f)
    return 1


def _read_all(f) -> str:
    try:
        f.seek(0, os.SEEK_END)
        f.seek(0)
    except (OSError, ValueError):
        pass
    return _decode(f.read())


def _read_line(f) -> str:
    line = _decode(f.readline())
    return line[:-1] if line.endswith("\n") else line


def _read(state) -> int:
    if state.stack.is_a(YaslType.UNDEF):
        mode = "l"
    elif state.stack.is_a(YaslType.STR):
        mode = state.stack.peek()
        if len(mode) != 1:
            _value_error(state, f"{_FILE_PRE}.read was passed invalid mode: {mode}.")
    else:
        _type_error(state, f"{_FILE_PRE}.read", 1)
    state.pop()

    f = _pop_file(state, f"{_FILE_PRE}.read", 0)

    if mode == "a":
        state.push(_read_all(f))
    elif mode == "l":
        state.push(_read_line(f))
    else:
        _value_error(state, f"{_FILE_PRE}.read was passed invalid mode: {mode}.")
    return 1


def _write(state) -> int:
    f = check_userdata(state, FILE_NAME, f"{_FILE_PRE}.write", 0)
    if not state.stack.is_a(YaslType.STR):
        _type_error(state, f"{_FILE_PRE}.write", 1)
    text = state.pop().split("\0", 1)[0]

    if not text:
        written = 0
    elif _is_binary(f):
        written = f.write(_encode(text))
    else:
        written = f.write(text)
    state.push(written if written is not None else 0)
    return 1


def _flush(state) -> int:
    f = _pop_file(state, f"{_FILE_PRE}.flush", 0)
    try:
        f.flush()
    except (OSError, ValueError):
        state.push(False)
    else:
        state.push(True)
    return 1


def _seek(state) -> int:
    if state.stack.is_a(YaslType.UNDEF):
        offset = 0
        state.pop()
    elif state.stack.is_a(YaslType.INT):
        offset = state.pop()
    else:
        _type_error(state, f"{_FILE_PRE}.seek", 2, "int")

    if state.stack.is_a(YaslType.UNDEF):
        whence = os.SEEK_SET
        state.pop()
    elif state.stack.is_a(YaslType.STR):
        name = state.pop()
        if name not in _WHENCE:
            _value_error(
                state,
                f"{_FILE_PRE}.seek expected arg in position 1 to be one of "
                f"'set', 'cur', or 'end', got '{name}'.",
            )
        whence = _WHENCE[name]
    else:
        _type_error(state, f"{_FILE_PRE}.seek", 1)

    f = _pop_file(state, f"{_FILE_PRE}.seek", 0)
    try:
        f.seek(offset, whence)
    except (OSError, ValueError, OverflowError):
        state.push(False)
    else:
        state.push(True)
    return 1


def _close(state) -> int:
    f = _pop_file(state, f"{_FILE_PRE}.close", 0)
    try:
        f.close()
    except OSError:
        state.push(False)
    else:
        state.push(True)
    return 1


_FILE_METHODS = (
    ("read", _read, 2),
    ("write", _write, 2),
    ("seek", _seek, 3),
    ("flush", _flush, 1),
    ("close", _close, 1),
)


def declare(state) -> None:
    """Register the file metatable and define the ``io`` global."""
    state.push_table()
    state.register_mt(FILE_NAME)

    state.load_mt(FILE_NAME)
    for name, fn, num_args in _FILE_METHODS:
        state.push(name)
        state.push_function(fn, num_args)
        state.table_set()
    state.pop()

    state.push_table()
    state.declare_global("io")
    state.set_global("io")

    state.load_global("io")
    state.push("open")
    state.push_function(_open, 2)
    state.table_set()

    for name, stream in (("stdin", sys.stdin), ("stdout", sys.stdout), ("stderr", sys.stderr)):
        state.push(name)
        _push_file(state, stream)
        state.table_set()
    state.pop()