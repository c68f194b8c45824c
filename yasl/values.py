"""Runtime values: type tags and the mutable container types."""

from __future__ import annotations

from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from .errors import YaslTypeError


class YaslType(Enum):
    """Kinds of values the interpreter distinguishes."""

    UNDEF = "undef"
    FLOAT = "float"
    INT = "int"
    BOOL = "bool"
    STR = "str"
    LIST = "list"
    TABLE = "table"
    USERDATA = "userdata"
    USERPTR = "userptr"
    CFN = "fn"


_MUTABLE_KINDS = frozenset({YaslType.LIST, YaslType.TABLE})


@dataclass(eq=False)
class UserData:
    """Host data tagged with a name, optionally carrying a metatable."""

    data: Any
    tag: str
    mt: Optional["Table"] = None


@dataclass(frozen=True)
class CFunction:
    """A host function callable from scripts; ``num_args`` of -1 is variadic."""

    fn: Callable[[Any], int]
    num_args: int

    @property
    def variadic(self) -> bool:
        return self.num_args < 0

    def __call__(self, state) -> int:
        return self.fn(state)


class List(list):
    """A script list: a Python list that also carries a metatable."""

    def __init__(self, iterable=(), mt: Optional["Table"] = None):
        super().__init__(iterable)
        self.mt = mt


def type_of(value) -> YaslType:
    """Return the kind of a runtime value."""
    if value is None:
        return YaslType.UNDEF
    if isinstance(value, bool):
        return YaslType.BOOL
    if isinstance(value, int):
        return YaslType.INT
    if isinstance(value, float):
        return YaslType.FLOAT
    if isinstance(value, str):
        return YaslType.STR
    if isinstance(value, List):
        return YaslType.LIST
    if isinstance(value, Table):
        return YaslType.TABLE
    if isinstance(value, UserData):
        return YaslType.USERDATA
    if isinstance(value, CFunction):
        return YaslType.CFN
    return YaslType.USERPTR


def typename(value) -> str:
    """Return the name of a value's type as shown to script users."""
    if isinstance(value, UserData):
        return value.tag
    return type_of(value).value


def _slot(key):
    kind = type_of(key)
    if kind in _MUTABLE_KINDS:
        raise YaslTypeError(
            f"unable to use mutable object of type {typename(key)} as key."
        )
    if kind is YaslType.USERDATA or kind is YaslType.USERPTR:
        return kind, id(key)
    return kind, key


class Table(MutableMapping):
    """A script table: keys keep their kind, so ``1``, ``1.0`` and ``true`` differ."""

    def __init__(self, items=None, mt: Optional["Table"] = None):
        self._entries: dict = {}
        self.mt = mt
        if items is not None:
            pairs = items.items() if hasattr(items, "items") else items
            for key, value in pairs:
                self.insert(key, value)

    def insert(self, key, value) -> None:
        """Store ``value`` under ``key``; mutable keys raise YaslTypeError."""
        self._entries[_slot(key)] = (key, value)

    def remove(self, key) -> None:
        """Remove ``key`` if present."""
        try:
            self._entries.pop(_slot(key), None)
        except YaslTypeError:
            pass

    def next_item(self, key=None):
        """Return the (key, value) pair after ``key``, the first if ``key`` is undef, or None."""
        entries = list(self._entries.values())
        start = 0
        if key is not None:
            slots = list(self._entries)
            try:
                start = slots.index(_slot(key)) + 1
            except (ValueError, YaslTypeError):
                start = 0
        for entry_key, entry_value in entries[start:]:
            if entry_key is not None:
                return entry_key, entry_value
        return None

    def copy(self) -> "Table":
        return Table(self.items(), mt=self.mt)

    def __setitem__(self, key, value) -> None:
        self.insert(key, value)

    def __getitem__(self, key):
        try:
            return self._entries[_slot(key)][1]
        except YaslTypeError:
            raise KeyError(key) from None
        except KeyError:
            raise KeyError(key) from None

    def __delitem__(self, key) -> None:
        try:
            del self._entries[_slot(key)]
        except (KeyError, YaslTypeError):
            raise KeyError(key) from None

    def __iter__(self) -> Iterator:
        return (key for key, _ in list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Table({dict(self.items())!r})"