"""The value stack shared by the interpreter and host functions."""

from __future__ import annotations

from typing import Optional

from .values import YaslType, type_of, typename


class Stack:
    """A value stack with a frame pointer for indexing function arguments.

    ``peek_at(n)`` addresses the value ``n`` places above the frame pointer,
    which is where the ``n``-th argument of the running function lives.
    """

    def __init__(self):
        self._items: list = []
        self.fp = -1

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    @property
    def sp(self) -> int:
        """Index of the top of the stack (-1 when empty)."""
        return len(self._items) - 1

    def push(self, value) -> None:
        self._items.append(value)

    def pop(self):
        if not self._items:
            raise IndexError("Cannot pop from empty stack.")
        return self._items.pop()

    def peek(self):
        if not self._items:
            raise IndexError("Cannot peek at empty stack.")
        return self._items[-1]

    def peek_at(self, n: int):
        index = self.fp + 1 + n
        if index < 0 or index >= len(self._items):
            raise IndexError(f"no value at stack position {n}")
        return self._items[index]

    def dup_top(self) -> None:
        if not self._items:
            raise IndexError("Cannot duplicate top of empty stack.")
        self._items.append(self._items[-1])

    def typename(self) -> str:
        return typename(self.peek())

    def typename_at(self, n: int) -> str:
        return typename(self.peek_at(n))

    def is_a(self, kind: YaslType, n: Optional[int] = None) -> bool:
        """Check the kind of the top value, or of position ``n`` if given."""
        value = self.peek() if n is None else self.peek_at(n)
        return type_of(value) is kind

    def _pop_if(self, kind: YaslType, default):
        if self._items and type_of(self._items[-1]) is kind:
            return self._items.pop()
        return default

    def pop_int(self) -> int:
        """Pop and return an int; if the top is not an int, return 0 and leave it."""
        return self._pop_if(YaslType.INT, 0)

    def pop_float(self) -> float:
        """Pop and return a float; if the top is not a float, return 0.0 and leave it."""
        return self._pop_if(YaslType.FLOAT, 0.0)

    def pop_bool(self) -> bool:
        """Pop and return a bool; if the top is not a bool, return False and leave it."""
        return self._pop_if(YaslType.BOOL, False)

    def peek_str(self) -> Optional[str]:
        """Return the top value if it is a str, else None."""
        if self._items and isinstance(self._items[-1], str):
            return self._items[-1]
        return None

    def pop_str(self) -> Optional[str]:
        """Pop the top value, returning it if it was a str, else None."""
        value = self.peek_str()
        self.pop()
        return value