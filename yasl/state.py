"""Interpreter state: the value stack, globals, metatables and output sinks."""

from __future__ import annotations

import sys
from typing import Callable, Optional

from .errors import YaslError, YaslTypeError, YaslValueError
from .output import Output
from .stack import Stack
from .values import CFunction, List, Table, UserData, YaslType, type_of, typename

VERSION = "v0.11.8"

_MT_TARGETS = (YaslType.USERDATA, YaslType.TABLE, YaslType.LIST)


class State:
    """Everything a host needs to exchange values with scripts.

    Host functions receive the state, read their arguments from its stack
    and push their results back onto it.
    """

    def __init__(self, out=None, err=None):
        self.stack = Stack()
        self.globals = Table()
        self.declared: set[str] = set()
        self.metatables: dict[str, Table] = {}
        self.builtin_metatables: dict[YaslType, Optional[Table]] = {
            YaslType.TABLE: None,
            YaslType.LIST: None,
        }
        self.out = Output(out)
        self.err = Output(err if err is not None else sys.stderr)
        self._vargs: list[Optional[int]] = []
        self._last_error: Optional[str] = None

        self.declare_global("__VERSION__")
        self.stack.push(VERSION)
        self.set_global("__VERSION__")

    # Basic stack access -------------------------------------------------

    def push(self, value) -> None:
        """Push any runtime value."""
        self.stack.push(value)

    def pop(self):
        """Pop and return the top value."""
        return self.stack.pop()

    def _top_is(self, kind: YaslType) -> bool:
        return len(self.stack) > 0 and type_of(self.stack.peek()) is kind

    # Globals ------------------------------------------------------------

    def declare_global(self, name: str) -> None:
        """Make ``name`` available as a global."""
        self.declared.add(name)

    def set_global(self, name: str) -> None:
        """Pop the top of the stack into the declared global ``name``."""
        if name not in self.declared:
            raise YaslError(f"global {name} has not been declared.")
        self.globals[name] = self.stack.peek()
        self.stack.pop()

    def load_global(self, name: str) -> None:
        """Push the value of global ``name``."""
        try:
            value = self.globals[name]
        except KeyError:
            raise YaslError(f"undefined global {name}.") from None
        self.stack.push(value)

    # Metatables ---------------------------------------------------------

    def register_mt(self, name: str) -> None:
        """Pop the top of the stack and register it as metatable ``name``."""
        self.metatables[name] = self.stack.peek()
        self.stack.pop()

    def load_mt(self, name: str) -> None:
        """Push the metatable registered as ``name``."""
        try:
            mt = self.metatables[name]
        except KeyError:
            raise YaslError(f"undefined metatable {name}.") from None
        self.stack.push(mt)

    def set_mt(self) -> None:
        """Pop a table (or undef) and make it the metatable of the value below."""
        if not self._top_is(YaslType.TABLE) and not self._top_is(YaslType.UNDEF):
            raise YaslTypeError(
                f"metatable must be a table or undef, got {self.stack.typename()}."
            )
        mt = self.stack.pop()
        if not len(self.stack) or type_of(self.stack.peek()) not in _MT_TARGETS:
            actual = self.stack.typename() if len(self.stack) else "undef"
            raise YaslTypeError(f"cannot set metatable for value of type {actual}.")
        self.stack.peek().mt = mt

    # Constructors -------------------------------------------------------

    def push_table(self) -> None:
        """Push a new empty table."""
        self.stack.push(Table(mt=self.builtin_metatables[YaslType.TABLE]))

    def push_list(self) -> None:
        """Push a new empty list."""
        self.stack.push(List(mt=self.builtin_metatables[YaslType.LIST]))

    def push_userdata(self, data, tag: str) -> None:
        """Push host data tagged with ``tag``."""
        self.stack.push(UserData(data, tag))

    def push_function(self, fn: Callable[["State"], int], num_args: int) -> None:
        """Push a host function taking ``num_args`` arguments (-1: variadic)."""
        self.stack.push(CFunction(fn, num_args))

    # Tables and lists ---------------------------------------------------

    def table_next(self) -> bool:
        """Pop a key; push the next key and value of the table below, if any."""
        key = self.stack.pop()
        if not self._top_is(YaslType.TABLE):
            return False
        item = self.stack.peek().next_item(key)
        if item is None:
            return False
        next_key, value = item
        self.stack.push(next_key)
        self.stack.push(value)
        return True

    def table_set(self) -> None:
        """Pop a value and a key and insert them into the table below."""
        value = self.stack.pop()
        key = self.stack.pop()
        table = self.stack.peek()
        if type_of(table) is not YaslType.TABLE:
            raise YaslTypeError(f"expected table, got {typename(table)}.")
        table.insert(key, value)

    def list_get(self, n: int) -> None:
        """Push element ``n`` of the list on top of the stack."""
        if not self._top_is(YaslType.LIST):
            actual = self.stack.typename() if len(self.stack) else "undef"
            raise YaslTypeError(f"expected list, got {actual}.")
        ls = self.stack.peek()
        if not -len(ls) <= n < len(ls):
            raise YaslValueError(f"unable to index list of length {len(ls)} with index {n}.")
        self.stack.push(ls[n])

    def list_push(self) -> None:
        """Pop a value and append it to the list below."""
        value = self.stack.pop()
        if not self._top_is(YaslType.LIST):
            actual = self.stack.typename() if len(self.stack) else "undef"
            raise YaslTypeError(f"expected list, got {actual}.")
        self.stack.peek().append(value)

    def length(self) -> None:
        """Pop a value and push its length."""
        value = self.stack.pop()
        if type_of(value) not in (YaslType.STR, YaslType.LIST, YaslType.TABLE):
            raise YaslTypeError(f"len not supported for operand of type {typename(value)}.")
        self.stack.push(len(value))

    # Calls --------------------------------------------------------------

    def function_call(self, n: int) -> int:
        """Call the function found below the top ``n`` values; return its result count."""
        stack = self.stack
        base = stack.sp - n
        if base < 0:
            raise IndexError("not enough values on the stack for the call")
        old_fp = stack.fp
        stack.fp = base - 1
        fn = stack.peek_at(0)
        stack.fp = old_fp
        if not isinstance(fn, CFunction):
            raise YaslTypeError(f"{typename(fn)} is not callable.")

        fixed = -fn.num_args - 1 if fn.variadic else fn.num_args
        while n < fixed:
            stack.push(None)
            n += 1
        if not fn.variadic:
            while n > fixed:
                stack.pop()
                n -= 1
            self._vargs.append(None)
        else:
            self._vargs.append(n - fixed)

        stack.fp = base
        try:
            returned = fn(self) or 0
        finally:
            stack.fp = old_fp
            self._vargs.pop()

        available = len(stack) - (base + 1)
        count = max(0, min(returned, available))
        results = [stack.pop() for _ in range(count)]
        while len(stack) > base:
            stack.pop()
        for value in reversed(results):
            stack.push(value)
        return count

    def vargs_count(self) -> int:
        """Return the number of variadic arguments of the running function."""
        if not self._vargs or self._vargs[-1] is None:
            raise YaslError("no variadic arguments in the current call.")
        return self._vargs[-1]

    # Errors and output --------------------------------------------------

    def print_err(self, message: str) -> None:
        """Report an error message on the error sink."""
        self._last_error = message
        self.err.write(message + "\n")

    def throw(self, error) -> None:
        """Raise ``error`` (an exception or exception class) with the last message."""
        if isinstance(error, BaseException):
            raise error
        raise error(self._last_error or "Error")

    def load_printout(self) -> None:
        """Push everything collected from normal output."""
        self.stack.push(self.out.string)

    def load_printerr(self) -> None:
        """Push everything collected from error output."""
        self.stack.push(self.err.string)