# yasl

The runtime core of a small, dynamically typed scripting language: a value
stack, an embedding state with globals and metatables, and the standard
libraries `collections`, `error`, `io`, `math` and `mt`, written as host
functions that work on that state.

## Modules

- `yasl.state` – `State`: the value stack, globals, metatables, output sinks
  and calls into host functions.
- `yasl.stack` – `Stack`: push, pop and peek, typed pops (`pop_int`,
  `pop_float`, `pop_bool`, `pop_str`), and access to function arguments by
  position (`peek_at`, `typename_at`, `is_a`).
- `yasl.values` – `YaslType`, `Table`, `List`, `UserData`, `CFunction`,
  `type_of` and `typename`. Script values are plain Python values where
  possible: `None` is undef, and `bool`, `int`, `float` and `str` stand for
  themselves. A `Table` keeps key kinds apart, so `1`, `1.0` and `true` are
  different keys. It refuses lists and tables as keys.
- `yasl.argcheck` – argument checks for host functions (`check_int`,
  `check_float`, `check_bool`, `check_undef`, `check_userdata`), plus
  `print_err_bad_arg_type` and `init_global`.
- `yasl.libraries` – `declare_libs(state)` declares every standard library.
  Each library module also has its own `declare(state)`: `collections_lib`,
  `error_lib`, `io_lib`, `math_lib` and `mt_lib`. `math_lib` also exports
  `gcd(a, b)`.
- `yasl.errors` – `YaslError`, and its subclasses `YaslTypeError` and
  `YaslValueError`.
- `yasl.output` – `Output`, a sink that writes to a file, gathers text in
  memory (`to_string()`), or discards it (`silence()`), plus `strip_char`.
- `yasl.opcode` – the instruction set as enums: `Opcode`, `Constant`, `Pattern`.
- `yasl.varint` – variable-width integers: `encode`, `decode`, `next_offset`.
- `yasl.prime` – `is_prime` and `next_prime`.
- `yasl.hashing` – the double-hashing functions `hash_function` and `get_hash`.
- `yasl.floatfmt` – `float_to_str`, which prints floats without trailing
  zeros and keeps at least one decimal digit (`inf`, `-inf`, `nan` for the
  special values).

## Installing

```
pip install .
```

The package needs only the standard library. It requires Python 3.10 or newer.

## Embedding

```python
from yasl.state import State
from yasl.libraries import declare_libs

state = State()
declare_libs(state)

# Call math.max(3, 7.5)
state.load_global("math")
math_table = state.pop()
state.push(math_table["max"])
state.push(3)
state.push(7.5)
count = state.function_call(2)   # number of results left on the stack
assert count == 1 and state.pop() == 7.5
```

Globals are declared first and then set from the top of the stack:

```python
state.declare_global("answer")
state.push(42)
state.set_global("answer")

state.load_global("answer")
assert state.stack.pop_int() == 42
```

A new `State` already has the global `__VERSION__`.

Host functions take the state, read their arguments from `state.stack`,
push their results and return how many they pushed. Register one with
`push_function(fn, num_args)`. A `num_args` of `-1` makes it variadic, and
inside a variadic call `vargs_count()` gives the number of arguments.

To walk a table, push the table, then push `None` as the first key. Call
`table_next()` until it returns `False`. Each successful step leaves the
next key and its value on top of the table:

```python
state.load_global("math")
state.push(None)
while state.table_next():
    value = state.pop()
    key = state.pop()   # stays usable as the previous key
    state.push(key)
```

Metatables are registered by name with `register_mt`, loaded with `load_mt`,
and attached to the list, table or userdata below them with `set_mt`.

## Errors and output

Library functions report errors in two steps. They write a message to the
error sink with `print_err`, then raise with `throw`. The exception is
`YaslTypeError`, `YaslValueError` or `YaslError`, and its message is the
text that was written, for example
`TypeError: math.abs expected arg in position 0 to be of type float, got arg of type str.`

`State(out=..., err=...)` takes the files for normal and error output. By
default these are standard output and standard error. Call
`state.out.to_string()` or `state.err.to_string()` to gather the text in
memory instead. `load_printout()` and `load_printerr()` then push it onto
the stack as a string.

## What it does not do

This package has no lexer, parser, compiler or bytecode interpreter, so it
cannot run script source text. `yasl.opcode` only names the instruction
values. The package has no command-line program, and it has no `require`
for loading script or native modules. It provides the state and the
library functions that such an interpreter calls, and they can be driven
directly from Python as shown above.

## Running the tests

```
pip install .[test]
pytest
```