"""The ``math`` library: numeric functions and constants."""

from __future__ import annotations

import math
import random
from typing import Callable

from .argcheck import print_err_bad_arg_type
from .errors import YaslTypeError
from .prime import is_prime
from .values import YaslType, type_of

PI = math.pi
NAN = math.nan
INF = math.inf

_UINT64 = 1 << 64
_INT64_LIMIT = 1 << 63


def _is_num(state) -> bool:
    return state.stack.is_a(YaslType.INT) or state.stack.is_a(YaslType.FLOAT)


def _bad_arg(state, fn_name: str, position: int) -> None:
    print_err_bad_arg_type(state, fn_name, position, "float", state.stack.typename())
    state.throw(YaslTypeError)


def _pop_num(state, fn_name: str, position: int):
    """Pop a number, keeping its int or float kind."""
    if not _is_num(state):
        _bad_arg(state, fn_name, position)
    return state.pop()


def _check_num(state, fn_name: str, position: int) -> float:
    return float(_pop_num(state, fn_name, position))


def _pop_int_arg(state, fn_name: str, position: int) -> int:
    """Pop a number and truncate it to an int (non-finite floats become 0)."""
    value = _pop_num(state, fn_name, position)
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    return value


def _c_semantics(fn: Callable[[float], float]) -> Callable[[float], float]:
    """Return nan on domain errors and inf on overflow instead of raising."""

    def wrapped(x: float) -> float:
        try:
            return fn(x)
        except ValueError:
            return NAN
        except OverflowError:
            return INF

    return wrapped


def _log(x: float) -> float:
    if x == 0:
        return -INF
    return _c_semantics(math.log)(x)


def _rounding(fn: Callable[[float], int]) -> Callable[[float], float]:
    def wrapped(x: float) -> float:
        if not math.isfinite(x):
            return x
        result = float(fn(x))
        return math.copysign(0.0, x) if result == 0 else result

    return wrapped


def _unary(name: str, fn: Callable[[float], float]) -> Callable:
    def method(state) -> int:
        n = _check_num(state, f"math.{name}", 0)
        state.push(fn(n))
        return 1

    return method


def _abs(state) -> int:
    if state.stack.is_a(YaslType.INT) or state.stack.is_a(YaslType.FLOAT):
        state.push(abs(state.pop()))
        return 1
    _bad_arg(state, "math.abs", 0)
    return 0


def _extreme(name: str, start: float, better: Callable) -> Callable:
    def method(state) -> int:
        count = state.vargs_count()
        best = start
        for i in range(count):
            kind = type_of(state.stack.peek())
            if kind is YaslType.INT:
                top = state.pop()
                if better(top, best):
                    best = top
            elif kind is YaslType.FLOAT:
                top = state.pop()
                if math.isnan(top):
                    state.push(NAN)
                    return 1
                if better(top, best):
                    best = top
            else:
                _bad_arg(state, f"math.{name}", count - i - 1)
        state.push(best)
        return 1

    return method


def _deg(state) -> int:
    n = _check_num(state, "math.deg", 0)
    state.push(n * (180.0 / PI))
    return 1


def _rad(state) -> int:
    n = _check_num(state, "math.rad", 0)
    state.push(n * (PI / 180.0))
    return 1


def _isprime(state) -> int:
    value = _pop_num(state, "math.isprime", 0)
    if isinstance(value, float):
        if not math.isfinite(value):
            state.push(None)
            return 1
        value = int(value)
    state.push(is_prime(value))
    return 1


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers."""
    if a <= 0 or b <= 0:
        raise ValueError("gcd is defined here for positive integers only")
    if a < b:
        a, b = b, a
    while b:
        a, b = b, a % b
    return a


def _gcd(state) -> int:
    a = _pop_int_arg(state, "math.gcd", 1)
    b = _pop_int_arg(state, "math.gcd", 0)
    state.push(gcd(a, b) if a > 0 and b > 0 else None)
    return 1


def _lcm(state) -> int:
    a = _pop_int_arg(state, "math.lcm", 1)
    b = _pop_int_arg(state, "math.lcm", 0)
    state.push(a * b // gcd(a, b) if a > 0 and b > 0 else None)
    return 1


def _clamp(state) -> int:
    high = _pop_num(state, "math.clamp", 2)
    low = _pop_num(state, "math.clamp", 1)
    value = _pop_num(state, "math.clamp", 0)
    if value < low:
        state.push(low)
    elif value > high:
        state.push(high)
    else:
        state.push(value)
    return 1


def _rand(state) -> int:
    r = random.getrandbits(64)
    if r >= _INT64_LIMIT:
        r -= _UINT64
    state.push(r)
    return 1


_UNARY = {
    "exp": _c_semantics(math.exp),
    "log": _log,
    "sqrt": _c_semantics(math.sqrt),
    "cos": _c_semantics(math.cos),
    "sin": _c_semantics(math.sin),
    "tan": _c_semantics(math.tan),
    "acos": _c_semantics(math.acos),
    "asin": _c_semantics(math.asin),
    "atan": _c_semantics(math.atan),
    "ceil": _rounding(math.ceil),
    "floor": _rounding(math.floor),
}


def _entries():
    yield "abs", (_abs, 1)
    yield "exp", (_unary("exp", _UNARY["exp"]), 1)
    yield "log", (_unary("log", _UNARY["log"]), 1)
    yield "pi", PI
    yield "nan", NAN
    yield "inf", INF
    for name in ("sqrt", "cos", "sin", "tan", "acos", "asin", "atan", "ceil", "floor"):
        yield name, (_unary(name, _UNARY[name]), 1)
    yield "max", (_extreme("max", -INF, lambda top, best: top >= best), -1)
    yield "min", (_extreme("min", INF, lambda top, best: top <= best), -1)
    yield "deg", (_deg, 1)
    yield "rad", (_rad, 1)
    yield "isprime", (_isprime, 1)
    yield "gcd", (_gcd, 2)
    yield "lcm", (_lcm, 2)
    yield "clamp", (_clamp, 3)
    yield "rand", (_rand, 1)


def declare(state) -> None:
    """Define the ``math`` global."""
    state.declare_global("math")
    state.push_table()
    state.set_global("math")

    state.load_global("math")
    for name, entry in _entries():
        state.push(name)
        if isinstance(entry, tuple):
            state.push_function(*entry)
        else:
            state.push(entry)
        state.table_set()
    state.pop()