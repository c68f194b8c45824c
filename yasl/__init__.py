"""Runtime core of a small scripting language: value stack, embedding state and standard libraries."""

__version__ = "0.11.8"

__all__ = [
    "opcode",
    "varint",
    "prime",
    "hashing",
    "floatfmt",
    "output",
    "errors",
    "values",
    "stack",
    "state",
    "argcheck",
    "collections_lib",
    "error_lib",
    "mt_lib",
    "math_lib",
    "io_lib",
    "libraries",
]