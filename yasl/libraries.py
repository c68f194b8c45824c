"""Declaration of all standard libraries in one call."""

from __future__ import annotations

from . import collections_lib, error_lib, io_lib, math_lib, mt_lib


def declare_libs(state) -> None:
    """Declare every standard library under its default global name."""
    collections_lib.declare(state)
    error_lib.declare(state)
    io_lib.declare(state)
    math_lib.declare(state)
    mt_lib.declare(state)