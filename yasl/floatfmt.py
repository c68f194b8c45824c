"""Conversion of floats to their textual form."""

import math


def float_to_str(value: float) -> str:
    """Format a float with trailing zeros removed, keeping one decimal digit."""
    if math.isinf(value) or math.isnan(value):
        if value > 0:
            return "inf"
        if value < 0:
            return "-inf"
        return "nan"
    text = f"{value:f}"
    while text.endswith("0") and text[-2] != ".":
        text = text[:-1]
    return text