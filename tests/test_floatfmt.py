import pytest

from yasl.floatfmt import float_to_str


def test_special_values():
    assert float_to_str(float("inf")) == "inf"
    assert float_to_str(float("-inf")) == "-inf"
    assert float_to_str(float("nan")) == "nan"


def test_trailing_zeros_removed():
    assert float_to_str(1.5) == "1.5"


def test_one_decimal_digit_kept():
    assert float_to_str(2.0) == "2.0"


@pytest.mark.parametrize("value", [0.0, 1.0, -3.25, 0.1, 123456.789, 1e-7, -42.000001, 1e15])
def test_shape_and_round_trip(value):
    text = float_to_str(value)
    assert "." in text
    assert not (text.endswith("0") and text[-2] != ".")
    assert float(text) == pytest.approx(round(value, 6), abs=1e-9)