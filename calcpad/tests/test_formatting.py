"""Display text conversion tests."""

import math

import pytest

from calcpad.formatting import parse_number, strip_trailing_zeros


# --- strip_trailing_zeros ---

@pytest.mark.parametrize("value, expected", [
    (14.0, "14"),
    (0.5, "0.5"),
    (100.0, "100"),
    (-3.0, "-3"),
    (3.75, "3.75"),
    (0.0, "0"),
    (-0.0, "-0"),
    (1e16, "1e+16"),
    (1e-05, "1e-05"),
    (1.5e-07, "1.5e-07"),
])
def test_strip_trailing_zeros(value, expected):
    assert strip_trailing_zeros(value) == expected


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_non_finite_is_error(value):
    assert strip_trailing_zeros(value) == "Error"


# --- parse_number ---

@pytest.mark.parametrize("text, expected", [
    ("0", 0.0),
    ("42", 42.0),
    ("-7", -7.0),
    ("0.", 0.0),
    ("-0.25", -0.25),
    (".5", 0.5),
    ("1e+16", 1e16),
    ("1.5e-07", 1.5e-07),
    (" 3 ", 3.0),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", [
    "", "-", ".", "Error", "Error: Division by 0", "1.2.3", "nan", "inf", "1_000", "--5", "0x10",
])
def test_parse_number_rejects(text):
    with pytest.raises(ValueError):
        parse_number(text)
