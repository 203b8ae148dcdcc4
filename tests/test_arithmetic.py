import math

import pytest
from hypothesis import given, strategies as st

from arithmetic import (
    DivisionByZero,
    Operation,
    evaluate,
    format_number,
    parse_number,
)


@pytest.mark.parametrize("op, expected", [
    (Operation.ADD, 9.0),
    (Operation.SUBTRACT, 3.0),
    (Operation.MULTIPLY, 18.0),
    (Operation.DIVIDE, 2.0),
])
def test_evaluate(op, expected):
    assert evaluate(6.0, 3.0, op) == expected


def test_divide_by_zero_is_a_tag_not_an_exception():
    result = evaluate(5.0, 0.0, Operation.DIVIDE)
    assert isinstance(result, DivisionByZero)
    assert result.dividend == 5.0


def test_unknown_operator_returns_second_operand():
    assert evaluate(6.0, 3.0, "=") == 3.0
    assert evaluate(6.0, 3.0, None) == 3.0


@pytest.mark.parametrize("symbol, op", [
    ("+", Operation.ADD),
    ("−", Operation.SUBTRACT),
    ("-", Operation.SUBTRACT),
    ("×", Operation.MULTIPLY),
    ("*", Operation.MULTIPLY),
    ("÷", Operation.DIVIDE),
    ("/", Operation.DIVIDE),
    (Operation.DIVIDE, Operation.DIVIDE),
])
def test_from_symbol(symbol, op):
    assert Operation.from_symbol(symbol) is op


def test_from_symbol_rejects_unknown():
    with pytest.raises(ValueError):
        Operation.from_symbol("%")


@pytest.mark.parametrize("text, value", [
    ("0", 0.0),
    ("12", 12.0),
    ("12.", 12.0),
    ("0.5", 0.5),
    ("-3.25", -3.25),
    ("1e+24", 1e24),
    ("1.5e+", 1.5),
    ("1.5e", 1.5),
])
def test_parse_number(text, value):
    assert parse_number(text) == value


@pytest.mark.parametrize("text", ["Error", "-", "", "."])
def test_parse_number_without_numeric_prefix_is_nan(text):
    assert math.isnan(parse_number(text))


@pytest.mark.parametrize("value, text", [
    (10.0, "10"),
    (-2.0, "-2"),
    (-0.0, "0"),
    (2.5, "2.5"),
    (0.30000000000000004, "0.3"),
    (1 / 3, "0.3333333333"),
    (1e24, "1e+24"),
    (123456789012.0, "123456789012"),
])
def test_format_number(value, text):
    assert format_number(value) == text


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_format_number_rejects_non_finite(value):
    with pytest.raises(ValueError):
        format_number(value)


@given(st.floats(min_value=-1e300, max_value=1e300))
def test_formatted_numbers_fit_and_parse_back(value):
    text = format_number(value)
    assert 0 < len(text) <= 12
    assert math.isfinite(parse_number(text))
