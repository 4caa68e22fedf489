"""Tests for the arithmetic core: operators, rounding, parse/render."""

from decimal import Decimal

import pytest

from Calculator import MathEngine
from Calculator import error as E
from Calculator.MathEngine import Operator


# --- apply ---

def test_add_subtract_multiply_are_exact():
    a = Decimal("12345678901234567890.5")
    assert MathEngine.apply(a, Decimal(2), Operator.MULTIPLY) == Decimal("24691357802469135781")
    assert MathEngine.apply(Decimal("0.1"), Decimal("0.2"), Operator.ADD) == Decimal("0.3")
    assert MathEngine.apply(Decimal(5), Decimal(8), Operator.SUBTRACT) == Decimal(-3)


def test_divide_rounds_half_up_to_ten_places():
    assert MathEngine.apply(Decimal(1), Decimal(3), Operator.DIVIDE) == Decimal("0.3333333333")
    assert MathEngine.apply(Decimal(2), Decimal(3), Operator.DIVIDE) == Decimal("0.6666666667")
    assert MathEngine.apply(Decimal(-2), Decimal(3), Operator.DIVIDE) == Decimal("-0.6666666667")


def test_divide_with_custom_scale():
    assert MathEngine.divide(Decimal(1), Decimal(8), scale=2) == Decimal("0.13")
    assert MathEngine.divide(Decimal(1), Decimal(3), scale=0) == Decimal(0)


def test_divide_strips_trailing_zeros():
    result = MathEngine.divide(Decimal(10), Decimal(4))
    assert result == Decimal("2.5")
    assert result.as_tuple().exponent == -1


def test_divide_by_zero_raises():
    with pytest.raises(E.DivisionByZeroError) as info:
        MathEngine.apply(Decimal(5), Decimal(0), Operator.DIVIDE)
    assert info.value.code == "3003"


@pytest.mark.parametrize("symbol, expected", [
    ("+", Operator.ADD),
    ("−", Operator.SUBTRACT),
    ("×", Operator.MULTIPLY),
    ("÷", Operator.DIVIDE),
    (Operator.DIVIDE, Operator.DIVIDE),
])
def test_to_operator_accepts_symbols_and_glyphs(symbol, expected):
    assert MathEngine.to_operator(symbol) is expected


@pytest.mark.parametrize("symbol", ["^", "", None, 3])
def test_unknown_operator_raises(symbol):
    with pytest.raises(E.InvalidOperatorError) as info:
        MathEngine.apply(Decimal(1), Decimal(2), symbol)
    assert info.value.code == "3004"


# --- percent ---

def test_percent_without_base():
    assert MathEngine.percent(Decimal(50)) == Decimal("0.5")


def test_percent_of_base():
    assert MathEngine.percent(Decimal(10), Decimal(200)) == Decimal(20)


# --- display text ---

@pytest.mark.parametrize("text, expected", [
    ("0", Decimal(0)),
    ("0,", Decimal(0)),
    ("-12,5", Decimal("-12.5")),
    ("3.25", Decimal("3.25")),
])
def test_parse(text, expected):
    assert MathEngine.parse(text) == expected


@pytest.mark.parametrize("text", ["", "-", "abc", "1,2,3", "NaN", "Infinity"])
def test_parse_rejects_non_numbers(text):
    with pytest.raises(E.ParseError):
        MathEngine.parse(text)


@pytest.mark.parametrize("value, expected", [
    (Decimal("2.50"), "2,5"),
    (Decimal("1E+3"), "1000"),
    (Decimal("-0"), "0"),
    (Decimal("0.000"), "0"),
    (Decimal("1E-12"), "0,000000000001"),
])
def test_render(value, expected):
    assert MathEngine.render(value) == expected


def test_render_with_dot_separator():
    assert MathEngine.render(Decimal("-7.10"), ".") == "-7.1"
