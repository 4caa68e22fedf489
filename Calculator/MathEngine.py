# MathEngine.py
"""""
Arithmetic core of the Desk Calculator.

Responsibilities
----------------
1) Operators: closed enumeration of the four basic operations (+ keypad glyph aliases).
2) apply(): exact Decimal add/subtract/multiply, division rounded half-up to a fixed scale.
3) Display text: parse() turns display text into Decimal, render() turns Decimal into display text.

Everything here is pure; the pending-operator state machine lives in CalcEngine.py.
"""""

import fractions
from decimal import Decimal, Context, InvalidOperation, MAX_EMAX, MAX_PREC, MIN_EMIN
from enum import Enum

from . import error as E


# Number of fractional digits kept by a division
DEFAULT_SCALE = 10

HUNDRED = Decimal(100)

# Unlimited precision: add/subtract/multiply never round
EXACT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


# Glyphs printed on the keypad
OPERATOR_ALIASES = {
    "×": Operator.MULTIPLY,
    "÷": Operator.DIVIDE,
    "−": Operator.SUBTRACT,
}


def to_operator(symbol):
    """Return the Operator for an Operator, a symbol or a keypad glyph.

    Raises InvalidOperatorError for anything else.
    """
    if isinstance(symbol, Operator):
        return symbol
    if isinstance(symbol, str):
        if symbol in OPERATOR_ALIASES:
            return OPERATOR_ALIASES[symbol]
        try:
            return Operator(symbol)
        except ValueError:
            pass
    raise E.InvalidOperatorError(str(symbol))


# -----------------------------
# Arithmetic
# -----------------------------

def strip_trailing_zeros(value):
    """Drop trailing fractional zeros without changing the value (0 stays 0)."""
    if value == 0:
        return Decimal(0)
    return value.normalize(EXACT)


def round_half_up(quotient, scale=DEFAULT_SCALE):
    """Round an exact Fraction to `scale` fractional digits, ties away from zero."""
    scaled = quotient * 10 ** scale
    whole, rest = divmod(abs(scaled.numerator), scaled.denominator)
    if 2 * rest >= scaled.denominator:
        whole += 1
    if scaled < 0:
        whole = -whole
    return Decimal(whole).scaleb(-scale, EXACT)


def divide(a, b, scale=DEFAULT_SCALE):
    if b == 0:
        raise E.DivisionByZeroError()
    # Exact quotient first, so there is only one rounding step
    quotient = fractions.Fraction(a) / fractions.Fraction(b)
    return strip_trailing_zeros(round_half_up(quotient, scale))


def apply(a, b, op, scale=DEFAULT_SCALE):
    """Combine a and b with op.

    Add/subtract/multiply are exact. Division by zero raises
    DivisionByZeroError, unknown operators raise InvalidOperatorError.
    """
    op = to_operator(op)

    if op is Operator.ADD:
        return EXACT.add(a, b)
    elif op is Operator.SUBTRACT:
        return EXACT.subtract(a, b)
    elif op is Operator.MULTIPLY:
        return EXACT.multiply(a, b)
    elif op is Operator.DIVIDE:
        return divide(a, b, scale)
    else:
        raise E.InvalidOperatorError(str(op))


def percent(x, base=None, scale=DEFAULT_SCALE):
    """x / 100, or base * (x / 100) when a base (the accumulator) is given."""
    fraction = divide(x, HUNDRED, scale)
    if base is None:
        return fraction
    return strip_trailing_zeros(EXACT.multiply(base, fraction))


# -----------------------------
# Display text
# -----------------------------

def parse(text, separator=","):
    """Parse display text (either the separator or '.' as decimal point).

    Raises ParseError if the text is not a finite decimal.
    """
    candidate = str(text).strip().replace(separator, ".")
    try:
        value = Decimal(candidate)
    except (InvalidOperation, ValueError):
        raise E.ParseError(text)
    if not value.is_finite():
        raise E.ParseError(text)
    return value


def render(value, separator=","):
    """Plain notation, no trailing fractional zeros, never exponential."""
    text = format(strip_trailing_zeros(value), "f")
    return text.replace(".", separator)
