# CalcEngine.py
"""""
Pending-operator state machine of the Desk Calculator.

Structure
---------
- EngineState:  immutable snapshot (accumulator, pending operator, entry flag, memory, display)
- Intent:       one user action (digit, operator, equals, memory keys, ...)
- handle():     pure dispatch  state + intent -> Outcome(new state, display, optional error)
- Engine:       owns the current state and exposes one method per intent

Evaluation is left-to-right without precedence: pressing an operator resolves the
pending one first, so "2 + 3 * 4 =" gives 20.

Errors
------
Arithmetic errors (division by zero, invalid operator) leave the previous state
untouched and are returned by handle() / raised by Engine. Unparsable display text
is read as zero.
"""""

import logging
from dataclasses import dataclass, replace
from decimal import Decimal
from enum import Enum
from typing import NamedTuple, Optional

from . import MathEngine
from . import error as E

logger = logging.getLogger(__name__)

DIGITS = "0123456789"
NEGATION = "-"


@dataclass(frozen=True)
class EngineSettings:
    decimal_separator: str = ","
    division_scale: int = MathEngine.DEFAULT_SCALE


@dataclass(frozen=True)
class EngineState:
    accumulator: Decimal = Decimal(0)
    pending_operator: Optional[MathEngine.Operator] = None
    awaiting_new_entry: bool = True
    memory: Decimal = Decimal(0)
    display: str = "0"


class IntentKind(Enum):
    DIGIT = "digit"
    DECIMAL_SEPARATOR = "decimal_separator"
    TOGGLE_SIGN = "toggle_sign"
    BACKSPACE = "backspace"
    CLEAR_ENTRY = "clear_entry"
    CLEAR_ALL = "clear_all"
    OPERATOR = "operator"
    EQUALS = "equals"
    PERCENT = "percent"
    MEMORY_ADD = "memory_add"
    MEMORY_SUBTRACT = "memory_subtract"
    MEMORY_RECALL = "memory_recall"
    MEMORY_CLEAR = "memory_clear"


@dataclass(frozen=True)
class Intent:
    kind: IntentKind
    value: object = None  # digit for DIGIT, operator for OPERATOR


class Outcome(NamedTuple):
    state: EngineState
    display: str
    error: Optional[E.MathError] = None


# -----------------------------
# Helpers
# -----------------------------

def read_display(state, settings):
    """Display as Decimal; text that does not parse counts as zero."""
    try:
        return MathEngine.parse(state.display, settings.decimal_separator)
    except E.ParseError as e:
        logger.debug("Display %r is not a number, using 0 (%s)", state.display, e.code)
        return Decimal(0)


def show(state, value, settings, **changes):
    return replace(state, display=MathEngine.render(value, settings.decimal_separator), **changes)


# -----------------------------
# Entry keys
# -----------------------------

def _digit(state, value, settings):
    digit = str(value)
    if len(digit) != 1 or digit not in DIGITS:
        raise E.InputError(digit)

    if state.awaiting_new_entry:
        return replace(state, display=digit, awaiting_new_entry=False)

    text = state.display
    if text == "0":
        text = ""
    return replace(state, display=text + digit)


def _decimal_separator(state, value, settings):
    separator = settings.decimal_separator
    if state.awaiting_new_entry:
        return replace(state, display="0" + separator, awaiting_new_entry=False)
    if separator in state.display:
        return state
    return replace(state, display=state.display + separator)


def _toggle_sign(state, value, settings):
    text = state.display
    if text.startswith(NEGATION):
        return replace(state, display=text[1:])
    elif text != "0":
        return replace(state, display=NEGATION + text)
    return state


def _backspace(state, value, settings):
    if state.awaiting_new_entry:
        return state

    text = state.display[:-1]
    if text == "" or text == NEGATION:
        return replace(state, display="0", awaiting_new_entry=True)
    return replace(state, display=text)


def _clear_entry(state, value, settings):
    return replace(state, display="0", awaiting_new_entry=True)


def _clear_all(state, value, settings):
    state = replace(state, accumulator=Decimal(0), pending_operator=None)
    return _clear_entry(state, value, settings)


# -----------------------------
# Calculation keys
# -----------------------------

def _operator(state, value, settings):
    op = MathEngine.to_operator(value)
    x = read_display(state, settings)

    if state.pending_operator is None:
        state = replace(state, accumulator=x)
    else:
        # Resolve the previous operator before recording the new one
        result = MathEngine.apply(state.accumulator, x, state.pending_operator, settings.division_scale)
        state = show(state, result, settings, accumulator=result)

    return replace(state, pending_operator=op, awaiting_new_entry=True)


def _equals(state, value, settings):
    x = read_display(state, settings)

    if state.pending_operator is None:
        return show(state, x, settings)

    result = MathEngine.apply(state.accumulator, x, state.pending_operator, settings.division_scale)
    return show(state, result, settings, accumulator=result, pending_operator=None, awaiting_new_entry=True)


def _percent(state, value, settings):
    x = read_display(state, settings)

    # With a pending operator the percentage is taken of the accumulator: 200 + 10 % -> 20
    if state.pending_operator is None:
        result = MathEngine.percent(x, scale=settings.division_scale)
    else:
        result = MathEngine.percent(x, state.accumulator, settings.division_scale)

    return show(state, result, settings, awaiting_new_entry=True)


# -----------------------------
# Memory keys
# -----------------------------

def _memory_add(state, value, settings):
    x = read_display(state, settings)
    return replace(state, memory=MathEngine.apply(state.memory, x, MathEngine.Operator.ADD))


def _memory_subtract(state, value, settings):
    x = read_display(state, settings)
    return replace(state, memory=MathEngine.apply(state.memory, x, MathEngine.Operator.SUBTRACT))


def _memory_recall(state, value, settings):
    return show(state, state.memory, settings, awaiting_new_entry=True)


def _memory_clear(state, value, settings):
    return replace(state, memory=Decimal(0))


HANDLERS = {
    IntentKind.DIGIT: _digit,
    IntentKind.DECIMAL_SEPARATOR: _decimal_separator,
    IntentKind.TOGGLE_SIGN: _toggle_sign,
    IntentKind.BACKSPACE: _backspace,
    IntentKind.CLEAR_ENTRY: _clear_entry,
    IntentKind.CLEAR_ALL: _clear_all,
    IntentKind.OPERATOR: _operator,
    IntentKind.EQUALS: _equals,
    IntentKind.PERCENT: _percent,
    IntentKind.MEMORY_ADD: _memory_add,
    IntentKind.MEMORY_SUBTRACT: _memory_subtract,
    IntentKind.MEMORY_RECALL: _memory_recall,
    IntentKind.MEMORY_CLEAR: _memory_clear,
}


def handle(state, intent, settings=None):
    """Apply one intent to state.

    Returns Outcome(new_state, display, error). On error the returned state is the
    unchanged input state and error holds the MathError.
    """
    settings = settings or EngineSettings()
    try:
        new_state = HANDLERS[intent.kind](state, intent.value, settings)
    except E.MathError as e:
        if e.equation is None:
            e.equation = state.display
        logger.info("%s rejected (%s): %s", intent.kind.value, e.code, e.message)
        return Outcome(state, state.display, e)

    return Outcome(new_state, new_state.display, None)


class Engine:
    """""

    Stateful wrapper around handle() for a presentation layer.

    Every method returns the new display text. Errors are raised after the
    state has been left as it was, so the calculator stays usable.

    """""

    def __init__(self, state=None, settings=None):
        self.state = state if state is not None else EngineState()
        self.settings = settings or EngineSettings()

    def dispatch(self, intent):
        outcome = handle(self.state, intent, self.settings)
        self.state = outcome.state
        if outcome.error is not None:
            raise outcome.error
        return outcome.display

    def current_display(self):
        return self.state.display

    def digit(self, d):
        return self.dispatch(Intent(IntentKind.DIGIT, d))

    def decimal_separator(self):
        return self.dispatch(Intent(IntentKind.DECIMAL_SEPARATOR))

    def toggle_sign(self):
        return self.dispatch(Intent(IntentKind.TOGGLE_SIGN))

    def backspace(self):
        return self.dispatch(Intent(IntentKind.BACKSPACE))

    def clear_entry(self):
        return self.dispatch(Intent(IntentKind.CLEAR_ENTRY))

    def clear_all(self):
        return self.dispatch(Intent(IntentKind.CLEAR_ALL))

    def operator(self, op):
        return self.dispatch(Intent(IntentKind.OPERATOR, op))

    def equals(self):
        return self.dispatch(Intent(IntentKind.EQUALS))

    def percent(self):
        return self.dispatch(Intent(IntentKind.PERCENT))

    def memory_add(self):
        return self.dispatch(Intent(IntentKind.MEMORY_ADD))

    def memory_subtract(self):
        return self.dispatch(Intent(IntentKind.MEMORY_SUBTRACT))

    def memory_recall(self):
        return self.dispatch(Intent(IntentKind.MEMORY_RECALL))

    def memory_clear(self):
        return self.dispatch(Intent(IntentKind.MEMORY_CLEAR))
