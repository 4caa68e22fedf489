# UI.py
""""Qt bridge between a keypad front end and the calculator Engine.

Structure
---------
- KEYPAD: keypad label -> Intent
- CalculatorController(QObject): owns the Engine, turns key presses into intents
  and publishes the result through Qt signals

Responsibilities
----------------
- Forward every key press to CalcEngine and emit the new display text
- Catch MathErrors and emit them, so the front end can show a notice and carry on
- Clipboard integration (copy the current display)

No widgets are built here; any front end (console, QWidget window, tests) connects
to display_changed / error_raised.
"""""

import logging

import pyperclip
from PySide6.QtCore import QObject, Signal

from . import error as E
from .CalcEngine import Engine, Intent, IntentKind

logger = logging.getLogger(__name__)


KEYPAD = {
    "CE": Intent(IntentKind.CLEAR_ENTRY),
    "C": Intent(IntentKind.CLEAR_ALL),
    "⌫": Intent(IntentKind.BACKSPACE),
    "<": Intent(IntentKind.BACKSPACE),
    "%": Intent(IntentKind.PERCENT),
    "M+": Intent(IntentKind.MEMORY_ADD),
    "M-": Intent(IntentKind.MEMORY_SUBTRACT),
    "MR": Intent(IntentKind.MEMORY_RECALL),
    "MC": Intent(IntentKind.MEMORY_CLEAR),
    "±": Intent(IntentKind.TOGGLE_SIGN),
    "+/-": Intent(IntentKind.TOGGLE_SIGN),
    ",": Intent(IntentKind.DECIMAL_SEPARATOR),
    ".": Intent(IntentKind.DECIMAL_SEPARATOR),
    "=": Intent(IntentKind.EQUALS),
}

for _symbol in ["+", "-", "*", "/", "×", "÷", "−"]:
    KEYPAD[_symbol] = Intent(IntentKind.OPERATOR, _symbol)

for _digit in "0123456789":
    KEYPAD[_digit] = Intent(IntentKind.DIGIT, _digit)


def intent_for(label):
    """Return the Intent behind a keypad label, or raise InputError."""
    try:
        return KEYPAD[label]
    except KeyError:
        raise E.InputError(str(label))


class CalculatorController(QObject):
    """""

    Receives key presses, runs them through the Engine and emits:
    - display_changed(str) after every accepted key
    - error_raised(MathError) for rejected keys; the engine state is unchanged

    """""

    display_changed = Signal(str)
    error_raised = Signal(object)

    def __init__(self, engine=None, parent=None):
        super().__init__(parent)
        self.engine = engine if engine is not None else Engine()

    def display(self):
        return self.engine.current_display()

    def press(self, label):
        """Handle one keypad label. Returns False if it was rejected."""
        try:
            self.engine.dispatch(intent_for(label))

        except E.MathError as e:
            # --- Known error (e.g. "Division by zero") ---
            logger.info("Key %r rejected: %s", label, e.user_message())
            self.error_raised.emit(e)
            return False

        self.display_changed.emit(self.display())
        return True

    def press_sequence(self, labels):
        """Press several keys in order; errors are emitted and do not stop the sequence."""
        accepted = [self.press(label) for label in labels]
        return all(accepted)

    def copy_display(self):
        try:
            pyperclip.copy(self.display())
        except pyperclip.PyperclipException as e:
            logger.warning("Clipboard copy failed: %s", e)
            self.error_raised.emit(E.InputError(str(e), code="4002"))
            return False
        return True
