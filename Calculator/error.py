

class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

    def user_message(self):
        """Text shown to the user: table entry for the code, or the raw message."""
        base = ERROR_MESSAGES.get(self.code, ERROR_MESSAGES["9999"])
        if base.endswith(": "):
            return base + str(self.message)
        return base


class CalculationError(MathError):
    pass

class DivisionByZeroError(CalculationError):
    def __init__(self, message="Division by zero", code="3003", equation=None):
        super().__init__(message, code=code, equation=equation)

class InvalidOperatorError(CalculationError):
    def __init__(self, message, code="3004", equation=None):
        super().__init__(message, code=code, equation=equation)

class ParseError(MathError):
    def __init__(self, message, code="3008", equation=None):
        super().__init__(message, code=code, equation=equation)

class InputError(MathError):
    def __init__(self, message, code="4001", equation=None):
        super().__init__(message, code=code, equation=equation)

class ConfigError(MathError):
    def __init__(self, message, code="5001", equation=None):
        super().__init__(message, code=code, equation=equation)



# Error codes: 1. digit area (3 calculation, 4 input, 5 configuration, 9 unexpected),
# 2. digit specification, 3. and 4. digit error number



ERROR_MESSAGES = {
    "3003" : "Division by Zero",
    "3004" : "Invalid Operator: ", # + operator
    "3008" : "Invalid number on display: ", # + display text


    "4001" : "Unknown key: ", # + key
    "4002" : "Clipboard not available.",


    "5001" : "Invalid setting: ", # + setting
    "5002" : "Settings could not be saved or applied: ", # + reason


    "9999" : "Unexpected Error: " #+error
}
