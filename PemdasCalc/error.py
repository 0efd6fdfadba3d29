

class MathError(Exception):
    def __init__(self, message, code="9999", equation=None, position=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation
        self.position = position  # Character offset in the equation, if known

    def __str__(self):
        if self.position is None:
            return self.message
        return f"{self.message} at pos {self.position}"


class ParseError(MathError):
    pass

class CalculationError(MathError):
    pass


# --- Parse errors ---

class ExpectedNumber(ParseError):
    def __init__(self, position, equation=None):
        super().__init__("Expected number", code="3001", equation=equation, position=position)

class UnclosedParenthesis(ParseError):
    def __init__(self, position, equation=None):
        super().__init__("Missing ')'", code="3002", equation=equation, position=position)

class TrailingInput(ParseError):
    def __init__(self, position, equation=None):
        super().__init__("Unexpected trailing input", code="3003", equation=equation, position=position)


# --- Calculation errors ---

class DivisionByZero(CalculationError):
    def __init__(self, position=None, equation=None):
        super().__init__("Division by zero", code="3004", equation=equation, position=position)

class ModuloByZero(CalculationError):
    def __init__(self, position=None, equation=None):
        super().__init__("Modulo by zero", code="3005", equation=equation, position=position)



Error_Dictionary= {

    "1" : "Missing Files",
    "3" : "Calculator Error",
    "4" : "UI Error",
    "5" : "Configuration Error",
    "9" : "Runtime Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3001" : "Expected a number, '(' or a sign.",
    "3002" : "Missing ')'.",
    "3003" : "Unexpected trailing input.",
    "3004" : "Division by Zero",
    "3005" : "Modulo by Zero",

    "4002" : "Calculation already Running!",
    "4501" : "Not all Settings could be saved: ", # + Error raising setting

    "9999" : "Unexpected Error: " #+error
}


def category(code):
    """Return the main error category for a four-digit error code."""
    return Error_Dictionary.get(str(code)[:1], Error_Dictionary["9"])
