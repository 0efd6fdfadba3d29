# MathEngine.py
"""""
Core calculation engine for the PEMDAS Calculator.

Pipeline
--------
1) Parser / Evaluator: recursive descent directly over the raw input string.
   Every grammar rule reads the characters it needs and returns a float, so
   there is no token list and no AST.
2) Formatter: renders results as integers, rounded decimals or fractions
   depending on user preferences.

Grammar (precedence low to high)
--------------------------------
    expression := term (('+' | '-') term)*
    term       := power (('*' | '/' | '%' | implicit) power)*
    power      := factor (('^' | '**') power)?
    factor     := '+' factor | '-' factor | '(' expression ')' | number

Implicit multiplication happens when a power is directly followed by '(', a
digit or '.', e.g. '2(3+4)', '(1+2)(3+4)' or '3.5(2)'.
"""""

import math
import fractions
from decimal import Decimal, localcontext

from . import config_manager as config_manager
from . import error as E

# Debug toggle for optional prints in this module (the "debug" setting enables it too)
debug = False

WHITESPACE = " \t\n\v\f\r"
DIGITS = "0123456789"


# -----------------------------
# Parse state / small helpers
# -----------------------------

class ParseState:
    """Input buffer and cursor of one evaluation call."""
    def __init__(self, text):
        self.text = text
        self.pos = 0

    def at_end(self):
        return self.pos >= len(self.text)

    def current(self):
        """Return the character under the cursor, or '' at the end of the input."""
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def __repr__(self):
        return f"ParseState({self.text!r}, pos={self.pos})"


def skip_spaces(state):
    while state.pos < len(state.text) and state.text[state.pos] in WHITESPACE:
        state.pos += 1


def match(state, token):
    """Skip whitespace, then consume `token` if the input continues with it."""
    skip_spaces(state)
    if state.text.startswith(token, state.pos):
        state.pos += len(token)
        return True
    return False


def peek(state):
    skip_spaces(state)
    return state.current()


def starts_factor(state):
    """True if the next character can begin a factor without an operator.

    Signs are left out on purpose: '3 -4' is a subtraction.
    """
    char = peek(state)
    return char != "" and char in "(." + DIGITS


def is_odd_integer(value):
    return math.isfinite(value) and float(value).is_integer() and value % 2 == 1


# -----------------------------
# Arithmetic with C semantics
# -----------------------------

def power(base, exponent):
    """Real-valued power. Never raises: poles give inf, domain errors give nan."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # Either 0 ** negative (pole) or negative ** fractional (domain)
        if base == 0:
            if is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def modulo(dividend, divisor, position=None):
    """Integer remainder of both operands truncated toward zero.

    The remainder takes the sign of the dividend. Non-finite operands give nan.
    """
    if math.isfinite(divisor) and int(divisor) == 0:
        raise E.ModuloByZero(position)
    if not (math.isfinite(dividend) and math.isfinite(divisor)):
        return math.nan

    a = int(dividend)
    b = int(divisor)
    remainder = abs(a) % abs(b)
    if a < 0:
        remainder = -remainder
    return float(remainder)


# -----------------------------
# Grammar rules
# -----------------------------

def parse_expression(state):
    """Addition and subtraction."""
    value = parse_term(state)
    while True:
        if match(state, "+"):
            value += parse_term(state)
        elif match(state, "-"):
            value -= parse_term(state)
        else:
            break
    return value


def parse_term(state):
    """Multiplication, division, modulo and implicit multiplication."""
    value = parse_power(state)
    while True:
        if match(state, "*"):
            value *= parse_power(state)

        elif match(state, "/"):
            operator_pos = state.pos - 1
            divisor = parse_power(state)
            if divisor == 0:
                raise E.DivisionByZero(operator_pos)
            value /= divisor

        elif match(state, "%"):
            operator_pos = state.pos - 1
            value = modulo(value, parse_power(state), operator_pos)

        elif starts_factor(state):
            # 2(3+4), (1+2)(3+4), 3.5(2)
            value *= parse_power(state)

        else:
            break
    return value


def parse_power(state):
    """Exponentiation, right-associative: 2^3^2 == 2^(3^2)."""
    base = parse_factor(state)
    # '**' first, otherwise its first '*' would be read as a multiplication
    if match(state, "**") or match(state, "^"):
        exponent = parse_power(state)
        base = power(base, exponent)
    return base


def parse_factor(state):
    """Unary signs, parenthesized sub-expressions and numbers."""
    if match(state, "+"):
        return parse_factor(state)
    if match(state, "-"):
        return -parse_factor(state)
    if match(state, "("):
        value = parse_expression(state)
        if not match(state, ")"):
            raise E.UnclosedParenthesis(state.pos)
        return value
    return parse_number(state)


def parse_number(state):
    """Numeric literal: digits with at most one '.', optional exponent like 1e-3."""
    skip_spaces(state)
    text = state.text
    start = state.pos
    seen_digit = False
    seen_dot = False

    while state.pos < len(text):
        char = text[state.pos]
        if char in DIGITS:
            seen_digit = True
        elif char == "." and not seen_dot:
            seen_dot = True
        else:
            break
        state.pos += 1

    # A lone '.' is not a number either
    if not seen_digit:
        raise E.ExpectedNumber(start)

    # Scientific notation; roll back if no exponent digits follow
    if state.pos < len(text) and text[state.pos] in "eE":
        saved = state.pos
        state.pos += 1
        if state.pos < len(text) and text[state.pos] in "+-":
            state.pos += 1
        exponent_start = state.pos
        while state.pos < len(text) and text[state.pos] in DIGITS:
            state.pos += 1
        if state.pos == exponent_start:
            state.pos = saved

    return float(text[start:state.pos])


# -----------------------------
# Public evaluator
# -----------------------------

def evaluate(problem):
    """Evaluate one line of text and return its value as float.

    Raises E.ParseError / E.CalculationError (both E.MathError) on invalid input.
    """
    state = ParseState(problem)
    try:
        ergebnis = parse_expression(state)
        skip_spaces(state)
        if not state.at_end():
            raise E.TrailingInput(state.pos)
    except E.MathError as e:
        e.equation = problem
        raise e
    return ergebnis


# -----------------------------
# Result formatting
# -----------------------------

def cleanup(ergebnis, settings=None):
    """Format a numeric result as integer, fraction or rounded decimal.

    Returns:
        (rendered_value, rounding_flag)
    where rounding_flag indicates whether the rendered value is approximate.
    """
    if settings is None:
        settings = config_manager.load_setting_value("all")
    rounding = False

    if math.isnan(ergebnis):
        return "nan", rounding
    if math.isinf(ergebnis):
        return ("inf" if ergebnis > 0 else "-inf"), rounding

    if ergebnis.is_integer():
        # Very large integers keep the float notation so they stay readable
        if abs(ergebnis) < 1e16:
            return str(int(ergebnis)), rounding
        return repr(ergebnis), rounding

    if settings.get("fractions") == True:
        bruch = fractions.Fraction(ergebnis).limit_denominator(100000)
        rounding = float(bruch) != ergebnis
        zaehler = bruch.numerator
        nenner = bruch.denominator

        if nenner == 1:
            return str(zaehler), rounding
        if abs(zaehler) > nenner:
            # Mixed fraction form (e.g., 3/2 -> "1 1/2")
            sign = "-" if zaehler < 0 else ""
            ganzzahl, rest = divmod(abs(zaehler), nenner)
            return f"{sign}{ganzzahl} {rest}/{nenner}", rounding
        return str(bruch), rounding

    target_decimals = max(int(settings.get("decimal_places", 10)), 0)

    # repr() keeps '0.1' as 0.1 instead of its exact binary expansion
    with localcontext() as ctx:
        # Enough digits for the integer part (< 1e16 here) plus every requested decimal
        ctx.prec = max(400, target_decimals + 40)
        exact = Decimal(repr(ergebnis))
        gerundet = exact.quantize(Decimal(1).scaleb(-target_decimals))
        rounding = gerundet != exact
        if gerundet == 0:
            gerundet = Decimal(0)
        ausgabe = format(gerundet.normalize(), "f")

    return ausgabe, rounding


# -----------------------------
# Public entry point
# -----------------------------

def render(ergebnis, settings=None):
    """Render a value for display: '= 14', '= 1 1/2' or '≈ 0.3333333333'."""
    ausgabe, rounding = cleanup(ergebnis, settings)
    ungefaehr_zeichen = "\u2248"  # "≈"
    if rounding == True:
        return f"{ungefaehr_zeichen} {ausgabe}"
    return f"= {ausgabe}"


def trace(problem, ergebnis, settings):
    """Print the evaluated problem when the module toggle or the "debug" setting is on."""
    if debug == True or settings.get("debug") == True:
        print(f"Evaluated {problem!r} -> {ergebnis!r}")


def calculate(problem, settings=None):
    """Main API: evaluate -> format -> render string."""
    if settings is None:
        settings = config_manager.load_setting_value("all")

    try:
        ergebnis = evaluate(problem)
        trace(problem, ergebnis, settings)
        return render(ergebnis, settings)

    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = problem
        raise e
    # Convert unexpected Python exceptions (e.g. RecursionError) to our unified error type
    except Exception as e:
        raise E.MathError(message=f"{type(e).__name__}: {e}", code="9999", equation=problem) from e


def test_main():
    """Simple runner for manual testing of the engine."""
    print("Enter the problem: ")
    problem = input()
    print(calculate(problem))


if __name__ == "__main__":
    test_main()
