import pytest

from PemdasCalc import error as E


@pytest.mark.parametrize("error_class, code", [
    (E.ExpectedNumber, "3001"),
    (E.UnclosedParenthesis, "3002"),
    (E.TrailingInput, "3003"),
])
def test_parse_errors(error_class, code):
    error = error_class(7, equation="1+")
    assert isinstance(error, E.ParseError)
    assert error.code == code
    assert error.position == 7
    assert error.equation == "1+"
    assert code in E.ERROR_MESSAGES


@pytest.mark.parametrize("error_class, code", [
    (E.DivisionByZero, "3004"),
    (E.ModuloByZero, "3005"),
])
def test_calculation_errors(error_class, code):
    error = error_class()
    assert isinstance(error, E.CalculationError)
    assert error.code == code
    assert error.position is None
    assert code in E.ERROR_MESSAGES


def test_str_includes_position_when_known():
    assert str(E.TrailingInput(2)) == "Unexpected trailing input at pos 2"
    assert str(E.DivisionByZero()) == "Division by zero"


def test_generic_math_error_defaults():
    error = E.MathError("boom")
    assert error.code == "9999"
    assert error.equation is None
    assert str(error) == "boom"


def test_category():
    assert E.category("3004") == "Calculator Error"
    assert E.category("4002") == "UI Error"
    assert E.category("9999") == "Runtime Error"
    assert E.category("8123") == "Runtime Error"
