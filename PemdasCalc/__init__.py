"""PEMDAS Calculator: recursive-descent expression evaluator with console and Qt front-ends."""

from .MathEngine import calculate, evaluate
from .error import MathError, ParseError, CalculationError

__all__ = ["calculate", "evaluate", "MathError", "ParseError", "CalculationError"]
