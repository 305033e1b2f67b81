# core/errors.py


class ColorArithmeticError(ValueError):
    """
    Raised when a color operation receives an invalid divisor.
    """


class DivideByZeroError(ColorArithmeticError, ZeroDivisionError):
    def __init__(self, message: str = "Division by zero"):
        super().__init__(message)


class NegativeDivisorError(ColorArithmeticError):
    def __init__(self, message: str = "Division by negative number"):
        super().__init__(message)
