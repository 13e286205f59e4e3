"""Errors raised while handling a calculation request."""
from typing import Dict, Optional, Type


class CalculatorError(Exception):
    """Base class for calculation failures reported back to the caller."""

    message: str = "Calculation failed"
    status_code: int = 400

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code


class MissingFieldError(CalculatorError):
    """num1 or num2 is absent from the body."""

    message = "Invalid request format"


class MissingOperationError(CalculatorError):
    message = "Missing operation"


class InvalidOperationError(CalculatorError):
    message = "Invalid operation"


class DivideByZeroError(CalculatorError):
    message = "Cannot divide by zero"


class MalformedNumberError(CalculatorError):
    """An operand is not a finite decimal number."""

    message = "Invalid number"


class ResultOutOfRangeError(CalculatorError):
    """The result overflowed and cannot be rendered as JSON."""

    message = "Result is not a finite number"


class InternalServerError(CalculatorError):
    message = "Internal server error"
    status_code = 500


_ERRORS_BY_MESSAGE: Dict[str, Type[CalculatorError]] = {
    cls.message: cls
    for cls in (
        MissingFieldError,
        MissingOperationError,
        InvalidOperationError,
        DivideByZeroError,
        MalformedNumberError,
        ResultOutOfRangeError,
        InternalServerError,
    )
}


def error_from_response(message: str, status_code: int) -> CalculatorError:
    """
    Rebuild the exception matching an error payload returned by the server.

    :param str message: Value of the ``error`` field
    :param int status_code: HTTP status of the response

    :return: Matching CalculatorError subclass instance, or a plain CalculatorError
    :rtype: CalculatorError
    """
    cls = _ERRORS_BY_MESSAGE.get(message)
    if cls is None:
        return CalculatorError(message, status_code)
    return cls(status_code=status_code)
