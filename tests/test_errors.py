"""Test the error taxonomy and error_from_response."""
import pytest

from arithmetic_http_server.common.errors import (
    CalculatorError,
    DivideByZeroError,
    InternalServerError,
    InvalidOperationError,
    MalformedNumberError,
    MissingFieldError,
    MissingOperationError,
    ResultOutOfRangeError,
    error_from_response,
)


@pytest.mark.parametrize(
    "cls,message,status_code",
    [
        (MissingFieldError, "Invalid request format", 400),
        (MissingOperationError, "Missing operation", 400),
        (InvalidOperationError, "Invalid operation", 400),
        (DivideByZeroError, "Cannot divide by zero", 400),
        (MalformedNumberError, "Invalid number", 400),
        (ResultOutOfRangeError, "Result is not a finite number", 400),
        (InternalServerError, "Internal server error", 500),
    ],
)
def test_error_messages(cls, message: str, status_code: int) -> None:
    """Each error carries its public message and status."""
    exc = cls()
    assert isinstance(exc, CalculatorError)
    assert exc.message == message
    assert str(exc) == message
    assert exc.status_code == status_code


def test_error_from_response_known() -> None:
    """A known message is mapped back to its class."""
    exc = error_from_response("Cannot divide by zero", 400)
    assert isinstance(exc, DivideByZeroError)
    assert exc.status_code == 400


def test_error_from_response_unknown() -> None:
    """An unknown message yields a plain CalculatorError."""
    exc = error_from_response("Not Found", 404)
    assert type(exc) is CalculatorError
    assert exc.message == "Not Found"
    assert exc.status_code == 404
