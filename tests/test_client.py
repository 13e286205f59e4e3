"""Test class ArithmeticClient."""
from pydantic import ValidationError
import pytest
import requests

from arithmetic_http_server.client import client as client_module
from arithmetic_http_server.client.client import ArithmeticClient
from arithmetic_http_server.common.errors import (
    CalculatorError,
    DivideByZeroError,
    InternalServerError,
)


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, status_code: int, payload=None, text: str = "", reason: str = "OK"):
        self.status_code = status_code
        self._payload = payload
        self.text = text
        self.reason = reason

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON")
        return self._payload


@pytest.fixture
def fake_post(monkeypatch):
    """Replace requests.post, recording calls and returning a queued response."""
    calls = []
    responses = []

    def post(url, data=None, timeout=None):
        calls.append({"url": url, "data": data, "timeout": timeout})
        return responses.pop(0)

    monkeypatch.setattr(client_module.requests, "post", post)
    return calls, responses


def test_client_valid_config() -> None:
    """Check that a valid host and port correctly initialize the client."""
    client = ArithmeticClient(host="127.0.0.1", port=8080)
    assert str(client.host) == "127.0.0.1"
    assert client.port == 8080
    assert client.base_url == "http://127.0.0.1:8080"


def test_client_invalid_ip() -> None:
    """Ensure invalid IP addresses raise a ValidationError."""
    with pytest.raises(ValidationError):
        ArithmeticClient(host="999.999.999.999", port=8080)


def test_client_invalid_port() -> None:
    """Ensure ports outside valid range raise a ValidationError."""
    with pytest.raises(ValidationError):
        ArithmeticClient(host="127.0.0.1", port=70000)


def test_calculate_posts_form_fields(fake_post) -> None:
    """Verify calculate posts the operands and operation to /api/calculate."""
    calls, responses = fake_post
    responses.append(FakeResponse(200, {"result": 7}))

    result = ArithmeticClient().calculate(3, "add", 4)

    assert result == 7.0
    assert isinstance(result, float)
    assert calls[0]["url"] == "http://127.0.0.1:8080/api/calculate"
    assert calls[0]["data"] == {"num1": 3, "operation": "add", "num2": 4}
    assert calls[0]["timeout"] == 5.0


def test_multiply_posts_operands(fake_post) -> None:
    """Verify multiply posts only the operands to /api/multiply."""
    calls, responses = fake_post
    responses.append(FakeResponse(200, {"result": 10}))

    assert ArithmeticClient(port=9000).multiply(2.5, 4) == 10.0
    assert calls[0]["url"] == "http://127.0.0.1:9000/api/multiply"
    assert calls[0]["data"] == {"num1": 2.5, "num2": 4}


def test_calculate_raises_server_error(fake_post) -> None:
    """Verify a 400 payload is raised as the matching error."""
    _, responses = fake_post
    responses.append(FakeResponse(400, {"error": "Cannot divide by zero"}))

    with pytest.raises(DivideByZeroError):
        ArithmeticClient().calculate(10, "divide", 0)


def test_calculate_raises_internal_error(fake_post) -> None:
    """Verify a 500 payload is raised as an internal error."""
    _, responses = fake_post
    responses.append(FakeResponse(500, {"error": "Internal server error"}))

    with pytest.raises(InternalServerError) as excinfo:
        ArithmeticClient().calculate(1, "add", 1)
    assert excinfo.value.status_code == 500


def test_calculate_non_json_response(fake_post) -> None:
    """Verify a non-JSON response is reported as a CalculatorError."""
    _, responses = fake_post
    responses.append(FakeResponse(404, None, text="Not Found", reason="Not Found"))

    with pytest.raises(CalculatorError) as excinfo:
        ArithmeticClient().calculate(1, "add", 1)
    assert excinfo.value.status_code == 404


@pytest.mark.parametrize("status_code", [200, 400, 500])
def test_calculate_non_object_json(fake_post, status_code: int) -> None:
    """Verify a JSON body that is not an object is reported as a CalculatorError."""
    _, responses = fake_post
    responses.append(FakeResponse(status_code, ["unexpected"], text='["unexpected"]'))

    with pytest.raises(CalculatorError) as excinfo:
        ArithmeticClient().calculate(1, "add", 1)
    assert excinfo.value.status_code == status_code


def test_calculate_missing_result(fake_post) -> None:
    """Verify a 200 response without a result is reported as a CalculatorError."""
    _, responses = fake_post
    responses.append(FakeResponse(200, {"value": 2}, text='{"value": 2}'))

    with pytest.raises(CalculatorError) as excinfo:
        ArithmeticClient().calculate(1, "add", 1)
    assert "no result" in excinfo.value.message


def test_connection_error_propagates(monkeypatch) -> None:
    """Ensure transport errors are left to the caller."""

    def post(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(client_module.requests, "post", post)
    with pytest.raises(requests.ConnectionError):
        ArithmeticClient().calculate(1, "add", 1)
