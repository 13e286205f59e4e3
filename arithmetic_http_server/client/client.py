"""HTTP client."""
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress
import requests

from arithmetic_http_server.common.errors import CalculatorError, error_from_response


class ArithmeticClient(BaseModel):
    """
    HTTP client sending calculations to a running server.

    The HTTP client:
    - form-encodes the operands and operation tag
    - posts them to ``/api/calculate`` or ``/api/multiply``
    - returns the result, or raises the error the server reported
    """

    # Make the Pydantic instance immutable (read-only), to prevent errors
    # that could be caused by changes to the network configuration during execution.
    model_config = ConfigDict(frozen=True)

    host: IPvAnyAddress = Field(default="127.0.0.1", description="Server host address")
    port: int = Field(default=8080, ge=1, le=65535, description="Server TCP port")
    timeout: float = Field(default=5.0, gt=0, description="Request timeout in seconds")

    @property
    def base_url(self) -> str:
        """Root URL of the server."""
        return f"http://{self.host}:{self.port}"

    def calculate(self, num1: float, operation: str, num2: float) -> float:
        """
        Apply an operation on the server.

        :param float num1: Left operand
        :param str operation: One of add, subtract, multiply, divide
        :param float num2: Right operand

        :return: Computed result
        :rtype: float
        :raises CalculatorError: If the server rejects the request
        """
        return self._post("/api/calculate", {"num1": num1, "operation": operation, "num2": num2})

    def multiply(self, num1: float, num2: float) -> float:
        """
        Multiply two numbers on the multiply-only endpoint.

        :param float num1: Left operand
        :param float num2: Right operand

        :return: Product
        :rtype: float
        :raises CalculatorError: If the server rejects the request
        """
        return self._post("/api/multiply", {"num1": num1, "num2": num2})

    def _post(self, path: str, fields: Dict[str, object]) -> float:
        # requests form-encodes a dict body as application/x-www-form-urlencoded
        response = requests.post(f"{self.base_url}{path}", data=fields, timeout=self.timeout)

        try:
            payload = response.json()
        except ValueError as exc:
            raise CalculatorError(
                f"Unexpected response from server: {response.text!r}", response.status_code
            ) from exc

        if not isinstance(payload, dict):
            raise CalculatorError(
                f"Unexpected response from server: {response.text!r}", response.status_code
            )

        if response.status_code != 200:
            raise error_from_response(payload.get("error", response.reason), response.status_code)

        if "result" not in payload:
            raise CalculatorError(
                f"Response from server has no result: {response.text!r}", response.status_code
            )
        return float(payload["result"])
