"""Request handler for the calculation endpoints."""
from typing import Tuple, Union

from arithmetic_http_server.common.errors import CalculatorError, InternalServerError
from arithmetic_http_server.common.logger import logger
from arithmetic_http_server.common.models import CalculationResponse, ErrorResponse
from arithmetic_http_server.common.operations import compute
from arithmetic_http_server.common.parser import FormBodyParser

HandlerResult = Tuple[int, Union[CalculationResponse, ErrorResponse]]


class RequestHandler:
    """
    Turn a form-encoded body into an HTTP status and a response model.

    Lifecycle of a request:
        - Log the raw body
        - Parse and validate the fields
        - Compute the result
        - Map known failures to their status and message, anything else to 500

    The handler keeps no state between requests.
    """

    @staticmethod
    def calculate(body: str) -> HandlerResult:
        """
        Handle ``POST /api/calculate``.

        :param str body: Raw request body, e.g. ``num1=3&operation=add&num2=4``

        :return: Tuple of (status code, response model)
        :rtype: HandlerResult
        """
        logger.info(f"📨 Received calculation request: {body}")
        return RequestHandler._run(body, require_operation=True)

    @staticmethod
    def multiply(body: str) -> HandlerResult:
        """
        Handle ``POST /api/multiply``. Any operation field is ignored.

        :param str body: Raw request body, e.g. ``num1=2.5&num2=4``

        :return: Tuple of (status code, response model)
        :rtype: HandlerResult
        """
        logger.info(f"📨 Received multiplication request: {body}")
        return RequestHandler._run(body, require_operation=False)

    @staticmethod
    def _run(body: str, require_operation: bool) -> HandlerResult:
        try:
            request = FormBodyParser.parse(body, require_operation=require_operation)
            operation = request.operation if require_operation else "multiply"
            result = compute(operation, request.num1, request.num2)
            return 200, CalculationResponse(result=result)

        except CalculatorError as exc:
            logger.warning(f"❌ Rejected request ({exc.status_code}): {exc.message}")
            return exc.status_code, ErrorResponse(error=exc.message)

        except Exception:
            logger.exception(f"💥 Error processing request: {body!r}")
            error = InternalServerError()
            return error.status_code, ErrorResponse(error=error.message)
