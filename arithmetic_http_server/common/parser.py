"""Decode form-encoded calculation requests."""
import math
from typing import Dict, List, Tuple
from urllib.parse import parse_qsl

from arithmetic_http_server.common.errors import (
    MalformedNumberError,
    MissingFieldError,
    MissingOperationError,
)
from arithmetic_http_server.common.models import CalculationRequest


class FormBodyParser:
    """
    Decode ``key=value&key=value`` request bodies into calculation requests.

    Rules:
        - Pairs are decoded with the standard query-string decoder, so a value
          always runs to the next ``&`` or to the end of the body.
        - Keys match exactly; the first occurrence of a key wins.
        - ``num1`` and ``num2`` must both be present before anything else is checked.
        - ``operation`` is only required when asked for, and is checked before
          the operands are converted to numbers.

    Examples:
        - ``num1=3&operation=add&num2=4`` -> num1=3.0, num2=4.0, operation="add"
        - ``num2=4&num1=2.5`` -> num1=2.5, num2=4.0, operation=None
    """

    @staticmethod
    def parse_fields(body: str) -> Dict[str, str]:
        """
        Split a body into a field mapping.

        :param str body: Raw request body

        A segment without ``=`` (e.g. a bare ``num1``) does not define a field.

        :return: Field name to value, keeping the first value of repeated keys
        :rtype: Dict[str, str]
        """
        segments: List[str] = [segment for segment in body.split("&") if "=" in segment]
        pairs: List[Tuple[str, str]] = parse_qsl("&".join(segments), keep_blank_values=True)
        fields: Dict[str, str] = {}
        for key, value in pairs:
            fields.setdefault(key, value)
        return fields

    @staticmethod
    def parse_number(text: str) -> float:
        """
        Convert decimal text to a finite float.

        :param str text: Field value

        :return: Parsed number
        :rtype: float
        :raises MalformedNumberError: If the text is not a finite decimal number
        """
        try:
            value = float(text)
        except ValueError as exc:
            raise MalformedNumberError() from exc
        if not math.isfinite(value):
            raise MalformedNumberError()
        return value

    @staticmethod
    def parse(body: str, require_operation: bool = True) -> CalculationRequest:
        """
        Decode and validate a calculation request body.

        :param str body: Raw request body
        :param bool require_operation: Whether an ``operation`` field must be present

        :return: Validated request
        :rtype: CalculationRequest
        :raises MissingFieldError: If num1 or num2 is absent
        :raises MissingOperationError: If operation is required but absent
        :raises MalformedNumberError: If an operand is not a number
        """
        fields = FormBodyParser.parse_fields(body)

        if "num1" not in fields or "num2" not in fields:
            raise MissingFieldError()

        operation = fields.get("operation")
        if require_operation and operation is None:
            raise MissingOperationError()

        return CalculationRequest(
            num1=FormBodyParser.parse_number(fields["num1"]),
            num2=FormBodyParser.parse_number(fields["num2"]),
            operation=operation if require_operation else None,
        )
