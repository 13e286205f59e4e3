"""Arithmetic operations supported by the calculation endpoint."""
from collections.abc import Callable as ABCCallable
import math
import operator
from typing import Callable, Dict, NamedTuple

from arithmetic_http_server.common.errors import (
    DivideByZeroError,
    InvalidOperationError,
    ResultOutOfRangeError,
)
from arithmetic_http_server.common.logger import logger


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]


class Operation(NamedTuple):
    """An operation tag resolved to its function and log wording."""

    verb: str
    symbol: str
    fn: OperatorFn


# Tags are matched exactly and case-sensitively
OPERATIONS: Dict[str, Operation] = {
    "add": Operation("Adding", "+", operator.add),
    "subtract": Operation("Subtracting", "-", operator.sub),
    "multiply": Operation("Multiplying", "*", operator.mul),
    "divide": Operation("Dividing", "/", operator.truediv),
}


def compute(operation: str, num1: float, num2: float) -> float:
    """
    Apply an operation tag to two operands.

    :param str operation: One of the keys of OPERATIONS
    :param float num1: Left operand
    :param float num2: Right operand

    :return: Result of the operation
    :rtype: float
    :raises InvalidOperationError: If the tag is not supported
    :raises DivideByZeroError: If dividing by zero
    :raises ResultOutOfRangeError: If the result overflows to infinity
    """
    op = OPERATIONS.get(operation)
    if op is None:
        raise InvalidOperationError()

    if op.fn is operator.truediv and num2 == 0:
        raise DivideByZeroError()

    result: float = op.fn(num1, num2)
    if not math.isfinite(result):
        raise ResultOutOfRangeError()

    logger.info(f"🧮 {op.verb} {num1:g} {op.symbol} {num2:g} = {result:g}")
    return result
