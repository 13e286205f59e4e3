"""Pydantic models for calculation requests and responses."""
from typing import Optional, Union

from pydantic import BaseModel, Field, field_serializer


class CalculationRequest(BaseModel):
    """Operands and operation tag decoded from a form body."""

    num1: float = Field(..., description="Left operand")
    num2: float = Field(..., description="Right operand")
    operation: Optional[str] = Field(default=None, description="Operation tag, absent for multiply-only requests")


class CalculationResponse(BaseModel):
    """Successful calculation, rendered as ``{"result": <number>}``."""

    result: float = Field(..., description="Computed value")

    @field_serializer("result")
    def serialize_result(self, value: float) -> Union[int, float]:
        """Render integral values as JSON integers (7 rather than 7.0)."""
        if float(value).is_integer():
            return int(value)
        return value


class ErrorResponse(BaseModel):
    """Failed calculation, rendered as ``{"error": "<message>"}``."""

    error: str = Field(..., description="Human-readable error message")
