"""
Error response body for GatehouseError failures that escape a route.
"""

from typing import Any, Optional

from pydantic import BaseModel

from shared.exceptions import GatehouseError


class ErrorResponse(BaseModel):
    """Exception class name, message, machine-readable code and context."""

    error: str
    detail: Optional[str] = None
    code: Optional[str] = None
    details: dict[str, Any] = {}

    @classmethod
    def from_error(cls, exc: GatehouseError) -> "ErrorResponse":
        return cls(
            error=exc.__class__.__name__,
            detail=exc.message,
            code=exc.code,
            details=exc.details,
        )
