"""API models package."""

from .errors import ErrorResponse
from .responses import StandardResponse

__all__ = [
    "ErrorResponse",
    "StandardResponse",
]
