"""
Standard response envelope.

Every profile and session endpoint answers with this shape.
"""

from pydantic import BaseModel
from typing import Any, Optional


class StandardResponse(BaseModel):
    """Success flag, human-readable message and optional payload."""

    success: bool
    message: Optional[str] = None
    data: Optional[Any] = None
