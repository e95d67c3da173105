"""
Common Pydantic models shared across the application.
"""

from datetime import datetime, timezone
from typing import Literal
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response model."""

    status: Literal["error"] = "error"
    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict | None = Field(None, description="Additional error context")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
