"""Body returned by every failed request."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    timestamp: datetime = Field(..., description="Time the error occurred")
    status: int = Field(..., description="HTTP status code", examples=[404])
    error: str = Field(..., description="HTTP reason phrase", examples=["Not Found"])
    message: str = Field(..., description="Human readable message", examples=["Book not found with ID: 999"])
    path: str = Field(..., description="Request path that caused the error", examples=["/api/v1/books/999"])
    validation_errors: Optional[List[str]] = Field(
        None, description="Per-field validation messages, if applicable"
    )
