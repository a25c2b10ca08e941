"""
API Response Schemas

Pydantic models for the JSON bodies this service returns.
The success response of the smmsg function is plain text and has no model.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Generic error body. Never carries validation details."""
    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    """Response model for the health endpoint."""
    status: str
