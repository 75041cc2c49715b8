"""
Forum Backend — Shared Response Schemas
=========================================

What:  Response models used by more than one resource: error bodies, plain
       confirmations and the health check.
"""

from typing import Optional

from pydantic import BaseModel, Field

# Ids must fit a signed 64-bit INTEGER column
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


class MessageResponse(BaseModel):
    """Confirmation body returned by writes that have nothing else to echo."""
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "Subreddit with id 9999 does not exist.",
            "request_id": "1f3a9c2e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
