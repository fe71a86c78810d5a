"""Base response models for Translation Hub.

This module contains standardized response models used across
the API to ensure consistent response formats.
"""

from datetime import (
    UTC,
    datetime,
)
from typing import (
    Any,
    Dict,
    Optional,
)

from pydantic import (
    BaseModel,
    Field,
)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ErrorResponse(BaseModel):
    """Standard error response model."""

    success: bool = Field(False, description="Always false for errors")
    error: str = Field(description="Error type or code")
    message: str = Field(description="Human-readable error message")
    error_id: str = Field(description="Identifier for correlating with server logs")
    path: Optional[str] = Field(None, description="Request path")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utc_now, description="Error timestamp")


class SuccessResponse(BaseModel):
    """Simple success response model."""

    success: bool = Field(True, description="Whether the operation was successful")
    message: str = Field(description="Success message")
    timestamp: datetime = Field(default_factory=_utc_now, description="Response timestamp")


class StatusResponse(BaseModel):
    """Status response model for health checks."""

    status: str = Field(description="Service status")
    version: Optional[str] = Field(None, description="API version")
    environment: Optional[str] = Field(None, description="Deployment environment")
    components: Dict[str, str] = Field(default_factory=dict, description="Component health")
    timestamp: datetime = Field(default_factory=_utc_now, description="Response timestamp")
