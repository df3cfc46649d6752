"""
API-specific response models for FastAPI endpoints.

The validation endpoint returns the core ValidationResults envelope as is;
these models cover the operational endpoints.
"""

from typing import Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str = Field(
        description="Service status",
        examples=["healthy", "degraded"],
    )
    version: str = Field(description="Service version")
    validators_configured: bool = Field(
        description="All three validator adapters could be loaded"
    )
    detail: Optional[str] = Field(
        default=None,
        description="Why the service is degraded, if it is",
    )


class ServiceInfoResponse(BaseModel):
    """Response for the root endpoint."""

    service: str
    version: str
    docs: str = "/docs"
    health: str = "/health"
    validate_endpoint: str = "/referenceccdaservice/"
    metrics: Optional[str] = None
