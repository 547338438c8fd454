"""
StreetMap Backend — Shared Pydantic Schemas
=============================================

What:  The geographic point type used by both collections, plus the response
       envelopes that are not tied to a single resource.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Point(BaseModel):
    """A latitude/longitude pair. Both coordinates are required and numeric."""
    lat: float = Field(description="Latitude in decimal degrees")
    lng: float = Field(description="Longitude in decimal degrees")


class SuccessResponse(BaseModel):
    success: bool = Field(default=True)


class MessageResponse(BaseModel):
    message: str = Field(description="Human-readable confirmation")


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body returned by every endpoint on failure.

    Example:
        {
            "success": false,
            "error": "Street with ID '...' was not found",
            "request_id": "a1b2c3d4"
        }
    """
    success: bool = Field(default=False)
    error: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
