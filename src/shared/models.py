"""
Pydantic models for HTTP response bodies.

This module defines the JSON payloads returned by the function app:
- Science report returned by the SampleTrigger endpoint
- Error body returned when configuration is missing or invalid
- Minimal Health endpoint status
"""

from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


# =============================================================================
# RESPONSE MODELS
# =============================================================================


class ScienceReport(BaseModel):
    """
    Body returned by GET /api/sample.

    Serialized with camelCase keys (scienceReport, timeStamp).
    """

    model_config = ConfigDict(populate_by_name=True)

    science_report: str = Field(..., alias="scienceReport", description="Report sentence")
    time_stamp: datetime = Field(..., alias="timeStamp", description="Time the report was generated")

    @field_validator("time_stamp")
    @classmethod
    def validate_timezone(cls, v: datetime) -> datetime:
        """Ensure timestamp carries a UTC offset"""
        if v.tzinfo is None:
            raise ValueError("timeStamp must be timezone-aware")
        return v

    @field_serializer("time_stamp")
    def serialize_time_stamp(self, v: datetime) -> str:
        return v.isoformat()


class ErrorResponse(BaseModel):
    """Body returned for server-side failures."""

    error: str = Field(..., description="Short error category")
    message: str = Field(..., description="Human-readable message")
    setting: Optional[str] = Field(default=None, description="Configuration key at fault, if any")


class HealthStatus(BaseModel):
    """Minimal public health payload (no configuration details)."""

    status: Literal["healthy", "degraded", "unhealthy"]
    timestamp: str = Field(..., description="ISO 8601 timestamp")
