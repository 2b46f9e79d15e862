"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""

    url: str = Field(..., description="The URL to shorten", min_length=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    url: str = Field(..., description="The complete short URL")
    clicks: int = Field(..., description="Redirects counted so far")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "http://127.0.0.1:6688/aZ3kQ9", "clicks": 0},
            ]
        }
    }


class LinkInfoResponse(BaseModel):
    """Response with link information."""

    identifier: str
    url: str = Field(..., description="The original long URL")
    short_url: str
    clicks: int
    created_at: Optional[datetime] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Database status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(..., description="Error message")
