"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CreateLinkRequest(BaseModel):
    """Request to create a short link.

    Both fields are optional at the schema level so that missing or empty
    values are reported by the link validator with the rest of the violations.
    """

    url: Optional[str] = Field(None, description="The URL to shorten")
    code: Optional[str] = Field(None, description="Optional custom code")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
                {"url": "https://example.com/sale", "code": "promo"},
            ]
        }
    }


class CreateLinkResponse(BaseModel):
    """Stored record plus its public short link."""

    code: str = Field(..., description="The stored code (lowercase)")
    url: str = Field(..., description="The destination URL")
    created_at: datetime = Field(..., description="Creation timestamp")
    link: str = Field(..., description="The complete short URL")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "code": "ab3f9",
                    "url": "https://example.com",
                    "created_at": "2024-01-01T12:00:00Z",
                    "link": "https://short.example/ab3f9",
                }
            ]
        }
    }


class ErrorResponse(BaseModel):
    """Error response. `stack` is only set outside production."""

    message: str = Field(..., description="Human-readable error message")
    stack: Optional[str] = Field(None, description="Diagnostic trace")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    database: str
    cache: str
