"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["PACKAGE_NOT_FOUND"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["Package not found: Pack 42"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )
    details: dict | None = Field(
        None,
        description="Extra context, e.g. the available packages",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "PACKAGE_NOT_FOUND",
                    "message": "Package not found: Pack 42",
                    "request_id": "abc123",
                    "details": {"available_packages": ["Pack 100", "Pack 500"]},
                }
            ]
        }
    }
