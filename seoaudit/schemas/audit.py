"""
Request schemas for the audit endpoints.
"""

from pydantic import BaseModel, Field, HttpUrl


class AuditRequest(BaseModel):
    """Request to audit a single page."""

    url: HttpUrl = Field(
        ...,
        description="Absolute http(s) URL of the page to audit",
        examples=["https://example.com"],
    )

    class Config:
        json_schema_extra = {
            "example": {
                "url": "https://example.com/blog/post",
            }
        }
