"""
FiscalAPI Samples — Response Schemas Owned by This API
========================================================

What:  The few response bodies this application builds itself, as opposed
       to FiscalAPI data it passes through untouched.
Why:   Consistent error format and OpenAPI documentation for the routes
       that do more than return an envelope or its data.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ErrorResponse(BaseModel):
    """
    Standardized error body for errors raised by this application
    (unreachable FiscalAPI, disk failures, missing package file).

    A failed FiscalAPI call is NOT reported with this shape; its 400 body
    is the FiscalAPI envelope itself.
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class FileSavedResponse(BaseModel):
    """Returned after a downloaded file was decoded and written to disk."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = Field(default="Archivo descargado y guardado en disco.")
    file_name: str = Field(description="Name of the file written under DOWNLOADS_ROOT")


class HealthResponse(BaseModel):
    """
    Health check response.

    Reports configuration state only: probing FiscalAPI on every health
    check would spend the account's request quota.
    """
    status: str = Field(description="Overall service status: healthy, degraded")
    version: str = Field(description="Application version")
    fiscalapi_url: str = Field(description="FiscalAPI base URL in use")
    credentials_configured: bool = Field(description="API key and tenant are both set")
    uptime_seconds: float = Field(description="Seconds since service started")
