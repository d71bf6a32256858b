"""Response envelope shared by every preference endpoint."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from ..core.prefs.exceptions import PrefsError

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """Standardised structure for API error payloads."""

    code: str = Field(..., description="Machine readable error code")
    message: str = Field(..., description="Human readable error message")
    details: dict[str, Any] | None = Field(
        default=None, description="Optional extended error context"
    )


class ResponseEnvelope(BaseModel, Generic[T]):
    """Wrapper carrying either a payload or an error for each response."""

    success: bool = Field(True, description="Indicates if the request was successful")
    data: T | None = Field(
        default=None, description="Payload accompanying a successful response"
    )
    error: ErrorDetail | None = Field(
        default=None, description="Error payload when success is False"
    )
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Timestamp when the response payload was generated",
    )

    @classmethod
    def success_payload(cls, data: T | None = None) -> "ResponseEnvelope[T]":
        """Wrap a successful response payload."""

        return cls(success=True, data=data)

    @classmethod
    def error_payload(
        cls, code: str, message: str, details: dict[str, Any] | None = None
    ) -> "ResponseEnvelope[Any]":
        """Wrap an error response payload."""

        return cls(
            success=False,
            data=None,
            error=ErrorDetail(code=code, message=message, details=details),
        )

    @classmethod
    def from_error(cls, exc: PrefsError) -> "ResponseEnvelope[Any]":
        """Translate a preference error into an error envelope."""

        return cls.error_payload(exc.code, str(exc), exc.details)
