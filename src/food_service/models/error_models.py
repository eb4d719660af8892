"""Error response model returned by the HTTP boundary."""

from datetime import UTC, datetime
from http import HTTPStatus

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error payload for failed API requests."""

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC), description="When the error occurred"
    )
    status: int = Field(..., description="HTTP status code")
    error: str = Field(..., description="HTTP reason phrase")
    message: str = Field(..., description="Human-readable error detail")
    path: str = Field(..., description="Request path that failed")

    @classmethod
    def for_status(cls, status_code: int, message: str, path: str) -> "ErrorResponse":
        """Build an error response with the reason phrase for a status code.

        Args:
            status_code: HTTP status code
            message: Error detail
            path: Request path

        Returns:
            ErrorResponse: Populated error payload
        """
        return cls(
            status=status_code,
            error=HTTPStatus(status_code).phrase,
            message=message,
            path=path,
        )
