"""Shared error types and the uniform JSON error envelope."""

from datetime import datetime, timezone
from http import HTTPStatus

from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field


class ServiceError(Exception):
    """Base class for failures raised by a service layer.

    The message is safe to return to API callers.
    """

    pass


class ErrorResponse(BaseModel):
    """Error envelope returned by every failing endpoint."""

    error: str
    message: str
    status_code: int = Field(alias="statusCode")
    timestamp: datetime

    model_config = {"populate_by_name": True}


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build a JSON error response with the standard envelope."""
    try:
        reason = HTTPStatus(status_code).phrase
    except ValueError:
        reason = "Error"

    body = ErrorResponse(
        error=reason,
        message=message,
        status_code=status_code,
        timestamp=datetime.now(timezone.utc),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
    )
