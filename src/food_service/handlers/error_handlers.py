"""Exception handlers that turn request failures into ErrorResponse payloads."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from food_service.models.error_models import ErrorResponse

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def error_json_response(status_code: int, message: str, path: str) -> JSONResponse:
    """Build a JSON response carrying an ErrorResponse body.

    Args:
        status_code: HTTP status code
        message: Error detail
        path: Request path

    Returns:
        JSONResponse with the serialized error
    """
    error = ErrorResponse.for_status(status_code, message, path)
    return JSONResponse(status_code=status_code, content=error.model_dump(mode="json"))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed path or query parameters with 400."""
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.info(f"Rejected request to {request.url.path}: {details}")
    return error_json_response(400, f"Invalid request parameters: {details}", request.url.path)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Report any unhandled failure as a generic 500."""
    logger.exception(f"Unhandled error processing {request.url.path}: {exc}")
    return error_json_response(500, UNEXPECTED_ERROR_MESSAGE, request.url.path)


def register_error_handlers(app: FastAPI) -> None:
    """Install the error handlers on an application.

    Args:
        app: The FastAPI application
    """
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
