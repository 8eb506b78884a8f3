"""Conversion of errors into HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from meetingmail.errors import MeetingMailError

logger = logging.getLogger(__name__)

# Client-facing message per request field
FIELD_MESSAGES = {
    "transcript": "Transcript is required",
    "recipient": "Valid email is required",
    "subject": "Subject is required",
    "summary": "Summary is required",
}


def validation_message(exc: RequestValidationError) -> str:
    """Pick a single message describing the first invalid field."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"

    error = errors[0]
    loc = error.get("loc", ())
    if error.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    if len(loc) < 2:
        return "Invalid request"

    field = loc[1]
    if field in FIELD_MESSAGES:
        return FIELD_MESSAGES[field]
    return f"{field}: {error.get('msg', 'invalid value')}"


async def handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = validation_message(exc)
    logger.info(f"Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse({"message": message}, status_code=400)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        {"message": exc.detail}, status_code=exc.status_code, headers=exc.headers
    )


async def handle_service_error(request: Request, exc: MeetingMailError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {type(exc).__name__}: {exc.message}")
    return JSONResponse({"message": exc.message}, status_code=exc.status_code)


def register_exception_handlers(app: FastAPI) -> None:
    """Map validation and service errors to {"message": ...} responses."""
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation)
    app.add_exception_handler(MeetingMailError, handle_service_error)
