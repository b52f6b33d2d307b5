"""
Translation of service errors into HTTP responses.

This is the one place where error kinds become status codes.  Every
error body uses the same envelope as successful responses::

    {"status": "error", "message": "..."}

``MeetupNotFound`` maps to 404 and every other service failure to
500 with the store's error text in the message.  Requests that fail
validation (missing fields, malformed JSON, non‑integer IDs) are
rejected by FastAPI before any service runs; they keep FastAPI's 422
status but are rendered in the envelope as well.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from meetup_api.app.core.errors import MeetupNotFound, MeetupServiceError
from meetup_api.app.schemas.meetup import ErrorResponse

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(ErrorResponse(message=message)),
    )


async def meetup_error_handler(request: Request, exc: MeetupServiceError) -> JSONResponse:
    if isinstance(exc, MeetupNotFound):
        return error_response(status.HTTP_404_NOT_FOUND, exc.message)
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    message = "Invalid request: " + "; ".join(parts)
    return error_response(422, message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MeetupServiceError, meetup_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
