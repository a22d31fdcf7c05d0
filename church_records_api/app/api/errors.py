"""
Translation of domain errors into HTTP responses.

``ValidationError`` becomes 400, ``NotFoundError`` (including a missing
contribution member) 404 and ``StoreFailure`` 500.  Store failures are
logged with their traceback; the client only sees a generic message.

Bodies that FastAPI itself cannot decode (no body, malformed JSON) are
answered with the same 400 ``{"detail": "<reason>"}`` shape as the
validation rules.
"""

import logging

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.errors import NotFoundError, RecordsError, StoreFailure, ValidationError

logger = logging.getLogger(__name__)


def to_http_exception(exc: RecordsError, action: str) -> HTTPException:
    if isinstance(exc, ValidationError):
        logger.warning("Rejected request to %s: %s", action, exc.reason)
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.reason)
    if isinstance(exc, NotFoundError):
        logger.info("Could not %s: %s %s not found", action, exc.entity, exc.entity_id)
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)
    if isinstance(exc, StoreFailure):
        logger.error("Failed to %s: %s", action, exc.message, exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Server error occurred while trying to {action}.",
    )


def describe_request_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid input"
    error = errors[0]
    if error.get("type") == "json_invalid":
        return "Invalid input: request body is not valid JSON"
    if error.get("type") == "missing" and tuple(error.get("loc", ())) == ("body",):
        return "Invalid input: request body is required"
    return f"Invalid input: {error.get('msg', 'malformed request')}"


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    reason = describe_request_error(exc)
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, reason)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": reason})
