"""Exception handlers — every error response is JSON with an ``error`` field."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from booking_records.application.schemas import INVALID_EMAIL_MESSAGE
from booking_records.domain.exceptions import StorageError
from booking_records.presentation.api.endpoints.system import available_endpoints

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Invalid ID format"
MISSING_CREATE_FIELDS_MESSAGE = (
    "Missing required fields: clientId, name, and email are required"
)
MISSING_UPDATE_FIELDS_MESSAGE = "Missing required fields: name and email are required"

_MISSING_TYPES = frozenset({"missing", "string_too_short"})
_UNMATCHED_ROUTE_CODES = frozenset(
    {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}
)


def _validation_message(request: Request, errors: list[dict]) -> str:
    """Pick the single most relevant message, path errors first."""
    if any(err.get("loc", ("",))[0] == "path" for err in errors):
        return INVALID_ID_MESSAGE
    if any(err.get("type") in _MISSING_TYPES for err in errors):
        if request.method == "POST":
            return MISSING_CREATE_FIELDS_MESSAGE
        return MISSING_UPDATE_FIELDS_MESSAGE
    if any(err.get("loc", ())[-1:] == ("email",) for err in errors):
        return INVALID_EMAIL_MESSAGE
    if any(err.get("type") == "json_invalid" for err in errors):
        return "Invalid JSON body"
    return "Invalid request"


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = list(exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": _validation_message(request, errors),
            "details": [
                {
                    "field": ".".join(str(part) for part in err.get("loc", ())[1:]),
                    "message": err.get("msg", ""),
                }
                for err in errors
            ],
        },
    )


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    headers = getattr(exc, "headers", None)
    if isinstance(exc.detail, dict):
        return JSONResponse(status_code=exc.status_code, content=exc.detail, headers=headers)
    # A known path with an unsupported method is an unmatched route too
    if exc.status_code in _UNMATCHED_ROUTE_CODES:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "Endpoint not found",
                "availableEndpoints": available_endpoints(),
            },
        )
    return JSONResponse(
        status_code=exc.status_code, content={"error": exc.detail}, headers=headers
    )


async def _storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Database error", "details": exc.message},
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
