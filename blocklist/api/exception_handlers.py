"""Global exception handlers that map service exceptions to HTTP responses."""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blocklist.errors import (
    DomainValidationError,
    FatalStorageError,
    UnsupportedMediaTypeError,
)
from blocklist.schemas.response import ERROR, ApiResponse

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR_MESSAGE = "Internal server error."


def error_response(status_code: int, message: str) -> JSONResponse:
    """Return an error envelope with the given status code and message."""
    body = ApiResponse(status=ERROR, status_code=status_code, message=message)
    return JSONResponse(status_code=status_code, content=body.to_payload())


def domain_validation_error_handler(
    _request: Request, exc: DomainValidationError
) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, str(exc))


def unsupported_media_type_error_handler(
    _request: Request, exc: UnsupportedMediaTypeError
) -> JSONResponse:
    return error_response(status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, str(exc))


def fatal_storage_error_handler(request: Request, exc: FatalStorageError) -> JSONResponse:
    # Storage details stay in the log.
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_SERVER_ERROR_MESSAGE
    )


def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Wrap framework errors (unknown route, wrong method) in the same envelope."""
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        allowed = (exc.headers or {}).get("Allow", "")
        message = f"Expected method {allowed}, got: {request.method}."
        response = error_response(exc.status_code, message)
        if allowed:
            response.headers["Allow"] = allowed
        return response
    return error_response(exc.status_code, str(exc.detail))


def register_exception_handlers(app):
    """Register exception handlers on the FastAPI app."""
    app.add_exception_handler(DomainValidationError, domain_validation_error_handler)
    app.add_exception_handler(FatalStorageError, fatal_storage_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(
        UnsupportedMediaTypeError, unsupported_media_type_error_handler
    )
