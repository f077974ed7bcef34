"""Exception handlers for converting exceptions to HTTP responses.

Base exception handlers determine the HTTP status code from the exception's
error_code attribute, so new exceptions need no handler of their own:

1. Create the exception class (inheriting from ApplicationError or DomainException)
2. Add its error_code to ERROR_CODE_TO_HTTP_STATUS in error_codes.py

Password hash format errors get one extra rule: unless the settings allow
it, the specific failure kind is replaced by a single generic code, so that
clients probing the parser cannot tell which rule their input broke.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from phc_codec.application.exceptions import ApplicationError
from phc_codec.domain.exceptions import DomainException, PasswordHashFormatException
from phc_codec.infrastructure.config.settings import get_settings
from phc_codec.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)

GENERIC_HASH_ERROR_CODE = PasswordHashFormatException.error_code
GENERIC_HASH_ERROR_DETAIL = "Malformed password hash"


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """
    Handle ALL application layer exceptions.

    The HTTP status code is determined by the error_code attribute
    using the ERROR_CODE_TO_HTTP_STATUS mapping.
    """
    http_status = get_http_status_for_error_code(exc.error_code)

    return JSONResponse(
        status_code=http_status,
        content={
            "detail": exc.message,
            "error_code": exc.error_code,
        },
    )


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """
    Handle ALL domain layer exceptions.

    Format errors are collapsed to INVALID_PASSWORD_HASH when error details
    are hidden (the default in production).
    """
    http_status = get_http_status_for_error_code(exc.error_code)
    detail, error_code = exc.message, exc.error_code

    if isinstance(exc, PasswordHashFormatException) and not get_settings().show_error_details:
        logger.info(f"Rejected password hash: {exc.error_code}")
        detail, error_code = GENERIC_HASH_ERROR_DETAIL, GENERIC_HASH_ERROR_CODE

    return JSONResponse(
        status_code=http_status,
        content={
            "detail": detail,
            "error_code": error_code,
        },
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors from request data.

    Returns a list of all validation errors with field locations and messages.
    """
    validation_errors = [
        {
            # e.g. "body.salt_hex"
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation failed",
            "error_code": "VALIDATION_ERROR",
            "errors": validation_errors,
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all other unhandled exceptions.

    This is the catch-all handler for any unexpected errors.
    """
    logger.error(f"Unhandled error: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal server error occurred",
            "error_code": "INTERNAL_SERVER_ERROR",
        },
    )
