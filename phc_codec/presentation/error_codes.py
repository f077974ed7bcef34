"""Error code to HTTP status code mapping.

This module provides a centralized mapping of error codes to HTTP status codes.
When you add a new exception, simply add its error_code to this mapping.
"""

from fastapi import status

# Codes of every wire-format error raised by the codec
PASSWORD_HASH_FORMAT_ERRORS = frozenset(
    {
        "INVALID_PASSWORD_HASH",
        "INVALID_IDENT",
        "INVALID_VERSION",
        "INVALID_PARAM",
        "DUPLICATE_PARAM_KEY",
        "TOO_MANY_PARAMS",
        "INVALID_BASE64_CHAR",
        "INVALID_BASE64_LENGTH",
        "NON_CANONICAL_BASE64",
        "SALT_TOO_LONG",
        "HASH_TOO_LONG",
        "STRING_TOO_LONG",
        "MISSING_SEPARATOR",
        "TRAILING_DATA",
    }
)

# Map error codes to HTTP status codes
ERROR_CODE_TO_HTTP_STATUS = {
    # Password hash format errors (malformed client input)
    **{code: status.HTTP_400_BAD_REQUEST for code in PASSWORD_HASH_FORMAT_ERRORS},

    # Domain errors
    "INVALID_ENTITY_STATE": status.HTTP_400_BAD_REQUEST,
    "INVALID_ENCODING": status.HTTP_400_BAD_REQUEST,
    "DOMAIN_ERROR": status.HTTP_400_BAD_REQUEST,

    # Application errors
    "UNSUPPORTED_ALGORITHM": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "APPLICATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,

    # Infrastructure errors
    "INTERNAL_SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error_code(error_code: str) -> int:
    """
    Get HTTP status code for a given error code.

    Args:
        error_code: The error code from the exception

    Returns:
        HTTP status code (defaults to 400 if not found)
    """
    return ERROR_CODE_TO_HTTP_STATUS.get(
        error_code,
        status.HTTP_400_BAD_REQUEST,  # Default for unknown errors
    )
