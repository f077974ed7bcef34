"""Pydantic models for error responses used in OpenAPI schema generation."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Model for every non-validation error response."""

    detail: str = Field(
        ...,
        description="Human-readable description of the error",
        examples=["Duplicate parameter key 'm'"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["DUPLICATE_PARAM_KEY", "INVALID_PASSWORD_HASH"],
    )


class ValidationErrorDetail(BaseModel):
    """Model for individual field validation error.

    Represents a single validation error with the field location and error message.
    """

    field: str = Field(
        ...,
        description="The field path where the validation error occurred (e.g., 'body.salt_hex')",
        examples=["body.salt_hex", "body.password"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message describing what went wrong",
        examples=[
            "String should match pattern '^(?:[0-9a-fA-F]{2})*$'",
            "Field required",
        ],
    )


class ValidationErrorResponse(BaseModel):
    """Model for the complete 422 validation error response.

    This is the actual format returned by the validation_error_handler
    in phc_codec/presentation/exception_handlers.py.
    """

    detail: str = Field(
        ...,
        description="High-level description of the error",
        examples=["Validation failed"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["VALIDATION_ERROR"],
    )
    errors: list[ValidationErrorDetail] = Field(
        ...,
        description="List of all validation errors found in the request",
        min_length=1,
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "detail": "Validation failed",
                "error_code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "body.password",
                        "message": "Field required",
                    },
                ],
            }
        }
    }
