"""Password hash API endpoints.

Endpoints are plain ``def`` functions: Argon2 is CPU-bound, so FastAPI runs
them in its threadpool instead of on the event loop.
"""

from fastapi import APIRouter, Depends, status

from phc_codec.application.dtos.password_hash_dto import (
    BuildPasswordHashDTO,
    HashPasswordDTO,
    ParsePasswordHashDTO,
    PasswordHashDTO,
    SerializedHashDTO,
    VerificationResultDTO,
    VerifyPasswordDTO,
)
from phc_codec.application.services.password_hash_service import PasswordHashService
from phc_codec.presentation.dependencies import get_password_hash_service
from phc_codec.presentation.error_schemas import ErrorResponse

router = APIRouter(prefix="/hashes", tags=["hashes"])


@router.post(
    "/parse",
    response_model=PasswordHashDTO,
    responses={400: {"model": ErrorResponse}},
    summary="Parse a hash string",
    description="Split a PHC-format hash string into identifier, version, parameters, salt and hash.",
)
def parse_hash(
    dto: ParsePasswordHashDTO,
    service: PasswordHashService = Depends(get_password_hash_service),
) -> PasswordHashDTO:
    """
    Parse a hash string.

    Malformed strings raise domain exceptions, which the global exception
    handlers turn into 400 responses.
    """
    return service.inspect(dto)


@router.post(
    "/serialize",
    response_model=SerializedHashDTO,
    responses={400: {"model": ErrorResponse}},
    summary="Build a hash string",
    description="Build the canonical PHC-format string for a set of fields.",
)
def serialize_hash(
    dto: BuildPasswordHashDTO,
    service: PasswordHashService = Depends(get_password_hash_service),
) -> SerializedHashDTO:
    """Build a canonical hash string."""
    return service.build(dto)


@router.post(
    "/",
    response_model=PasswordHashDTO,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="Hash a password",
    description=(
        "Hash a password with a fresh random salt using the configured hasher. "
        "Optional version and params override the configured costs."
    ),
)
def hash_password(
    dto: HashPasswordDTO,
    service: PasswordHashService = Depends(get_password_hash_service),
) -> PasswordHashDTO:
    """Hash a password."""
    return service.hash_password(dto)


@router.post(
    "/verify",
    response_model=VerificationResultDTO,
    summary="Verify a password",
    description="Check a password against a stored hash string.",
)
def verify_password(
    dto: VerifyPasswordDTO,
    service: PasswordHashService = Depends(get_password_hash_service),
) -> VerificationResultDTO:
    """Verify a password. Malformed hashes verify as false."""
    return service.verify_password(dto)
