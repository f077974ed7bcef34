"""Data Transfer Objects for application layer."""

from phc_codec.application.dtos.password_hash_dto import (
    BuildPasswordHashDTO,
    HashPasswordDTO,
    ParamDTO,
    ParsePasswordHashDTO,
    PasswordHashDTO,
    SerializedHashDTO,
    VerificationResultDTO,
    VerifyPasswordDTO,
)

__all__ = [
    "BuildPasswordHashDTO",
    "HashPasswordDTO",
    "ParamDTO",
    "ParsePasswordHashDTO",
    "PasswordHashDTO",
    "SerializedHashDTO",
    "VerificationResultDTO",
    "VerifyPasswordDTO",
]
