"""Application layer exceptions."""

from phc_codec.application.exceptions.exceptions import (
    ApplicationError,
    UnsupportedAlgorithmError,
)

__all__ = ["ApplicationError", "UnsupportedAlgorithmError"]
