"""Domain exceptions - PHC string format violations."""

from phc_codec.domain.exceptions.domain_exceptions import (
    DomainException,
    DuplicateParamKeyException,
    HashTooLongException,
    InvalidBase64CharException,
    InvalidBase64LengthException,
    InvalidEncodingException,
    InvalidEntityStateException,
    InvalidIdentException,
    InvalidParamException,
    InvalidVersionException,
    MissingSeparatorException,
    NonCanonicalBase64Exception,
    PasswordHashFormatException,
    SaltTooLongException,
    StringTooLongException,
    TooManyParamsException,
    TrailingDataException,
    UnsupportedAlgorithmException,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "InvalidEncodingException",
    "UnsupportedAlgorithmException",
    "PasswordHashFormatException",
    "InvalidIdentException",
    "InvalidVersionException",
    "InvalidParamException",
    "DuplicateParamKeyException",
    "TooManyParamsException",
    "InvalidBase64CharException",
    "InvalidBase64LengthException",
    "NonCanonicalBase64Exception",
    "SaltTooLongException",
    "HashTooLongException",
    "StringTooLongException",
    "MissingSeparatorException",
    "TrailingDataException",
]
