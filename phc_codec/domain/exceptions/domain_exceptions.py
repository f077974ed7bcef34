"""Domain layer exceptions for malformed or invalid password hashes.

Every codec error carries a machine-readable ``error_code``. Callers that
talk to untrusted clients should not echo the specific code back: telling an
attacker *why* a hash string was rejected helps them enumerate the parser.
"""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions are raised when an input string violates the PHC
    grammar or when a value would break a PasswordHash invariant.
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """Raised when a PasswordHash would be constructed in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class InvalidEncodingException(DomainException):
    """Raised when a caller names a Base64 alphabet that does not exist."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENCODING")


class UnsupportedAlgorithmException(DomainException):
    """Raised when a hasher is asked for an algorithm or version it cannot produce."""

    def __init__(self, message: str):
        super().__init__(message, error_code="UNSUPPORTED_ALGORITHM")


class PasswordHashFormatException(DomainException):
    """Base class for every wire-format error raised by the codec."""

    error_code = "INVALID_PASSWORD_HASH"

    def __init__(self, message: str):
        super().__init__(message, error_code=type(self).error_code)


class InvalidIdentException(PasswordHashFormatException):
    """Identifier empty, too long, or containing disallowed characters."""

    error_code = "INVALID_IDENT"


class InvalidVersionException(PasswordHashFormatException):
    """Version segment is not a canonical decimal within range."""

    error_code = "INVALID_VERSION"


class InvalidParamException(PasswordHashFormatException):
    """Parameter lacks '=' or its key/value violates charset or length."""

    error_code = "INVALID_PARAM"


class DuplicateParamKeyException(PasswordHashFormatException):
    error_code = "DUPLICATE_PARAM_KEY"


class TooManyParamsException(PasswordHashFormatException):
    error_code = "TOO_MANY_PARAMS"


class InvalidBase64CharException(PasswordHashFormatException):
    """Symbol outside the active Base64 alphabet."""

    error_code = "INVALID_BASE64_CHAR"


class InvalidBase64LengthException(PasswordHashFormatException):
    """Text length is not a valid unpadded Base64 length."""

    error_code = "INVALID_BASE64_LENGTH"


class NonCanonicalBase64Exception(PasswordHashFormatException):
    """Unused trailing bits of the final Base64 group are set."""

    error_code = "NON_CANONICAL_BASE64"


class SaltTooLongException(PasswordHashFormatException):
    error_code = "SALT_TOO_LONG"


class HashTooLongException(PasswordHashFormatException):
    error_code = "HASH_TOO_LONG"


class StringTooLongException(PasswordHashFormatException):
    error_code = "STRING_TOO_LONG"


class MissingSeparatorException(PasswordHashFormatException):
    error_code = "MISSING_SEPARATOR"


class TrailingDataException(PasswordHashFormatException):
    error_code = "TRAILING_DATA"
