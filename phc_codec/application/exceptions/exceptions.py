"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class UnsupportedAlgorithmError(ApplicationError):
    """Raised when no configured hasher handles the requested algorithm."""

    def __init__(self, message: str = "Unsupported password hashing algorithm"):
        super().__init__(message, error_code="UNSUPPORTED_ALGORITHM")
