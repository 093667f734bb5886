"""Exceptions for Pushover SDK."""


class PushoverError(Exception):
    """Base exception for all Pushover SDK errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """
        Initialize PushoverError.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
        """
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ServiceUnavailableError(PushoverError):
    """Raised when the Pushover API cannot be reached (connection, DNS, TLS, timeout)."""

    def __init__(self, message: str = "Pushover service unavailable") -> None:
        """Initialize ServiceUnavailableError."""
        super().__init__(message)


class APIError(PushoverError):
    """Raised when a Pushover response carries a non-empty errors list."""

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        status_code: int | None = None,
    ) -> None:
        """Initialize APIError."""
        self.errors = list(errors) if errors else [message]
        super().__init__(message, status_code=status_code)


class ResponseParseError(PushoverError):
    """Raised when a Pushover response body is not valid JSON."""


class ValidationError(PushoverError):
    """Raised when a message fails validation."""

    def __init__(self, message: str = "Validation failed") -> None:
        """Initialize ValidationError."""
        super().__init__(message)
