"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every error is reported to the user and ends the command with exit status 1.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when the connection config is missing or unreadable."""

    def __init__(self, message: str = "Not configured", code: str = "CONFIG_MISSING") -> None:
        super().__init__(message, code=code)


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class ValidationError(ApplicationError):
    """Raised when validation fails."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class ExternalServiceError(ApplicationError):
    """Raised when a call to the router fails."""

    def __init__(
        self,
        message: str = "External service error",
        code: str = "SYS_EXTERNAL_SERVICE_ERROR",
    ) -> None:
        super().__init__(message, code=code)


class RouterTransportError(ExternalServiceError):
    """Raised when the request never got an HTTP response."""

    def __init__(self, message: str = "Could not reach router") -> None:
        super().__init__(message, code="SYS_TRANSPORT_ERROR")


class RouterAPIError(ExternalServiceError):
    """Raised when the router answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int, body: str = "") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message, code="SYS_HTTP_ERROR")


class ResponseDecodeError(ExternalServiceError):
    """Raised when a response body is not valid JSON."""

    def __init__(self, message: str = "Failed to parse response") -> None:
        super().__init__(message, code="SYS_DECODE_ERROR")
