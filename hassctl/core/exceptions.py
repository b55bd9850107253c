"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every error carries a human-readable message and a stable code.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


# =============================================================================
# Configuration
# =============================================================================


class ConfigurationError(ApplicationError):
    """Raised when connection settings cannot be resolved."""

    def __init__(self, message: str = "Invalid configuration", code: str = "CFG_INVALID") -> None:
        super().__init__(message, code=code)


class MissingAccessTokenError(ConfigurationError):
    """Raised when no access token is set in the environment or .env file."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CFG_MISSING_TOKEN")


class InvalidAccessTokenError(ConfigurationError):
    """Raised when the access token cannot be used as a bearer credential."""

    def __init__(self, message: str = "Invalid access token!") -> None:
        super().__init__(message, code="CFG_INVALID_TOKEN")


class MissingHostError(ConfigurationError):
    """Raised when the host variable is not set."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="CFG_MISSING_HOST")


class InvalidHostError(ConfigurationError):
    """Raised when the host is not a bare hostname."""

    def __init__(self, message: str = "Invalid host.") -> None:
        super().__init__(message, code="CFG_INVALID_HOST")


class InvalidPortError(ConfigurationError):
    """Raised when the port is not an unsigned 16-bit integer."""

    def __init__(self, message: str = "Invalid port.") -> None:
        super().__init__(message, code="CFG_INVALID_PORT")


# =============================================================================
# Transport
# =============================================================================


class ExternalServiceError(ApplicationError):
    """Raised when an external service call fails."""

    def __init__(self, message: str = "External service error") -> None:
        super().__init__(message, code="SYS_EXTERNAL_SERVICE_ERROR")


class TransportError(ExternalServiceError):
    """Raised when a request to Home Assistant fails or returns an unusable body."""

    def __init__(
        self,
        message: str,
        method: str,
        path: str,
        status_code: int | None = None,
    ) -> None:
        self.method = method
        self.path = path
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        status = f" [HTTP {self.status_code}]" if self.status_code is not None else ""
        return f"{self.method} {self.path}{status}: {self.message}"


# =============================================================================
# Interactive selection
# =============================================================================


class SelectionError(ApplicationError):
    """Raised when the interactive selector cannot produce a choice."""

    def __init__(self, message: str, code: str = "SEL_FAILED") -> None:
        super().__init__(message, code=code)


class SelectionCancelledError(SelectionError):
    """Raised when the user aborts a prompt."""

    def __init__(self, message: str = "Selection cancelled") -> None:
        super().__init__(message, code="SEL_CANCELLED")


class NothingToSelectError(SelectionError):
    """Raised when a prompt has no options to offer."""

    def __init__(self, message: str = "Nothing to select") -> None:
        super().__init__(message, code="SEL_EMPTY")
