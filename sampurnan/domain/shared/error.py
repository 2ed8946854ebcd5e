"""Error hierarchy for Sampurnan.

Error layers:
- SampurnanError: Base class for all Sampurnan errors
- DomainError: Business rule violations, malformed input, missing records (4xx responses)
- InfrastructureError: Store, network or configuration failures (503 responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""


class SampurnanError(Exception):
    """Base class for all Sampurnan errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(SampurnanError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Requested record identifier has no matching row."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class FormatError(DomainError):
    """Uploaded file is malformed, empty, or its header does not match the schema."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="FORMAT_ERROR")


class InvalidStateError(DomainError):
    """Operation not allowed in current state."""


class AuthorizationError(DomainError):
    """Request lacks an admin session."""


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(SampurnanError):
    """Base class for infrastructure/system errors."""


class StoreError(InfrastructureError):
    """Record store rejected a read or write. Message is the store's own text."""


class ExternalServiceError(InfrastructureError):
    """External service (generative text, folder listing) failed."""


class ConfigurationError(InfrastructureError):
    """Required configuration (usually an external credential) is missing."""
