"""Error hierarchy for erplookup.

Error layers:
- ERPLookupError: Base class for all erplookup errors
- DomainError: Lookups that fail for a reason the user can fix (bad name, no access)
- InfrastructureError: ERPNext unreachable, misbehaving, or not configured

The CLI catches ERPLookupError at the command boundary and prints the message.
"""


class ERPLookupError(Exception):
    """Base class for all erplookup errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(ERPLookupError):
    """Base class for domain errors."""


class NotFoundError(DomainError):
    """Document or DocType not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str) -> None:
        super().__init__(message, code="VALIDATION_ERROR")


class AuthorizationError(DomainError):
    """API credentials rejected or missing permission."""


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(ERPLookupError):
    """Base class for infrastructure/system errors."""


class ExternalServiceError(InfrastructureError):
    """ERPNext is unavailable or returned an unexpected response."""


class ConfigurationError(InfrastructureError):
    """Missing or invalid configuration."""
