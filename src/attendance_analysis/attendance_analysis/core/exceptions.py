class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class IngestionError(DomainError):
    """Raised when an uploaded punch file cannot be turned into records."""
