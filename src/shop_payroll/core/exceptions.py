class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingReferenceError(DomainError):
    """Raised when a record points at a staff member or entry that does not exist."""
