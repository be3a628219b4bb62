class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or a required field is missing."""


class InvalidRequest(DomainError):
    """Raised when a required selection is missing (no store call is made)."""


class NotFound(DomainError):
    """Raised when a referenced record id does not exist."""


class StudentNotFound(NotFound):
    """Raised when billing is requested for an unknown student."""


class StoreUnavailable(DomainError):
    """Raised when the record store cannot be reached."""
