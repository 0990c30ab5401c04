class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidArgumentError(ValidationError):
    """Raised when a caller passes an argument outside the allowed range."""


class NotFoundError(DomainError):
    """Raised by strict lookups when a record id does not exist."""


class CorruptDataError(DomainError):
    """Raised by a strict load when a persisted blob cannot be decoded."""
