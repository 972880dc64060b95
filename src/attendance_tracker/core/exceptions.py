class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DeleteBlockedError(ValidationError):
    """Raised when a row cannot be deleted because other rows still reference it."""


class NotFoundError(DomainError):
    """Raised when an employee, department or attendance row does not exist."""

    status_code = 404


class ConflictError(DomainError):
    """Raised on duplicate clock events or duplicate business identifiers."""

    status_code = 409


class DependencyError(DomainError):
    """Raised when the database is unavailable."""

    status_code = 500


class ConfigurationError(Exception):
    """Raised at startup when settings are missing or invalid."""
