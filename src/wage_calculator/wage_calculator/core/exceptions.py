class DomainError(Exception):
    """Base exception for business rule violations."""


class ConfigurationError(DomainError):
    """Raised when rate schedules, overtime levels or the time zone are invalid."""


class InvalidStateError(DomainError):
    """Raised when a calculator is used after it has been closed."""


class ValidationError(DomainError):
    """Raised when timesheet input is invalid or cannot be read."""
