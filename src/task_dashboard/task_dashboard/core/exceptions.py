class DomainError(Exception):
    """Base exception for business rule violations."""


class AuthenticationError(DomainError):
    """Raised when a login handle cannot be resolved to an account."""


class UnregisteredUserError(AuthenticationError):
    """Handle is in neither the ops nor the courier login sheet."""


class NoActiveTaskError(AuthenticationError):
    """Handle is a registered courier but owns no task in the task sheet."""


class SheetFetchError(DomainError):
    """Raised when a sheet cannot be downloaded from the spreadsheet cloud."""
