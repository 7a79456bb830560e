from typing import Optional


class DomainError(Exception):
    """Base exception for errors shown to the admin as a banner."""


class ValidationError(DomainError):
    """Raised when form input is invalid or an action is not allowed right now."""


class AuthenticationError(DomainError):
    """Raised when there is no usable login session."""


class NotAuthenticatedError(AuthenticationError):
    """Raised before any network call when no bearer token is stored."""


class AuthorizationError(DomainError):
    """Raised when the logged-in account is not an administrator."""


class ApiError(DomainError):
    """Raised when the backend rejects a call or cannot be reached/parsed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
