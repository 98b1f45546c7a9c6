"""
Exception hierarchy for the Velora backend.

AppError subclasses carry the HTTP status and the user-facing message the API
returns. Token and store errors are raised by the lower layers and translated
into AppError instances by the use cases.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Optional


# -----------------------------------------------------------------------------
# API-facing errors
# -----------------------------------------------------------------------------


class AppError(Exception):
    """Base exception for errors that are returned to the client."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.details = details


class ValidationError(AppError):
    """Raised when a request payload fails a validation rule."""

    status_code = 400


class AuthError(AppError):
    """Raised for missing, invalid or expired tokens and bad credentials."""

    status_code = 401


class InternalError(AppError):
    """Raised for unexpected failures; details are only exposed outside production."""

    status_code = 500


# -----------------------------------------------------------------------------
# Token service
# -----------------------------------------------------------------------------


class TokenError(Exception):
    """Base exception for token verification failures."""
    pass


class TokenExpiredError(TokenError):
    """Raised when a token signature is valid but its expiry has passed."""
    pass


class MalformedTokenError(TokenError):
    """Raised when a token cannot be decoded or its signature does not match."""
    pass


# -----------------------------------------------------------------------------
# Stores
# -----------------------------------------------------------------------------


class DuplicateEmailError(Exception):
    """Raised when a user with the same normalized email already exists."""

    def __init__(self, email: str):
        super().__init__(f"User with email {email} already exists")
        self.email = email
