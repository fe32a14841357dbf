"""Domain errors surfaced to API callers."""
from typing import Optional

from fastapi import status


class FitTrackerError(Exception):
    """Base error carrying the HTTP status it maps to."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthMissing(FitTrackerError):
    """No bearer token was presented."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access token required"


class AuthInvalid(FitTrackerError):
    """The bearer token failed signature, format or expiry checks."""

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid token"


class AuthRejected(FitTrackerError):
    """Login credentials did not match a stored user."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class Conflict(FitTrackerError):
    """Registration with an email that is already taken."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User already exists"


class NotFound(FitTrackerError):
    """Record is absent or owned by another user."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"
