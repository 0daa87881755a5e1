"""Domain errors raised by the service layer.

Each error carries a user-facing message and the HTTP status the API layer
renders it with. Messages are deliberately uniform where distinguishing the
cause would leak information (unknown email vs wrong password, expired vs
unknown session, missing vs foreign-owned row).
"""

from fastapi import status


class AtelierError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AtelierError):
    """Malformed input (email shape, password length, blank name)."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AtelierError):
    """A unique value is already taken."""

    status_code = status.HTTP_409_CONFLICT


class AuthenticationError(AtelierError):
    """Credentials did not verify."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotAuthenticatedError(AtelierError):
    """No valid session backs the request."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "Not authenticated") -> None:
        super().__init__(message)


class NotFoundError(AtelierError):
    """The row does not exist or belongs to someone else."""

    status_code = status.HTTP_404_NOT_FOUND
