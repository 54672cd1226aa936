"""Application errors and the HTTP status each one maps to."""

from fastapi import status


class SuperSyncError(Exception):
    """Base class for errors rendered as ``{"error": message}``."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SuperSyncError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateError(SuperSyncError):
    """A unique field collides with an existing record."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidCredentialsError(SuperSyncError):
    """Login failed. Unknown email and wrong password look the same."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class AuthenticationError(SuperSyncError):
    """No usable identity on the request."""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidTokenError(AuthenticationError):
    """Bearer token is malformed, badly signed or expired."""

    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class NotFoundError(SuperSyncError):
    """Record is absent or belongs to someone else."""

    status_code = status.HTTP_404_NOT_FOUND
