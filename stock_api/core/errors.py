"""Error taxonomy shared by services and the HTTP layer."""

from fastapi import status


class AppError(Exception):
    """Base application error. Carries a client-safe message and an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidReferenceError(ValidationError):
    """A foreign reference (e.g. a product's category) does not resolve."""


class AuthenticationError(AppError):
    """Missing or invalid credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED


class AuthorizationError(AppError):
    """Valid identity but insufficient role, or an unusable token."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(AppError):
    """No record matches the requested id."""

    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    """Unique constraint violation."""

    status_code = status.HTTP_409_CONFLICT
