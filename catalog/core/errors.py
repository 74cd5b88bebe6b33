"""Domain error taxonomy shared by stores, services, guards and routes."""

from fastapi import status


class CatalogError(Exception):
    """Base class for failures that map onto a user-facing HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = 'Something went wrong. Please try again later.'

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Please fill all fields.'


class ConflictError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'User with this email already exists.'


class AuthError(CatalogError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = 'Invalid credentials.'

    def __init__(self) -> None:
        # The message never varies so callers cannot tell which check failed.
        super().__init__(self.default_message)


class Forbidden(CatalogError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = 'Access denied.'


class NotFound(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Not found.'


class StorageError(CatalogError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self) -> None:
        super().__init__(self.default_message)


class LoginRequired(CatalogError):
    """Raised by the authentication guard; answered with a redirect, not an error page."""

    status_code = status.HTTP_302_FOUND
    default_message = 'Login required.'
