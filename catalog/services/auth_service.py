"""Registration, login and logout workflows."""

import logging

from pydantic import ValidationError as PydanticValidationError

from catalog.auth import passwords
from catalog.core.errors import AuthError, ConflictError, ValidationError
from catalog.models.user import Role, User
from catalog.schemas.auth import MISSING_FIELDS_MESSAGE, RegistrationRequest
from catalog.stores.credentials import CredentialStore
from catalog.stores.sessions import Principal, SessionStore

logger = logging.getLogger(__name__)

_FIELD_MESSAGES = {
    'email': 'Please include a valid email.',
    'role': 'A valid role must be selected.',
}


def _first_error_message(exc: PydanticValidationError) -> str:
    error = exc.errors()[0]
    if error.get('type') == 'value_error' and 'error' in error.get('ctx', {}):
        return str(error['ctx']['error'])
    if error.get('type') == 'missing':
        return MISSING_FIELDS_MESSAGE
    field = error['loc'][0] if error.get('loc') else None
    return _FIELD_MESSAGES.get(field, MISSING_FIELDS_MESSAGE)


class AuthenticationService:
    def __init__(self, credentials: CredentialStore, sessions: SessionStore) -> None:
        self.credentials = credentials
        self.sessions = sessions

    def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        role: Role | str | None,
    ) -> User:
        try:
            request = RegistrationRequest(name=name, email=email, password=password, role=role)
        except PydanticValidationError as exc:
            raise ValidationError(_first_error_message(exc)) from exc

        if self.credentials.find_by_email(request.email) is not None:
            raise ConflictError()

        # The store still maps a unique-constraint violation to ConflictError
        # when a concurrent registration wins the race.
        user = self.credentials.create(request.name, request.email, request.password, request.role)
        logger.info('Registered user %s as %s', user.id, user.role.value)
        return user

    def login(self, email: str | None, password: str | None, current_token: str | None = None) -> Principal:
        if not email or not password:
            raise AuthError()

        user = self.credentials.find_by_email(email)
        if user is None:
            # Same cost as a real verification, so unknown emails are not revealed by timing.
            passwords.burn_verification(password)
            logger.warning('Rejected login attempt')
            raise AuthError()

        if not self.credentials.verify_password(password, user.password_hash):
            logger.warning('Rejected login attempt for user %s', user.id)
            raise AuthError()

        # Never carry a pre-login session id over to the authenticated identity.
        if current_token:
            self.sessions.destroy(current_token)

        principal = self.sessions.establish(user.id, user.role)
        logger.info('User %s logged in', user.id)
        return principal

    def logout(self, token: str | None) -> None:
        self.sessions.destroy(token)
