"""Credential Store: user identity, hashed credentials and role.

Only this module reads or writes `users.password_hash`; the hash never leaves
it except through `verify_password`.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from catalog.auth import passwords
from catalog.core.errors import ConflictError, ValidationError
from catalog.models.user import SELF_REGISTRABLE_ROLES, Role, User

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _is_email_conflict(exc: IntegrityError) -> bool:
    # SQLite names the column ("users.email"); Postgres names the index ("ix_users_email").
    return 'email' in str(exc.orig).lower()


class CredentialStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, name: str, email: str, plaintext_password: str, role: Role | str) -> User:
        try:
            role = Role(role)
        except ValueError as exc:
            raise ValidationError('A valid role must be selected.') from exc
        if role not in SELF_REGISTRABLE_ROLES:
            raise ValidationError('A valid role must be selected.')

        user = User(
            name=name,
            email=normalize_email(email),
            password_hash=passwords.hash_password(plaintext_password),
            role=role,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if not _is_email_conflict(exc):
                raise
            # The unique constraint is the real guard against concurrent sign-ups.
            logger.warning('Rejected duplicate registration')
            raise ConflictError() from exc
        self.db.refresh(user)
        return user

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.get(User, user_id)

    @staticmethod
    def verify_password(plaintext: str, stored_hash: str) -> bool:
        return passwords.verify_password(plaintext, stored_hash)
