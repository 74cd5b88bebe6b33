"""Server-side session rows referenced by the signed session cookie."""

from sqlalchemy import Column, DateTime, Enum, ForeignKey, Integer, String

from catalog.database import Base
from catalog.models.user import Role


class SessionRecord(Base):
    __tablename__ = "user_sessions"

    token = Column(String(64), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    # Copy of the user's role at login time; not re-read on each request.
    role = Column(
        Enum(
            Role,
            name='session_role',
            native_enum=False,
            create_constraint=True,
            validate_strings=True,
            values_callable=lambda roles: [role.value for role in roles],
        ),
        nullable=False,
    )
    created_at = Column(DateTime, nullable=False)
    expires_at = Column(DateTime, nullable=False, index=True)
