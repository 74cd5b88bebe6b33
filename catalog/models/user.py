"""User model definitions."""

import enum

from sqlalchemy import Column, Enum, Integer, String
from sqlalchemy.orm import relationship

from catalog.database import Base


class Role(str, enum.Enum):
    STUDENT = 'student'
    INSTRUCTOR = 'instructor'
    ADMIN = 'admin'


SELF_REGISTRABLE_ROLES = frozenset({Role.STUDENT, Role.INSTRUCTOR})


class User(Base):
    """Represents an application user."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    role = Column(
        Enum(
            Role,
            name='user_role',
            native_enum=False,
            create_constraint=True,
            validate_strings=True,
            values_callable=lambda roles: [role.value for role in roles],
        ),
        nullable=False,
    )

    courses = relationship('Course', back_populates='instructor')

    def __repr__(self) -> str:
        return f'<User id={self.id} role={self.role.value if self.role else None}>'
