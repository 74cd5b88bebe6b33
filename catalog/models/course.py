"""Course model definitions."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from catalog.database import Base


class Course(Base):
    """Represents a course owned by a single instructor."""
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    instructor_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    instructor = relationship('User', back_populates='courses')

    @property
    def instructor_name(self) -> str | None:
        return self.instructor.name if self.instructor is not None else None
