from sqlalchemy.orm import Session, contains_eager

from catalog.models.course import Course
from catalog.models.user import User


class CourseStore:
    """Persists courses. Listings inner-join the owner, so orphaned rows are skipped."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _joined(self):
        return (
            self.db.query(Course)
            .join(Course.instructor)
            .options(contains_eager(Course.instructor))
        )

    def create(self, title: str, description: str, instructor_id: int) -> Course:
        course = Course(title=title, description=description, instructor_id=instructor_id)
        self.db.add(course)
        self.db.commit()
        self.db.refresh(course)
        return course

    def find_all(self) -> list[Course]:
        return self._joined().order_by(Course.id.asc()).all()

    def find_by_id(self, course_id: int) -> Course | None:
        return self._joined().filter(Course.id == course_id).first()

    def find_by_instructor(self, instructor_id: int) -> list[Course]:
        return (
            self._joined()
            .filter(Course.instructor_id == instructor_id)
            .order_by(Course.id.asc())
            .all()
        )

    def update(self, course: Course, title: str, description: str) -> Course:
        course.title = title
        course.description = description
        self.db.commit()
        self.db.refresh(course)
        return course

    def delete(self, course: Course) -> None:
        self.db.delete(course)
        self.db.commit()

    def search(self, term: str) -> list[Course]:
        return (
            self._joined()
            .filter(
                Course.title.icontains(term, autoescape=True)
                | User.name.icontains(term, autoescape=True)
            )
            .order_by(Course.id.asc())
            .all()
        )
