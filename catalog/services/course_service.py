import logging

from pydantic import ValidationError as PydanticValidationError

from catalog.auth.guards import require_ownership
from catalog.core.errors import NotFound, ValidationError
from catalog.models.course import Course
from catalog.schemas.course import CourseInput
from catalog.stores.courses import CourseStore
from catalog.stores.sessions import Principal

logger = logging.getLogger(__name__)

COURSE_FIELDS_MESSAGE = 'Please provide a title and description.'


def _course_input(title: str | None, description: str | None) -> CourseInput:
    try:
        return CourseInput(title=title, description=description)
    except PydanticValidationError as exc:
        raise ValidationError(COURSE_FIELDS_MESSAGE) from exc


class CourseService:
    """Course use cases. Mutations fetch the row first and check ownership on it."""

    def __init__(self, store: CourseStore) -> None:
        self.store = store

    def list_all(self) -> list[Course]:
        return self.store.find_all()

    def list_by_instructor(self, instructor_id: int) -> list[Course]:
        return self.store.find_by_instructor(instructor_id)

    def get_by_id(self, course_id: int) -> Course:
        course = self.store.find_by_id(course_id)
        if course is None:
            raise NotFound('Course not found.')
        return course

    def get_owned(self, course_id: int, principal: Principal) -> Course:
        course = self.get_by_id(course_id)
        require_ownership(course, principal)
        return course

    def create(self, title: str | None, description: str | None, instructor_id: int) -> Course:
        data = _course_input(title, description)
        course = self.store.create(data.title, data.description, instructor_id)
        logger.info('Instructor %s created course %s', instructor_id, course.id)
        return course

    def update(
        self,
        course_id: int,
        title: str | None,
        description: str | None,
        principal: Principal,
    ) -> Course:
        course = self.get_owned(course_id, principal)
        data = _course_input(title, description)
        course = self.store.update(course, data.title, data.description)
        logger.info('Instructor %s updated course %s', principal.user_id, course_id)
        return course

    def delete(self, course_id: int, principal: Principal) -> None:
        course = self.get_owned(course_id, principal)
        self.store.delete(course)
        logger.info('Instructor %s deleted course %s', principal.user_id, course_id)

    def search(self, term: str | None) -> list[Course]:
        if term is None or not term.strip():
            return self.store.find_all()
        return self.store.search(term.strip())
