import pytest

from catalog.models.course import Course
from catalog.models.user import Role
from catalog.stores.courses import CourseStore
from catalog.stores.credentials import CredentialStore


@pytest.fixture
def instructors(db):
    credentials = CredentialStore(db)
    ada = credentials.create('Ada', 'ada@x.com', 'secret1', Role.INSTRUCTOR)
    herodotus = credentials.create('Herodotus', 'hero@x.com', 'secret1', Role.INSTRUCTOR)
    return ada, herodotus


def test_find_all_joins_instructor_name_in_insertion_order(db, instructors) -> None:
    ada, herodotus = instructors
    store = CourseStore(db)
    store.create('Algorithms', 'desc', ada.id)
    store.create('Ancient History', 'desc', herodotus.id)

    courses = store.find_all()

    assert [course.title for course in courses] == ['Algorithms', 'Ancient History']
    assert [course.instructor_name for course in courses] == ['Ada', 'Herodotus']


def test_find_by_instructor_returns_only_owned_courses(db, instructors) -> None:
    ada, herodotus = instructors
    store = CourseStore(db)
    store.create('Algorithms', 'desc', ada.id)
    store.create('Ancient History', 'desc', herodotus.id)

    assert [course.title for course in store.find_by_instructor(ada.id)] == ['Algorithms']


def test_orphaned_course_is_excluded_from_listings(db, instructors) -> None:
    ada, _ = instructors
    store = CourseStore(db)
    store.create('Algorithms', 'desc', ada.id)
    orphan = Course(title='Lost', description='desc', instructor_id=999)
    db.add(orphan)
    db.commit()

    assert [course.title for course in store.find_all()] == ['Algorithms']
    assert store.find_by_id(orphan.id) is None


def test_search_matches_title_or_instructor_name_case_insensitively(db, instructors) -> None:
    ada, herodotus = instructors
    store = CourseStore(db)
    store.create('History 101', 'desc', ada.id)
    store.create('Algorithms', 'desc', ada.id)
    store.create('Geography', 'desc', herodotus.id)

    assert [course.title for course in store.search('histo')] == ['History 101']
    assert [course.title for course in store.search('HERO')] == ['Geography']


def test_search_treats_like_wildcards_literally(db, instructors) -> None:
    ada, _ = instructors
    store = CourseStore(db)
    store.create('100% Python', 'desc', ada.id)
    store.create('Algorithms', 'desc', ada.id)

    assert [course.title for course in store.search('%')] == ['100% Python']


def test_delete_removes_only_that_row(db, instructors) -> None:
    ada, _ = instructors
    store = CourseStore(db)
    keep = store.create('Keep', 'desc', ada.id)
    drop = store.create('Drop', 'desc', ada.id)

    store.delete(drop)

    assert [course.id for course in store.find_all()] == [keep.id]
