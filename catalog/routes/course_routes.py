from fastapi import APIRouter, Depends, Form, Query, status
from fastapi.responses import RedirectResponse

from catalog import views
from catalog.auth.guards import require_authenticated, require_instructor
from catalog.schemas.course import CourseResponse
from catalog.services.course_service import CourseService
from catalog.routes.dependencies import get_course_service
from catalog.stores.sessions import Principal

router = APIRouter(tags=['courses'])


def _serialize(courses) -> list[CourseResponse]:
    return [CourseResponse.model_validate(course) for course in courses]


@router.get('')
def list_courses(
    _principal: Principal = Depends(require_authenticated),
    service: CourseService = Depends(get_course_service),
):
    return views.render('courses/index', title='All Courses', courses=_serialize(service.list_all()))


@router.get('/create')
def create_course_form(_principal: Principal = Depends(require_instructor)):
    return views.render('courses/create', title='Create Course')


@router.post('/create')
def create_course(
    title: str = Form(default=''),
    description: str = Form(default=''),
    principal: Principal = Depends(require_instructor),
    service: CourseService = Depends(get_course_service),
):
    # The owner is always the caller, never a submitted field.
    service.create(title, description, principal.user_id)
    return RedirectResponse(url='/courses', status_code=status.HTTP_302_FOUND)


@router.get('/my-courses')
def my_courses(
    principal: Principal = Depends(require_instructor),
    service: CourseService = Depends(get_course_service),
):
    courses = service.list_by_instructor(principal.user_id)
    return views.render('courses/my-courses', title='My Courses', courses=_serialize(courses))


@router.get('/search')
def search_courses(
    q: str | None = Query(default=None),
    _principal: Principal = Depends(require_authenticated),
    service: CourseService = Depends(get_course_service),
):
    courses = service.search(q)
    return views.render('courses/index', title='Search Results', query=q or '', courses=_serialize(courses))


@router.get('/{course_id}/details')
def course_details(
    course_id: int,
    principal: Principal = Depends(require_instructor),
    service: CourseService = Depends(get_course_service),
):
    course = service.get_owned(course_id, principal)
    return views.render('courses/details', title=course.title, course=CourseResponse.model_validate(course))


@router.get('/{course_id}/edit')
def edit_course_form(
    course_id: int,
    principal: Principal = Depends(require_instructor),
    service: CourseService = Depends(get_course_service),
):
    course = service.get_owned(course_id, principal)
    return views.render('courses/edit', title='Edit Course', course=CourseResponse.model_validate(course))


@router.post('/{course_id}/update')
def update_course(
    course_id: int,
    title: str = Form(default=''),
    description: str = Form(default=''),
    principal: Principal = Depends(require_instructor),
    service: CourseService = Depends(get_course_service),
):
    service.update(course_id, title, description, principal)
    return RedirectResponse(url='/courses/my-courses', status_code=status.HTTP_302_FOUND)


@router.post('/{course_id}/delete')
def delete_course(
    course_id: int,
    principal: Principal = Depends(require_instructor),
    service: CourseService = Depends(get_course_service),
):
    service.delete(course_id, principal)
    return RedirectResponse(url='/courses/my-courses', status_code=status.HTTP_302_FOUND)
