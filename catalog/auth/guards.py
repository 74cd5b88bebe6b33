"""Route guards as FastAPI dependencies.

Order matters: `require_role` depends on `require_authenticated`, so an absent
session is redirected to login before any role or ownership comparison runs.
"""

from fastapi import Depends, Request

from catalog.auth import tokens
from catalog.core import config
from catalog.core.errors import Forbidden, LoginRequired
from catalog.models.course import Course
from catalog.models.user import Role
from catalog.stores.sessions import Principal, SessionStore


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_session_token(request: Request) -> str | None:
    return tokens.read_session_token(request.cookies.get(config.SESSION_COOKIE_NAME))


def get_principal(
    token: str | None = Depends(get_session_token),
    sessions: SessionStore = Depends(get_session_store),
) -> Principal | None:
    return sessions.lookup(token)


def require_authenticated(principal: Principal | None = Depends(get_principal)) -> Principal:
    if principal is None:
        raise LoginRequired()
    return principal


def require_role(role: Role):
    def check_role(principal: Principal = Depends(require_authenticated)) -> Principal:
        if principal.role != role:
            raise Forbidden(f'Access Denied: {role.value.capitalize()}s only.')
        return principal

    return check_role


require_instructor = require_role(Role.INSTRUCTOR)
require_student = require_role(Role.STUDENT)


def require_ownership(course: Course, principal: Principal) -> None:
    if course.instructor_id != principal.user_id:
        raise Forbidden('Access Denied: only the owning instructor may manage this course.')
