from fastapi import Depends, Request
from sqlalchemy.orm import Session

from catalog.auth.guards import get_session_store
from catalog.services.auth_service import AuthenticationService
from catalog.services.course_service import CourseService
from catalog.stores.courses import CourseStore
from catalog.stores.credentials import CredentialStore
from catalog.stores.sessions import SessionStore


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_auth_service(
    db: Session = Depends(get_db),
    sessions: SessionStore = Depends(get_session_store),
) -> AuthenticationService:
    return AuthenticationService(CredentialStore(db), sessions)


def get_course_service(db: Session = Depends(get_db)) -> CourseService:
    return CourseService(CourseStore(db))
