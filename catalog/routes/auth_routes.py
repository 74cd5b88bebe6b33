import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

from catalog import views
from catalog.auth import tokens
from catalog.auth.guards import get_session_token
from catalog.core import config
from catalog.database import check_connection
from catalog.services.auth_service import AuthenticationService
from catalog.routes.dependencies import get_auth_service

router = APIRouter(tags=['auth'])

logger = logging.getLogger(__name__)


def _set_session_cookie(response: RedirectResponse, session_token: str, max_age: int) -> None:
    response.set_cookie(
        key=config.SESSION_COOKIE_NAME,
        value=tokens.sign_session_token(session_token),
        max_age=max_age,
        httponly=True,
        secure=config.is_production(),
        samesite='lax',
        path='/',
    )


@router.get('/register')
def register_form():
    return views.render('register', title='Register')


@router.post('/register')
def register(
    name: str = Form(default=''),
    email: str = Form(default=''),
    password: str = Form(default=''),
    role: str = Form(default=''),
    service: AuthenticationService = Depends(get_auth_service),
):
    service.register(name, email, password, role)
    return RedirectResponse(url='/auth/login', status_code=status.HTTP_302_FOUND)


@router.get('/login')
def login_form():
    return views.render('login', title='Login')


@router.post('/login')
def login(
    email: str = Form(default=''),
    password: str = Form(default=''),
    current_token: str | None = Depends(get_session_token),
    service: AuthenticationService = Depends(get_auth_service),
):
    principal = service.login(email, password, current_token=current_token)
    response = RedirectResponse(url='/dashboard', status_code=status.HTTP_302_FOUND)
    _set_session_cookie(response, principal.token, int(service.sessions.ttl.total_seconds()))
    return response


@router.get('/logout')
def logout(
    current_token: str | None = Depends(get_session_token),
    service: AuthenticationService = Depends(get_auth_service),
):
    try:
        service.logout(current_token)
    except SQLAlchemyError:
        logger.exception('Session could not be destroyed during logout.')
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={'detail': 'Could not log out.'},
        )

    response = RedirectResponse(url='/', status_code=status.HTTP_302_FOUND)
    response.delete_cookie(config.SESSION_COOKIE_NAME, path='/')
    return response


@router.get('/health')
def health(request: Request):
    try:
        check_connection(request.app.state.engine)
    except SQLAlchemyError:
        logger.exception('Health check failed: database unreachable.')
        return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content={'status': 'error'})
    return {'status': 'ok'}
