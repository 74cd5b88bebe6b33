import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog import views
from catalog.auth.guards import require_authenticated
from catalog.core import config
from catalog.core.errors import CatalogError, LoginRequired, StorageError
from catalog.database import build_session_factory, create_db_engine, create_schema
from catalog.routes import auth_routes, course_routes
from catalog.routes.dependencies import get_db
from catalog.stores.credentials import CredentialStore
from catalog.stores.sessions import Principal, SessionStore

logger = logging.getLogger(__name__)


def create_app(database_url: str | None = None) -> FastAPI:
    config.validate_runtime_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_db_engine(database_url)
        try:
            create_schema(engine)
        except SQLAlchemyError:
            logger.exception('Database initialization failed. Check DATABASE_URL.')
        app.state.engine = engine
        app.state.session_factory = build_session_factory(engine)
        app.state.session_store = SessionStore(app.state.session_factory)
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(title='Course Catalog', lifespan=lifespan)

    @app.exception_handler(LoginRequired)
    async def redirect_to_login(request: Request, exc: LoginRequired):
        return RedirectResponse(url='/auth/login', status_code=status.HTTP_302_FOUND)

    @app.exception_handler(CatalogError)
    async def catalog_error(request: Request, exc: CatalogError):
        return JSONResponse(status_code=exc.status_code, content={'detail': exc.message})

    @app.exception_handler(SQLAlchemyError)
    async def storage_error(request: Request, exc: SQLAlchemyError):
        logger.exception('Storage failure while handling %s %s', request.method, request.url.path, exc_info=exc)
        error = StorageError()
        return JSONResponse(status_code=error.status_code, content={'detail': error.message})

    @app.get('/')
    def home():
        return views.render('home', title='Home')

    @app.get('/dashboard')
    def dashboard(
        principal: Principal = Depends(require_authenticated),
        db: Session = Depends(get_db),
    ):
        user = CredentialStore(db).find_by_id(principal.user_id)
        return views.render(
            'dashboard',
            title='Dashboard',
            name=user.name if user is not None else None,
            role=principal.role.value,
        )

    app.include_router(auth_routes.router, prefix='/auth')
    app.include_router(course_routes.router, prefix='/courses')

    return app


app = create_app()
