from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.core import config


Base = declarative_base()

_MEMORY_URLS = {'sqlite://', 'sqlite:///:memory:'}


def create_db_engine(database_url: str | None = None) -> Engine:
    url = database_url or config.DATABASE_URL
    kwargs: dict = {'echo': config.DATABASE_ECHO}

    if url.startswith('sqlite'):
        # SQLite connections are used from FastAPI's worker threads.
        kwargs['connect_args'] = {'check_same_thread': False}
        if url in _MEMORY_URLS:
            kwargs['poolclass'] = StaticPool

    return create_engine(url, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def create_schema(engine: Engine) -> None:
    # Model modules register their tables on Base when imported.
    from catalog.models import course, session, user  # noqa: F401

    Base.metadata.create_all(bind=engine)


def check_connection(engine: Engine) -> None:
    with engine.connect() as connection:
        connection.execute(text('SELECT 1'))
