import pytest
from fastapi.testclient import TestClient

from catalog.database import Base, build_session_factory, create_db_engine, create_schema
from catalog.main import create_app
from catalog.stores.sessions import SessionStore


@pytest.fixture
def engine():
    engine = create_db_engine('sqlite://')
    create_schema(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def db(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def session_store(session_factory):
    return SessionStore(session_factory)


@pytest.fixture
def app():
    return create_app('sqlite://')


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
