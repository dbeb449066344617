import os
import tempfile

# Settings are read at import time, so the environment must be ready first.
os.environ.setdefault("JWT_SECRET", "test-secret-key-for-unit-tests-0123456789")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_INIT_MODE", "off")
os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "todo_api_tests.log"))

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from todo_api.core.database import Base, get_db
from todo_api.core.security import TokenCodec, utcnow
from todo_api.services.auth_service import Authenticator

TEST_SECRET = os.environ["JWT_SECRET"]


class FrozenClock:
    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def clock():
    return FrozenClock(utcnow())


@pytest.fixture
def codec(clock):
    return TokenCodec(TEST_SECRET, timedelta(hours=1), clock=clock)


@pytest.fixture
def authenticator(codec):
    return Authenticator(codec)


@pytest.fixture
def client(session_factory, authenticator):
    from todo_api.api.deps import get_authenticator
    from todo_api.main import app

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_authenticator] = lambda: authenticator
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
