"""
Shared test fixtures.

Every test runs against a fresh SQLite file: tables are created
and seeded with the default settings and the Cash account, and
dropped again once the test finishes.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from bookkeeping.main import app
from bookkeeping.models import Base
from bookkeeping.models.base import get_db
from bookkeeping.services.setting_service import SettingService

# A file rather than :memory: so that several connections
# (and threads) see the same data.
TEST_DATABASE_URL = "sqlite:///./test.db"

TEST_ENTITY_NAME = "Test Company Ltd"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=test_engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def seeded_database():
    """Build and seed the schema for one test, then drop it."""
    Base.metadata.create_all(bind=test_engine)
    with TestSessionLocal() as session:
        SettingService(session).seed_defaults(TEST_ENTITY_NAME)
        session.commit()
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def entity_name():
    """Entity name the test books are seeded with."""
    return TEST_ENTITY_NAME


@pytest.fixture
def session_factory():
    """For tests that open sessions of their own, e.g. per thread."""
    return TestSessionLocal


@pytest.fixture
def db_session():
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def client(db_session):
    """
    HTTP client bound to the test database.

    Routes receive db_session through the get_db override, so a
    test can mix API calls with direct service calls.
    """
    app.dependency_overrides[get_db] = lambda: db_session
    yield TestClient(app)
    app.dependency_overrides.clear()
