"""
Pytest configuration and fixtures

Tests run against an in-memory SQLite database. The schema is created
before each test that asks for db_session and dropped afterwards, so
nothing persists between tests.
"""
import pytest
import sys
import os

# Must be set before core.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_FORMAT", "text")

# Add the parent directory to the path so we can import from services
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from core.bmi_config import BMIConfig, HeightUnit
from core.database import Base, SessionLocal, engine, get_db
import models  # noqa: F401  (registers tables on Base.metadata)
from main import app
from services.record_store import InMemoryRecordStore


@pytest.fixture(scope="function")
def db_session():
    """
    Database session shared by the test and the app via dependency override.

    The override commits on success and rolls back on error, like get_db.
    """
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()

    def _override_get_db():
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise

    app.dependency_overrides[get_db] = _override_get_db
    yield session

    app.dependency_overrides.pop(get_db, None)
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """TestClient bound to the per-test database."""
    return TestClient(app)


@pytest.fixture
def caller_headers():
    """Headers identifying the caller kherld.testnet"""
    return {"X-Caller-Id": "kherld.testnet"}


@pytest.fixture
def memory_store():
    return InMemoryRecordStore()


@pytest.fixture
def cm_config():
    """Heights in centimeters, advisory at the Obese boundary"""
    return BMIConfig(height_unit=HeightUnit.CENTIMETERS, advisory_threshold=30.0)


@pytest.fixture
def m_config():
    """Heights in meters, advisory at the Obese boundary"""
    return BMIConfig(height_unit=HeightUnit.METERS, advisory_threshold=30.0)
