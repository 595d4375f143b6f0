"""Pytest fixtures — throwaway SQLite database per test and logged-in API clients."""
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from attendance.database import Base, get_db
from attendance.main import app
from attendance.services.auth_service import create_admin
from attendance.services.scan_service import ScanDesk, get_scan_desk

# Import all models so they register with Base.metadata
from attendance.models.user import AdminUser                   # noqa: F401
from attendance.models.attendee import Attendee                # noqa: F401
from attendance.models.event_session import EventSession       # noqa: F401
from attendance.models.attendance_log import AttendanceLog     # noqa: F401

SQLITE_URL = "sqlite:///./test.db"
ADMIN_EMAIL = "admin@example.org"
ADMIN_PASSWORD = "s3cret-pass"


class FakeClock:
    """Manually advanced monotonic clock for cool-down tests."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture(scope="function")
def db(session_factory):
    """Yield a database session bound to the test database."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def scan_clock():
    return FakeClock()


@pytest.fixture(scope="function")
def scan_desk(scan_clock):
    return ScanDesk(cooldown_seconds=3, clock=scan_clock)


@pytest.fixture(scope="function")
def anon_client(session_factory, scan_desk):
    """FastAPI TestClient with the database dependency overridden, not logged in."""

    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_scan_desk] = lambda: scan_desk
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(anon_client, session_factory):
    """TestClient logged in as an administrator."""
    session = session_factory()
    try:
        create_admin(session, ADMIN_EMAIL, ADMIN_PASSWORD)
    finally:
        session.close()
    resp = anon_client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200, resp.text
    return anon_client


# ---------------------------------------------------------------------------
# Helpers: create records via the API, return the JSON response dict
# ---------------------------------------------------------------------------
def create_test_attendee(client: TestClient, name: str = "Test Attendee", category: str = "Student", **extra) -> dict:
    """Helper — POST /api/attendees and return response JSON."""
    payload = {"full_name": name, "email": f"{name.lower().replace(' ', '.')}@example.org", "category": category}
    payload.update(extra)
    resp = client.post("/api/attendees/", json=payload)
    assert resp.status_code == 201, resp.text
    return resp.json()


def create_test_session(client: TestClient, title: str = "Day 1", date: str = "2025-01-01", active: bool = False) -> dict:
    """Helper — POST /api/sessions and return response JSON."""
    resp = client.post("/api/sessions/", json={"title": title, "date": date, "set_active": active})
    assert resp.status_code == 201, resp.text
    return resp.json()


def mark_present(client: TestClient, attendee_id: str, session_id: str) -> dict:
    resp = client.post("/api/attendance/present", json={"attendee_id": attendee_id, "session_id": session_id})
    assert resp.status_code == 200, resp.text
    return resp.json()
