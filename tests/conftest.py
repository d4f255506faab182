"""Pytest fixtures: file-backed SQLite database recreated for every test."""
import httpx
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from media_requests.database import Base, get_db
from media_requests.main import app
from media_requests.services.tmdb_client import TMDBClient, get_tmdb_client

# Import all models so they register with Base.metadata
from media_requests.models.user import User                 # noqa: F401
from media_requests.models.request import MediaRequest      # noqa: F401

SQLITE_URL = "sqlite:///./test.db"


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session bound to the test engine."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def client(db_engine):
    """FastAPI TestClient with the database dependency overridden to use SQLite."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


class FakeTMDB:
    """Records outgoing catalog calls and answers from a canned handler."""

    def __init__(self):
        self.calls: list[httpx.Request] = []
        self.handler = lambda request: httpx.Response(200, json={})
        self.api_key = "test-key"

    def _transport(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        return self.handler(request)

    def install(self):
        async def _override_get_tmdb_client():
            async with httpx.AsyncClient(
                base_url="https://api.themoviedb.org/3",
                transport=httpx.MockTransport(self._transport),
            ) as http_client:
                yield TMDBClient(http_client, api_key=self.api_key)

        app.dependency_overrides[get_tmdb_client] = _override_get_tmdb_client


@pytest.fixture(scope="function")
def tmdb(client):
    """Catalog client backed by ``httpx.MockTransport``; set ``tmdb.handler`` per test."""
    fake = FakeTMDB()
    fake.install()
    return fake


# ---------------------------------------------------------------------------
# Helper: create a request via the API, returns the new request id
# ---------------------------------------------------------------------------
def create_test_request(client: TestClient, title: str = "The Matrix", requester: str = "Alice",
                        tmdb_id: int = 603, type: str = "movie", **extra) -> str:
    """Helper: POST /api/requests and return the created id."""
    resp = client.post("/api/requests", json={
        "tmdbId": tmdb_id,
        "title": title,
        "type": type,
        "requesterName": requester,
        "posterPath": "/poster.jpg",
        **extra,
    })
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


def get_request(client: TestClient, request_id: str) -> dict:
    """Helper: find one request in GET /api/requests."""
    resp = client.get("/api/requests")
    assert resp.status_code == 200, resp.text
    matches = [r for r in resp.json() if r["id"] == request_id]
    assert matches, f"request {request_id} not listed"
    return matches[0]
