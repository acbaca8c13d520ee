import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from storefront.core.config import Settings
from storefront.db.session import build_engine, create_db_and_tables
from storefront.main import create_app
from storefront.services.credentials import CredentialStore
from storefront.services.tokens import TokenService

TEST_SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL="sqlite://",
        JWT_SECRET=TEST_SECRET,
        UPLOAD_DIR=str(tmp_path / "images"),
        PUBLIC_BASE_URL="http://testserver",
        CORS_ORIGINS=["http://shop.example.com"],
    )

@pytest.fixture
def app(settings):
    return create_app(settings)

@pytest.fixture
def client(app):
    # Context manager runs the lifespan, which creates the tables
    with TestClient(app) as test_client:
        yield test_client

@pytest.fixture
def load_user(app, client):
    """Read a user straight from the database the client talks to."""
    def _load(email):
        with Session(app.state.engine) as session:
            return CredentialStore(session).find_by_email(email)
    return _load

@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    create_db_and_tables(engine)
    yield engine
    engine.dispose()

@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session

@pytest.fixture
def store(session):
    return CredentialStore(session)

@pytest.fixture
def tokens():
    return TokenService(TEST_SECRET)

@pytest.fixture
def signup(client):
    def _signup(username="a", email="a@x.com", password="p"):
        response = client.post("/signup", json={"username": username, "email": email, "password": password})
        assert response.status_code == 200
        return response.json()["token"]
    return _signup
