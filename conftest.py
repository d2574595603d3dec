import os

# Settings are read at import time; configure the test environment first
os.environ["JWT_SECRET_KEY"] = "test-jwt-secret-key-for-testing-only-0123456789"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "development"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from wte_backend.infrastructure.database import Base, get_db
from wte_backend.infrastructure.models import Site
from wte_backend.domain.services.auth_service import auth_service
from wte_backend.domain.services.security import create_access_token
from wte_backend.main import app

# In-memory SQLite shared by every session in a test via a single connection
SQLALCHEMY_TEST_DATABASE_URL = "sqlite://"

ADMIN_EMAIL = "admin@wte.com"
ADMIN_PASSWORD = "admin123"


@pytest.fixture(scope="session")
def test_engine():
    """Create a test database engine."""
    engine = create_engine(
        SQLALCHEMY_TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def test_db(test_engine):
    """Create a test database session on fresh tables."""
    Base.metadata.create_all(bind=test_engine)

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )
    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def client(test_db):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client_no_db():
    """Create a test client without database dependency for basic endpoint tests."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def site(test_db):
    """The first site (id 1)."""
    site = Site(name="Cassava Processing Site")
    test_db.add(site)
    test_db.commit()
    test_db.refresh(site)
    return site


@pytest.fixture
def other_site(test_db, site):
    other = Site(name="Livestock Farm Site")
    test_db.add(other)
    test_db.commit()
    test_db.refresh(other)
    return other


@pytest.fixture
def admin(test_db):
    return auth_service.register_admin(ADMIN_EMAIL, ADMIN_PASSWORD, test_db)


@pytest.fixture
def auth_headers(admin):
    return {"Authorization": f"Bearer {create_access_token(admin.id)}"}


@pytest.fixture
def report_payload(site):
    return {
        "siteId": site.id,
        "wasteType": "Cassava Peels",
        "quantity": 50.5,
        "unit": "kg",
        "notes": "Fresh peels from morning processing",
        "contactName": "John Doe",
        "contactPhone": "+1234567890",
    }
