"""Pytest configuration and fixtures."""

import os

# Settings are read once at import time, so the environment must be set first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "educa-test-signing-secret-with-enough-length"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin-test-password"

from collections.abc import Callable, Generator  # noqa: E402
from decimal import Decimal  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402

from educa import models  # noqa: E402
from educa.config import get_settings  # noqa: E402
from educa.core import container  # noqa: E402
from educa.database import Base, build_engine, get_db  # noqa: E402
from educa.infrastructure.common.di import provide_with_session  # noqa: E402
from educa.main import app  # noqa: E402

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-test-password"  # noqa: S105
LEARNER_PASSWORD = "learner-password"  # noqa: S105

# In-memory SQLite, one shared connection, foreign keys enforced
test_engine = build_engine(get_settings())

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def settings_override() -> Generator[Callable[..., None], None, None]:
    """Temporarily override cached settings fields."""
    settings = get_settings()
    original: dict[str, Any] = {}

    def override(**values: Any) -> None:
        for key, value in values.items():
            original.setdefault(key, getattr(settings, key))
            setattr(settings, key, value)

    yield override

    for key, value in original.items():
        setattr(settings, key, value)


@pytest.fixture
def test_admin(db_session: Session) -> models.Administrator:
    """Provision the administrator account in the test database."""
    guard = provide_with_session(container.access_guard_use_case, db_session)
    guard.ensure_administrator(ADMIN_USERNAME, ADMIN_PASSWORD)
    return db_session.query(models.Administrator).filter_by(username=ADMIN_USERNAME).one()


@pytest.fixture
def admin_token(client: TestClient, test_admin: models.Administrator) -> str:
    """Log in as the administrator and return the bearer token."""
    response = client.post(
        "/api/v1/auth/admin/login",
        data={"username": test_admin.username, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200, response.text
    return response.json()["access_token"]


@pytest.fixture
def admin_headers(admin_token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def test_courses(db_session: Session) -> list[models.Course]:
    """Create two catalog courses priced 450 and 550."""
    courses = [
        models.Course(
            title="Python for Data Analysis",
            description="Pandas, NumPy and plotting",
            instructor="Grace Lin",
            price=Decimal("450.00"),
            level="Beginner",
        ),
        models.Course(
            title="Cloud Engineering",
            description="Infrastructure as code on the major clouds",
            instructor="Omar Haddad",
            price=Decimal("550.00"),
            level="Intermediate",
        ),
    ]
    db_session.add_all(courses)
    db_session.commit()
    for course in courses:
        db_session.refresh(course)
    return courses


@pytest.fixture
def test_learner(db_session: Session) -> models.Learner:
    """Create a learner with a known password."""
    learner = models.Learner(
        full_name="Ada Lovelace",
        email="ada@example.com",
        hashed_password=container.password_service().hash_password(LEARNER_PASSWORD),
        progress=0,
    )
    db_session.add(learner)
    db_session.commit()
    db_session.refresh(learner)
    return learner


@pytest.fixture
def learner_headers(client: TestClient, test_learner: models.Learner) -> dict[str, str]:
    """Log in as the test learner and return authorization headers."""
    response = client.post(
        "/api/v1/auth/login",
        data={"username": test_learner.email, "password": LEARNER_PASSWORD},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def admin_password() -> str:
    return ADMIN_PASSWORD


@pytest.fixture
def learner_password() -> str:
    return LEARNER_PASSWORD
