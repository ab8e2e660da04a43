"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown with seeded companies, jobs and users
- FastAPI test client
- Tokens for a regular user and an admin
"""

import os

# Cheap hashing for tests; must be set before app settings are loaded
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.core.security import create_token, get_password_hash
from app.models import Company, Job, User
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@event.listens_for(engine, "connect")
def enable_foreign_keys(dbapi_connection, connection_record):
    """SQLite only enforces foreign keys (and ON DELETE CASCADE) when asked."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def seed(db):
    """Insert companies c1..c3, jobs job1..job3 and users u1 / admin."""
    db.add_all([
        Company(handle="c1", name="C1", description="Desc1", num_employees=1, logo_url="http://c1.img"),
        Company(handle="c2", name="C2", description="Desc2", num_employees=2, logo_url="http://c2.img"),
        Company(handle="c3", name="C3", description="Desc3", num_employees=3, logo_url="http://c3.img"),
    ])
    db.flush()

    db.add_all([
        Job(title="job1", salary=50000, equity=Decimal("0"), company_handle="c1"),
        Job(title="job2", salary=60000, equity=Decimal("0.3"), company_handle="c1"),
        Job(title="job3", salary=70000, equity=Decimal("0.4"), company_handle="c2"),
    ])

    db.add_all([
        User(
            username="u1",
            password=get_password_hash("password1"),
            first_name="U1F",
            last_name="U1L",
            email="user1@user.com",
            is_admin=False,
        ),
        User(
            username="admin",
            password=get_password_hash("password2"),
            first_name="AdF",
            last_name="AdL",
            email="admin@user.com",
            is_admin=True,
        ),
    ])
    db.commit()


@pytest.fixture
def db_session():
    """
    Create a fresh, seeded database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    seed(db)
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def job_ids(db_session):
    """Ids of the seeded jobs keyed by title."""
    return {job.title: job.id for job in db_session.query(Job).all()}


@pytest.fixture
def u1_token():
    return create_token("u1", False)


@pytest.fixture
def admin_token():
    return create_token("admin", True)


@pytest.fixture
def u1_headers(u1_token):
    return {"Authorization": f"Bearer {u1_token}"}


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}
