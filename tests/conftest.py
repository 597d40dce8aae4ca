"""
Pytest configuration and shared fixtures.

Every test gets a fresh in-memory SQLite database. The application's session
factory is swapped for one bound to it, so both transports and the services
run against the same throwaway store.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.db import database
from jobboard.db.models import Applicant, Base, User
from jobboard.services import accounts, posts


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine, monkeypatch):
    factory = sessionmaker(bind=engine)
    monkeypatch.setattr(database, "Session", factory)
    return factory


@pytest.fixture
def session(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def client(session_factory) -> TestClient:
    from main import app
    return TestClient(app)


@pytest.fixture
def employer(session) -> dict:
    """A registered employer user."""
    return accounts.register(session, User, "Ada King Lovelace", "ada@example.com", "hash-ada", phone="0812345678")


@pytest.fixture
def applicant(session) -> dict:
    """A registered applicant."""
    return accounts.register(
        session, Applicant, "Grace Hopper", "grace@example.com", "hash-grace",
        city="Bangkok", resume_url="https://files.example.com/grace.pdf",
    )


@pytest.fixture
def job_post(session, employer) -> dict:
    """A job post owned by `employer`."""
    return posts.create(
        session,
        employer["id"],
        "Backend Engineer",
        "Analytical Engines Ltd",
        "Bangkok",
        "Full-time",
        "Build and run the job board API.",
        posted_date="2024-05-01",
        salary_min=30000,
        salary_max=45000,
    )
