"""Pytest configuration and fixtures for the voting services."""

from collections.abc import Callable, Generator
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from voting.api.deps import get_db
from voting.core.config import Settings
from voting.models.base import Base
from voting.models.vote import Vote
from voting.results_app import create_app as create_results_app
from voting.vote_app import create_app as create_vote_app

# Use SQLite in-memory for tests (fast, isolated)
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

OPTIONS = ("cats", "dogs")


@pytest.fixture(scope="function")
def db() -> Generator[Session, None, None]:
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite://",
        option_a=OPTIONS[0],
        option_b=OPTIONS[1],
        log_level="debug",
        port=None,
    )


def _client_for(app: FastAPI, session: Session | MagicMock) -> Generator[TestClient, None, None]:
    def override_get_db():
        try:
            yield session
        finally:
            pass  # Don't close the session here, let the db fixture handle it

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def vote_client(db: Session, settings: Settings) -> Generator[TestClient, None, None]:
    """Vote service test client bound to the test database."""
    yield from _client_for(create_vote_app(settings), db)


@pytest.fixture(scope="function")
def results_client(db: Session, settings: Settings) -> Generator[TestClient, None, None]:
    """Results service test client bound to the test database."""
    yield from _client_for(create_results_app(settings), db)


@pytest.fixture
def broken_db() -> MagicMock:
    """A session whose every statement fails as if the store were down."""
    session = MagicMock(spec=Session)
    error = OperationalError("SELECT 1", {}, Exception("connection refused"))
    session.execute.side_effect = error
    session.commit.side_effect = error
    return session


@pytest.fixture
def broken_client_factory(
    broken_db: MagicMock, settings: Settings
) -> Generator[Callable[[str], TestClient], None, None]:
    """Build a client for either service whose store is unreachable."""
    clients = []

    def factory(service: str) -> TestClient:
        app = create_vote_app(settings) if service == "vote" else create_results_app(settings)
        gen = _client_for(app, broken_db)
        clients.append(gen)
        return next(gen)

    yield factory
    for gen in clients:
        next(gen, None)


@pytest.fixture
def add_votes(db: Session) -> Callable[..., None]:
    """Insert votes directly, bypassing the vote service."""

    def _add(*options: str) -> None:
        for option in options:
            db.add(Vote(option=option))
        db.commit()

    return _add
