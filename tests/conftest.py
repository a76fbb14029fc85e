"""Shared fixtures: in-memory SQLite database and a wired test client."""

import os
from collections.abc import Generator

# keep app.config away from a real postgres before anything imports it
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.database import get_session
from app.main import app
from app.repositories.book_repository import BookRepository
from app.repositories.category_repository import CategoryRepository
from app.services.book_service import BookService
from app.services.category_service import CategoryService


@pytest.fixture(name="session")
def session_fixture() -> Generator[Session, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(name="client")
def client_fixture(session: Session) -> Generator[TestClient, None, None]:
    def override_get_session():
        yield session

    app.dependency_overrides[get_session] = override_get_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def book_service(session: Session) -> BookService:
    return BookService(BookRepository(session))


@pytest.fixture
def category_service(session: Session, book_service: BookService) -> CategoryService:
    return CategoryService(CategoryRepository(session), book_service)
