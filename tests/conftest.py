"""Shared fixtures for the User Endpoint API tests."""

import pytest
from fastapi.testclient import TestClient

from user_endpoint_api.app.core.db import init_db
from user_endpoint_api.app.main import create_app
from user_endpoint_api.app.repositories.user_repository import (
    InMemoryUserRepository,
    SQLiteUserRepository,
)
from user_endpoint_api.app.services.user_service import UserService

from fakes import RecordingRepository


@pytest.fixture
def recording_repository() -> RecordingRepository:
    return RecordingRepository()


@pytest.fixture
def memory_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def sqlite_repository(tmp_path) -> SQLiteUserRepository:
    db_path = str(tmp_path / "users.db")
    init_db(db_path)
    return SQLiteUserRepository(db_path)


@pytest.fixture
def service(memory_repository) -> UserService:
    return UserService(memory_repository)


@pytest.fixture
def client(memory_repository) -> TestClient:
    return TestClient(create_app(repository=memory_repository))
