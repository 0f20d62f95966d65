"""Test configuration and fixtures for the users service."""

import pytest
from fastapi.testclient import TestClient

from ud_shared.config import Settings
from app.application.queries import get_container
from app.entrypoints.fastapi.main import create_app
from app.infrastructure.db.sqlalchemy.models.user import create_schema


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file with a cheap bcrypt cost."""
    return Settings(
        SERVICE_NAME="users-service-test",
        DB_URL=f"sqlite:///{tmp_path / 'users.db'}",
        BCRYPT_ROUNDS=4,
    )


@pytest.fixture
def container(settings):
    """Service container with the schema already created."""
    c = get_container(settings)
    create_schema(c.engine)
    yield c
    c.engine.dispose()


@pytest.fixture
def repo(container):
    return container.repo


@pytest.fixture(name="client")
def client_fixture(settings, container):
    """Create a test client (startup hooks run inside the context)."""
    with TestClient(create_app(settings, container)) as c:
        yield c


@pytest.fixture
def user_payload():
    return {
        "firstName": "A",
        "lastName": "B",
        "mobileNumber": "555",
        "email": "a@x.com",
        "image": "img1",
        "password": "pw",
    }
