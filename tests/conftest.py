"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_http_session
from core.config import Settings, get_settings
from main import app
from tests.fakes import FakeSession


@pytest.fixture
def settings():
    return Settings(
        CLOUDINARY_CLOUD_NAME="demo",
        CLOUDINARY_API_KEY="123456789012345",
        CLOUDINARY_API_SECRET="s3cr3t",
        IMGBB_API_KEY="imgbb-key",
    )


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def client(settings, fake_session):
    """Cliente de pruebas con configuración y red sustituidas"""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_session] = lambda: fake_session
    yield TestClient(app)
    app.dependency_overrides.clear()
