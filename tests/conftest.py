import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from config import config
from main import app
from services.cache import get_cache_client, get_mock_cache_client
from services.images import UnsplashClient, get_image_client

config.valid_tokens = ["fake-client-token"]


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer fake-client-token"}


@pytest.fixture
def unsplash_session():
    """Stands in for the requests.Session talking to Unsplash."""
    return MagicMock()


@pytest.fixture
def client(unsplash_session):
    cache = get_mock_cache_client()
    image_client = UnsplashClient(access_key="test-key", session=unsplash_session)

    app.dependency_overrides[get_cache_client] = lambda: cache
    app.dependency_overrides[get_image_client] = lambda: image_client

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
