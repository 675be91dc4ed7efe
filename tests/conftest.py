# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from product_api.config import Settings
from product_api.database import ProductStore
from product_api.main import create_app

AUTH = {"Authorization": "Bearer secret-token"}


@pytest.fixture
def store():
    return ProductStore()


@pytest.fixture
def app(store):
    return create_app(settings=Settings(_env_file=None, auth_token="secret-token"), store=store)


@pytest.fixture
def client(app):
    # server errors come back as 500 responses instead of raising
    with TestClient(app, raise_server_exceptions=False) as c:
        c.headers.update(AUTH)
        yield c


@pytest.fixture
def anon_client(app):
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
