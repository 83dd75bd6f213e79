import pytest
from fastapi.testclient import TestClient

from restaurant_service.config import Settings
from restaurant_service.main import create_app


def make_settings(**overrides):
    values = {"database_url": "sqlite://", "api_prefix": "", "create_tables": True}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def client():
    # Fresh in-memory database per test; the lifespan runs inside the with block
    app = create_app(make_settings())
    with TestClient(app) as client:
        yield client
