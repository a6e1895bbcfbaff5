import pytest
from fastapi.testclient import TestClient

from mlops_api.config import get_settings
from mlops_api.core.registry import AppStore
from mlops_api.main import create_app


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store():
    return AppStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c


@pytest.fixture
def sample_model():
    """A valid registration payload."""
    return {"name": "churn-xgb", "version": "1.0.0", "artifactUrl": "s3://models/churn/1.0.0.pkl"}
