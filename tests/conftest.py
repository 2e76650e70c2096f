import pytest
from fastapi.testclient import TestClient

from mockstore.config import settings
from mockstore.main import create_app


@pytest.fixture(autouse=True)
def default_settings(monkeypatch):
    # Auth off and no artificial order latency unless a test opts in
    monkeypatch.setattr(settings, "AUTH_ENABLED", False)
    monkeypatch.setattr(settings, "ORDER_MAX_DELAY_MS", 0)


@pytest.fixture
def app():
    """Fresh app per test so the in-memory stores start empty."""
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def foodstore(app):
    return app.state.stores["foodstore"]


@pytest.fixture
def complete_food():
    return {"name": "X", "category": "Y", "brand": "B", "lotNumber": "L"}
