import json

import pytest

from mockstore.auth.credentials import DEFAULT_USERS, CredentialStore
from mockstore.config import settings

ADMIN = ("admin", "admin123")
TESTER = ("tester", "test123")


@pytest.fixture
def auth_on(monkeypatch):
    monkeypatch.setattr(settings, "AUTH_ENABLED", True)


# --- login -----------------------------------------------------------------

def test_login_success(client):
    r = client.post("/api/auth/login", json={"username": "tester", "password": "test123"})
    assert r.status_code == 200
    assert r.json()["user"] == {"id": 2, "username": "tester", "role": "user"}
    assert "password" not in r.json()["user"]


def test_login_wrong_password(client):
    r = client.post("/api/auth/login", json={"username": "tester", "password": "nope"})
    assert r.status_code == 401
    assert r.json()["status"] == "fail"


def test_login_missing_fields(client):
    r = client.post("/api/auth/login", json={"username": "tester"})
    assert r.status_code == 400
    assert r.json()["error"] == "MISSING_CREDENTIALS"


# --- basic auth guard ------------------------------------------------------

def test_listing_is_open_when_auth_disabled(client):
    assert client.get("/api/foodstore").status_code == 200


def test_listing_requires_credentials(client, auth_on):
    r = client.get("/api/foodstore")
    assert r.status_code == 401
    assert r.json()["error"] == "AUTHENTICATION_REQUIRED"
    assert r.headers["www-authenticate"] == "Basic"

    assert client.get("/api/foodstore", auth=("tester", "bad")).status_code == 401
    assert client.get("/api/foodstore", auth=TESTER).status_code == 200


def test_config_update_requires_admin(client, auth_on):
    payload = {"method": "put", "config": {"potentialUndocumented": ["brand"]}}
    r = client.put("/api/foodstore/test/field-discovery/config", json=payload, auth=TESTER)
    assert r.status_code == 403
    assert r.json()["error"] == "ACCESS_DENIED"

    r = client.put("/api/foodstore/test/field-discovery/config", json=payload, auth=ADMIN)
    assert r.status_code == 200


def test_credential_store_from_file(tmp_path):
    path = tmp_path / "users.json"
    path.write_text(json.dumps({"users": [{"id": 9, "username": "ops", "password": "pw", "role": "admin"}]}))
    store = CredentialStore.from_file(str(path))
    assert store.verify("ops", "pw").role == "admin"
    assert store.verify("admin", "admin123") is None


def test_credential_store_falls_back_to_demo_users(tmp_path):
    store = CredentialStore.from_file(str(tmp_path / "missing.json"))
    assert store.verify(DEFAULT_USERS[0].username, DEFAULT_USERS[0].password) is not None


# --- orders ----------------------------------------------------------------

def test_order_is_stamped_server_side(client):
    r = client.post("/api/foodstore/order", json={"foodId": "f1", "quantity": 2, "basePrice": 5})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["foodId"] == "f1"
    assert data["status"] == "pending"
    assert data["orderDate"]
    assert 10.0 <= float(data["calculatedCost"]) <= 20.0
    assert 1.0 <= float(data["costElevationFactor"]) <= 2.0


def test_order_rejects_client_order_date(client):
    r = client.post("/api/foodstore/order", json={"foodId": "f1", "orderDate": "2020-01-01"})
    assert r.status_code == 400
    assert r.json()["error"] == "CLIENT_ORDER_DATE_REJECTED"


def test_order_not_mounted_on_medstore(client):
    assert client.post("/api/medstore/order", json={"foodId": "f1"}).status_code in (404, 405)
