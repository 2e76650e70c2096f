import pytest

from mockstore.config import settings
from mockstore.routers.perf_routes import leading_int, random_items

PERF = "/api/basic"


@pytest.mark.parametrize(
    "raw,default,expected",
    [("250", 1000, 250), ("12abc", 1000, 12), ("abc", 1000, 1000), ("0", 200, 200), ("-3", 5, -3)],
)
def test_leading_int(raw, default, expected):
    assert leading_int(raw, default) == expected


def test_random_items_shape():
    items = random_items(3)
    assert [i["id"] for i in items] == [0, 1, 2]
    assert all(len(i["value"]) == 11 and 0 <= i["number"] < 1000 for i in items)


def test_simple(client):
    r = client.get(f"{PERF}/simple")
    assert r.status_code == 200
    assert r.json()["message"] == "OK"
    assert "timestamp" in r.json()


def test_delay(client):
    r = client.get(f"{PERF}/delay/5")
    assert r.status_code == 200
    assert r.json()["delay"] == 5
    assert r.json()["message"] == "Response after 5ms delay"


def test_delay_above_ceiling_is_rejected(client, monkeypatch):
    monkeypatch.setattr(settings, "PERF_MAX_DELAY_MS", 100)
    r = client.get(f"{PERF}/delay/101")
    assert r.status_code == 400
    assert r.json()["error"] == "VALUE_OUT_OF_RANGE"


def test_echo_returns_any_json(client):
    assert client.post(f"{PERF}/echo", json=[1, {"a": 2}]).json()["data"] == [1, {"a": 2}]
    assert client.post(f"{PERF}/echo").json()["data"] is None


def test_large_payload(client):
    r = client.get(f"{PERF}/largepayload/25")
    assert r.status_code == 200
    assert r.json()["count"] == 25
    assert len(r.json()["data"]) == 25
    assert r.json()["message"] == "Generated 25 items"


def test_cpu(client):
    r = client.get(f"{PERF}/cpu/1")
    assert r.status_code == 200
    assert r.json()["load"] == 1
    assert r.json()["executionTime"] >= 0


@pytest.mark.parametrize("code", [201, 418, 503])
def test_status_code_is_echoed(client, code):
    r = client.get(f"{PERF}/status/{code}")
    assert r.status_code == code
    assert r.json()["status"] == code


def test_status_without_body(client):
    r = client.get(f"{PERF}/status/204")
    assert r.status_code == 204
    assert r.content == b""


def test_status_defaults_and_bounds(client):
    assert client.get(f"{PERF}/status/abc").status_code == 200
    r = client.get(f"{PERF}/status/700")
    assert r.status_code == 400
    assert r.json()["error"] == "VALUE_OUT_OF_RANGE"
