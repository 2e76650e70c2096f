BASE = "/api/foodstore"
FD = f"{BASE}/test/field-discovery"


def test_overview_starts_not_started(client):
    r = client.get(FD)
    assert r.status_code == 200
    body = r.json()
    assert set(body["results"]) == {"post", "put"}
    assert body["summary"]["post"]["status"] == "NOT_STARTED"
    assert body["summary"]["post"]["lastTestResult"] is None
    assert body["configuration"]["post"]["actualRequired"] == ["name", "category", "brand", "lotNumber"]


def test_write_request_populates_results(client, complete_food):
    client.post(BASE, json=complete_food)
    summary = client.get(FD).json()["summary"]["post"]
    assert summary["status"] == "COMPLETED"
    assert summary["totalTests"] == 15
    assert summary["lastTestResult"]["phase"] == 5
    assert summary["completedAt"] is not None


def test_detail_has_phase_breakdown(client):
    client.put(f"{BASE}/1", json={"name": "X", "category": "Y", "brand": "B"})
    r = client.get(f"{FD}/PUT")
    assert r.status_code == 200
    body = r.json()
    assert body["method"] == "PUT"
    assert body["phaseBreakdown"] == {"phase1": 1, "phase2": 2, "phase3": 6, "phase4": 6, "phase5": 0}
    assert body["discoveredUndocumentedRequired"][0] == "brand"
    first = body["testSequence"][0]
    assert set(first) == {"phase", "description", "requestBody", "backendResult", "timestamp"}
    assert first["backendResult"]["missingFields"] == ["brand"]


def test_detail_invalid_method(client):
    r = client.get(f"{FD}/delete")
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_METHOD"
    assert r.json()["availableMethods"] == ["post", "put"]


def test_reset_all(client, complete_food):
    client.post(BASE, json=complete_food)
    client.put(f"{BASE}/1", json={"name": "X", "category": "Y", "brand": "B"})

    r = client.post(f"{FD}/reset", json={"method": "all"})
    assert r.status_code == 200
    assert r.json()["resetMethods"] == ["post", "put"]

    results = client.get(FD).json()["results"]
    for method in ("post", "put"):
        assert results[method]["status"] == "NOT_STARTED"
        assert results[method]["testSequence"] == []
        assert results[method]["completedAt"] is None


def test_reset_single_method_and_default(client, complete_food):
    client.post(BASE, json=complete_food)
    client.put(f"{BASE}/1", json={"name": "X", "category": "Y", "brand": "B"})

    r = client.post(f"{FD}/reset", json={"method": "put"})
    assert r.json()["resetMethod"] == "PUT"
    summary = client.get(FD).json()["summary"]
    assert summary["put"]["status"] == "NOT_STARTED"
    assert summary["post"]["status"] == "COMPLETED"

    # no body means all
    assert client.post(f"{FD}/reset").json()["resetMethods"] == ["post", "put"]


def test_reset_invalid_method(client):
    r = client.post(f"{FD}/reset", json={"method": "patch"})
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_METHOD"
    assert "all" in r.json()["availableMethods"]


def test_manual_run(client):
    r = client.post(f"{FD}/run", json={"method": "put", "testData": {"brand": "Acme"}})
    assert r.status_code == 200
    body = r.json()
    assert body["method"] == "PUT"
    assert body["summary"]["status"] == "COMPLETED"
    assert body["summary"]["totalTests"] == 15
    assert body["results"]["discoveredUndocumentedRequired"][0] == "brand"


def test_manual_run_requires_method(client):
    r = client.post(f"{FD}/run", json={"testData": {}})
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_METHOD"


def test_manual_run_failure_is_wrapped(client, foodstore, monkeypatch):
    def boom(method, body):
        raise RuntimeError("simulator exploded")

    monkeypatch.setattr(foodstore.engine, "discover", boom)
    r = client.post(f"{FD}/run", json={"method": "post"})
    assert r.status_code == 500
    assert r.json()["error"] == "DISCOVERY_RUN_FAILED"
    assert r.json()["message"] == "simulator exploded"


def test_get_config_describes_fields_and_phases(client):
    r = client.get(f"{FD}/config")
    assert r.status_code == 200
    body = r.json()
    assert set(body["description"]) == {"documentedRequired", "documentedOptional", "potentialUndocumented", "actualRequired"}
    assert len(body["testingPhases"]) == 5


def test_update_config_changes_policy(client):
    r = client.put(f"{FD}/config", json={"method": "post", "config": {"actualRequired": ["name", "category", "brand"]}})
    assert r.status_code == 200
    assert r.json()["updatedConfig"]["actualRequired"] == ["name", "category", "brand"]
    assert r.json()["updatedConfig"]["documentedOptional"] == ["price", "description"]

    created = client.post(BASE, json={"name": "X", "category": "Y", "brand": "B"})
    assert created.status_code == 201
    assert created.json()["detailedAnalysis"]["discoveredUndocumentedRequired"][0] == "brand"


def test_update_config_rejects_inconsistent_lists(client):
    r = client.put(f"{FD}/config", json={"method": "post", "config": {"actualRequired": ["brand"]}})
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_CONFIGURATION"
    config = client.get(f"{FD}/config").json()["configuration"]["post"]
    assert config["actualRequired"] == ["name", "category", "brand", "lotNumber"]


def test_update_config_invalid_method(client):
    r = client.put(f"{FD}/config", json={"method": "get", "config": {}})
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_METHOD"


def test_simulate_backend(client):
    r = client.post(
        f"{BASE}/test/simulate-backend",
        json={"method": "post", "requestBody": {"name": "X", "brand": "B", "extra": 1}},
    )
    assert r.status_code == 200
    body = r.json()
    assert body["backendResult"]["success"] is False
    assert body["analysis"]["missingFields"] == ["category", "lotNumber"]
    assert body["analysis"]["extraFields"] == ["extra"]
    assert body["analysis"]["providedFields"] == ["name", "brand", "extra"]


def test_stores_do_not_share_state(client, complete_food):
    client.post(BASE, json=complete_food)
    med = client.get("/api/medstore/test/field-discovery").json()
    assert med["summary"]["post"]["status"] == "NOT_STARTED"
    assert med["configuration"]["post"]["actualRequired"][-2:] == ["supplier", "batchNumber"]


def test_run_without_body_is_invalid_method(client):
    r = client.post(f"{FD}/run")
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_METHOD"
    assert r.json()["message"].startswith("Please specify a valid method")


def test_run_with_null_test_data_uses_empty_body(client):
    r = client.post(f"{FD}/run", json={"method": "put", "testData": None})
    assert r.status_code == 200
    first = r.json()["results"]["testSequence"][0]
    assert first["requestBody"] == {"name": "Test Food", "category": "Test Category"}


def test_simulate_backend_without_body_is_invalid_method(client):
    r = client.post(f"{BASE}/test/simulate-backend")
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_METHOD"


def test_simulate_backend_with_null_request_body(client):
    r = client.post(f"{BASE}/test/simulate-backend", json={"method": "put", "requestBody": None})
    assert r.status_code == 200
    assert r.json()["analysis"]["missingFields"] == ["name", "category", "brand"]


def test_update_config_without_body_is_invalid_method(client):
    r = client.put(f"{FD}/config")
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_METHOD"


def test_update_config_with_null_config_changes_nothing(client):
    r = client.put(f"{FD}/config", json={"method": "post", "config": None})
    assert r.status_code == 200
    assert r.json()["updatedConfig"]["actualRequired"] == ["name", "category", "brand", "lotNumber"]


def test_completed_at_has_one_format_across_views(client):
    client.put(f"{BASE}/1", json={"name": "X", "category": "Y", "brand": "B"})
    overview = client.get(FD).json()
    detail = client.get(f"{FD}/put").json()
    completed = overview["results"]["put"]["completedAt"]
    assert completed.endswith("Z")
    assert overview["summary"]["put"]["completedAt"] == completed
    assert detail["completedAt"] == completed
