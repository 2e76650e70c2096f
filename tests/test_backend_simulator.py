import pytest

from mockstore.dal.discovery_state import DiscoveryState, UnknownMethodError
from mockstore.seeds.profiles import ALL_PROFILES, FOODSTORE
from mockstore.services.backend_simulator import BackendSimulator
from mockstore.services.field_policy import (
    find_missing_fields,
    find_undocumented_fields,
    is_missing,
)


@pytest.fixture
def simulator():
    return BackendSimulator(DiscoveryState(FOODSTORE.configs))


@pytest.mark.parametrize("profile", ALL_PROFILES, ids=lambda p: p.key)
@pytest.mark.parametrize("method", ["post", "put"])
def test_empty_body_misses_every_actual_required_field(profile, method):
    sim = BackendSimulator(DiscoveryState(profile.configs))
    res = sim.validate(method, {})
    assert res.success is False
    assert res.error == "MISSING_REQUIRED_FIELDS"
    assert res.missing_fields == profile.configs[method].actual_required


@pytest.mark.parametrize("profile", ALL_PROFILES, ids=lambda p: p.key)
@pytest.mark.parametrize("method", ["post", "put"])
def test_body_with_all_actual_required_fields_succeeds(profile, method):
    sim = BackendSimulator(DiscoveryState(profile.configs))
    body = {f: "v" for f in profile.configs[method].actual_required}
    res = sim.validate(method, body)
    assert res.success is True
    assert res.missing_fields is None


def test_failure_message_lists_missing_fields_in_config_order(simulator):
    res = simulator.validate("POST", {"lotNumber": "L", "name": "n"})
    assert res.missing_fields == ["category", "brand"]
    assert res.message == "Missing required fields: category, brand"


def test_null_and_empty_string_count_as_missing(simulator):
    res = simulator.validate("put", {"name": None, "category": "", "brand": "b"})
    assert res.missing_fields == ["name", "category"]


def test_falsy_non_empty_values_count_as_present(simulator):
    res = simulator.validate("put", {"name": 0, "category": False, "brand": "b"})
    assert res.success is True


def test_unknown_method_is_rejected(simulator):
    with pytest.raises(UnknownMethodError):
        simulator.validate("delete", {})


def test_validate_follows_config_updates():
    state = DiscoveryState(FOODSTORE.configs)
    sim = BackendSimulator(state)
    state.configs["post"] = state.configs["post"].model_copy(update={"actual_required": ["name", "category"]})
    assert sim.validate("post", {"name": "n", "category": "c"}).success is True


# --- policy helpers -------------------------------------------------------

def test_find_undocumented_fields_keeps_body_order():
    body = {"zeta": 1, "name": "n", "alpha": 2}
    assert find_undocumented_fields(body, ["name"]) == ["zeta", "alpha"]


def test_find_missing_fields():
    assert find_missing_fields({"a": "x", "b": "", "c": None}, ["a", "b", "c", "d"]) == ["b", "c", "d"]


@pytest.mark.parametrize("value,missing", [(None, True), ("", True), (0, False), (False, False), ([], False)])
def test_is_missing(value, missing):
    assert is_missing(value) is missing
