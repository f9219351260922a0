import pytest

from pricing.fares import FareTable, calculate_price, default_fare_table, trip_fare
from pricing.policy import FarePolicy, default_fare_policy
from routing.route_line import MOZ_ROUTES, RouteLine, default_route_line


@pytest.fixture
def route_line():
    return RouteLine(MOZ_ROUTES)

@pytest.fixture
def policy():
    return FarePolicy()

def test_explicit_fare_wins_over_interpolation(route_line, policy):
    # Interpolation would give 300 + 75 * 1 = 375.
    assert calculate_price("MAPUTO", "MACIA", route_line, policy=policy) == 300
    # Interpolation would give 300 + 75 * 12 = 1200; table agrees, both anchors.
    assert calculate_price("MAPUTO", "VILANCULOS", route_line, policy=policy) == 1200
    assert calculate_price("VILANCULOS", "MAPUTO", route_line, policy=policy) == 1200
    # Formula gives 450.
    assert calculate_price("MAPUTO", "XAI-XAI", route_line, policy=policy) == 500

def test_anchor_rows_only_price_trips_leaving_the_anchor(route_line, policy):
    # VILANCULOS -> MACIA is a 300 row entry; the way back is not.
    assert calculate_price("VILANCULOS", "MACIA", route_line, policy=policy) == 300
    assert calculate_price("MACIA", "VILANCULOS", route_line, policy=policy) == 300 + 75 * 11
    # MAPUTO -> XAI-XAI is 500, XAI-XAI -> MAPUTO interpolates.
    assert calculate_price("XAI-XAI", "MAPUTO", route_line, policy=policy) == 450
    assert calculate_price("MAXIXE", "MAPUTO", route_line, policy=policy) == 900

def test_intermediate_pairs_fall_back_to_interpolation(route_line, policy):
    # MACIA (1) -> MAXIXE (8): 300 + 75 * 7
    assert calculate_price("MACIA", "MAXIXE", route_line, policy=policy) == 825
    assert calculate_price("MAXIXE", "MACIA", route_line, policy=policy) == 825
    # XAI-XAI (2) -> CHÓKWÈ (3)
    assert calculate_price("XAI-XAI", "CHÓKWÈ", route_line, policy=policy) == 375

def test_every_off_table_pair_matches_formula(route_line, policy):
    table = default_fare_table()
    for origin in route_line:
        for destination in route_line:
            if (origin, destination) in table:
                continue
            expected = 300 + 75 * abs(route_line.index_of(destination) - route_line.index_of(origin))
            assert calculate_price(origin, destination, route_line, table, policy) == expected

def test_unknown_location_has_no_price(route_line, policy):
    assert calculate_price("Unknown", "MAPUTO", route_line, policy=policy) is None
    assert calculate_price("MAPUTO", "Unknown", route_line, policy=policy) is None

def test_custom_policy_changes_fallback_only(route_line):
    policy = FarePolicy(base_fare=100, step_fare=10)

    assert calculate_price("MACIA", "MAXIXE", route_line, policy=policy) == 170
    assert calculate_price("MAPUTO", "MACIA", route_line, policy=policy) == 300

def test_from_rows_keeps_declared_pairs_only():
    table = FareTable.from_rows({
        "A": {"B": 100, "C": 200},
        "C": {"A": 250},
    })

    assert len(table) == 3
    assert table.get("A", "B") == 100
    assert table.get("C", "A") == 250
    assert table.get("B", "A") is None

def test_zero_fare_entry_falls_through(policy):
    line = RouteLine(["A", "B", "C"])
    table = FareTable({("A", "C"): 0})

    assert calculate_price("A", "C", line, table, policy) == 450

def test_trip_fare_multiplies_by_seats(route_line, policy):
    assert trip_fare("MAPUTO", "XAI-XAI", 3, route_line, policy=policy) == 1500
    assert trip_fare("Unknown", "XAI-XAI", 3, route_line, policy=policy) is None

    with pytest.raises(ValueError):
        trip_fare("MAPUTO", "XAI-XAI", 0, route_line, policy=policy)

def test_policy_validation():
    with pytest.raises(ValueError):
        FarePolicy(step_fare=-1).validate()

    with pytest.raises(ValueError):
        FarePolicy(platform_share_percent=120).validate()

@pytest.fixture
def fresh_defaults():
    default_fare_policy.cache_clear()
    default_route_line.cache_clear()
    yield
    default_fare_policy.cache_clear()
    default_route_line.cache_clear()

def test_default_policy_env_overrides(monkeypatch, fresh_defaults):
    monkeypatch.setenv("BASE_FARE", "250")
    monkeypatch.setenv("STEP_FARE", "50")
    monkeypatch.delenv("PLATFORM_SHARE_PERCENT", raising=False)

    policy = default_fare_policy()

    assert policy.base_fare == 250
    assert policy.step_fare == 50
    assert policy.platform_share_percent == 15

def test_default_fares_are_resolved_once(monkeypatch, fresh_defaults):
    monkeypatch.delenv("BASE_FARE", raising=False)
    monkeypatch.delenv("STEP_FARE", raising=False)
    monkeypatch.delenv("ROUTE_LINE", raising=False)
    assert calculate_price("MACIA", "MAXIXE") == 825

    monkeypatch.setenv("BASE_FARE", "1")
    monkeypatch.setenv("STEP_FARE", "1")
    monkeypatch.setenv("ROUTE_LINE", "MACIA,MAXIXE")

    assert calculate_price("MACIA", "MAXIXE") == 825
    assert default_fare_policy() is default_fare_policy()
    assert default_fare_table() is default_fare_table()

def test_explicit_empty_table_is_respected(route_line, policy):
    # MAPUTO -> MACIA has a 300 row entry in the default table.
    assert calculate_price("MAPUTO", "MACIA", route_line, FareTable(), policy) == 375
