import pytest

from drivers.coverage import covers
from drivers.models import DriverSegment
from routing.route_line import MOZ_ROUTES, NOT_FOUND, Direction, RouteLine, default_route_line


@pytest.fixture
def route_line():
    return RouteLine(MOZ_ROUTES)

def test_index_of_known_and_unknown_stops(route_line):
    assert route_line.index_of("MAPUTO") == 0
    assert route_line.index_of("XAI-XAI") == 2
    assert route_line.index_of("VILANCULOS") == 12

    assert route_line.index_of("Unknown") == NOT_FOUND
    assert route_line.index_of(None) == NOT_FOUND
    # Names are matched exactly.
    assert route_line.index_of("maputo") == NOT_FOUND

def test_direction_follows_index_order(route_line):
    assert route_line.direction("MAPUTO", "MAXIXE") == Direction.NORTHBOUND
    assert route_line.direction("MAXIXE", "MACIA") == Direction.SOUTHBOUND
    assert route_line.direction("MAXIXE", "MAXIXE") is None
    assert route_line.direction("MAXIXE", "Beira") is None

def test_hops(route_line):
    assert route_line.hops("MAPUTO", "VILANCULOS") == 12
    assert route_line.hops("VILANCULOS", "MAPUTO") == 12
    assert route_line.hops("MAPUTO", "Beira") is None

def test_invalid_route_lines_are_rejected():
    with pytest.raises(ValueError):
        RouteLine([])

    with pytest.raises(ValueError):
        RouteLine(["MAPUTO", "MACIA", "MAPUTO"])

    with pytest.raises(ValueError):
        RouteLine(["MAPUTO", ""])

@pytest.fixture
def fresh_defaults():
    default_route_line.cache_clear()
    yield
    default_route_line.cache_clear()

def test_default_route_line(monkeypatch, fresh_defaults):
    monkeypatch.delenv("ROUTE_LINE", raising=False)
    line = default_route_line()

    assert len(line) == 13
    assert line.stops[0] == "MAPUTO"
    assert line.stops[-1] == "VILANCULOS"

def test_default_route_line_env_override(monkeypatch, fresh_defaults):
    monkeypatch.setenv("ROUTE_LINE", "MAPUTO, MACIA ,XAI-XAI")
    line = default_route_line()

    assert line.stops == ("MAPUTO", "MACIA", "XAI-XAI")

def test_default_route_line_is_loaded_once(monkeypatch, fresh_defaults):
    monkeypatch.delenv("ROUTE_LINE", raising=False)
    segment = DriverSegment("MAPUTO", "MAXIXE")
    assert covers(segment, "MACIA", "ZAVALA")

    monkeypatch.setenv("ROUTE_LINE", "MAPUTO,MACIA,XAI-XAI")

    # Later environment changes do not move the line under a running process.
    assert default_route_line() is default_route_line()
    assert len(default_route_line()) == 13
    assert covers(segment, "MACIA", "ZAVALA")
