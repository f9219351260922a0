"""
Purpose: The Price Calculator.
What it does:
- Looks up an explicit fare for an (origin, destination) pair.
- Falls back to a proportional fare over the route line when the pair
  has no explicit row.
- Returns None (never 0, never an exception) when a stop is unknown.

Per-seat multiplication lives in trip_fare(), not in calculate_price().
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Mapping, Optional, Tuple

from routing.route_line import NOT_FOUND, RouteLine, default_route_line
from .policy import FarePolicy, default_fare_policy

FarePair = Tuple[str, str]

# Anchor rows of the reference schedule (MZN). One row per terminus.
REFERENCE_FARE_ROWS: Dict[str, Dict[str, int]] = {
    "MAPUTO": {
        "MACIA": 300, "XAI-XAI": 500, "CHÓKWÈ": 600, "CHIBUTO": 650, "MANJACAZE": 700,
        "ZAVALA": 750, "INHARRIME": 800, "MAXIXE": 900, "HOMOÍNE": 950, "PANDA": 1000,
        "MASSINGA": 1100, "VILANCULOS": 1200,
    },
    "VILANCULOS": {
        "MASSINGA": 1100, "PANDA": 1000, "HOMOÍNE": 950, "MAXIXE": 900, "INHARRIME": 800,
        "ZAVALA": 750, "MANJACAZE": 700, "CHIBUTO": 650, "CHÓKWÈ": 600, "XAI-XAI": 500,
        "MACIA": 300, "MAPUTO": 1200,
    },
}


class FareTable:
    """
    Explicit (origin, destination) -> fare lookup.
    """

    def __init__(self, fares: Optional[Mapping[FarePair, int]] = None):
        self._fares: Dict[FarePair, int] = dict(fares or {})

    @classmethod
    def from_rows(cls, rows: Mapping[str, Mapping[str, int]]) -> FareTable:
        """
        Build a table from anchor rows {anchor: {stop: fare}}.
        Only the declared (anchor, stop) pairs are recorded; the reverse
        trip of a row entry is not implied.
        """
        fares: Dict[FarePair, int] = {}
        for anchor, row in rows.items():
            for stop, fare in row.items():
                fares[(anchor, stop)] = fare

        return cls(fares)

    def get(self, origin: str, destination: str) -> Optional[int]:
        return self._fares.get((origin, destination))

    def __contains__(self, pair: FarePair) -> bool:
        return pair in self._fares

    def __len__(self) -> int:
        return len(self._fares)


@lru_cache(maxsize=None)
def default_fare_table() -> FareTable:
    return FareTable.from_rows(REFERENCE_FARE_ROWS)


def calculate_price(
    origin: str,
    destination: str,
    route_line: Optional[RouteLine] = None,
    fare_table: Optional[FareTable] = None,
    policy: Optional[FarePolicy] = None,
) -> Optional[int]:
    """
    Fare for one seat / one package between two stops.

    1. Explicit table row wins.
    2. Otherwise base_fare + step_fare * |index(destination) - index(origin)|.
    3. None if either stop is not on the route line.
    """
    if fare_table is None:
        fare_table = default_fare_table()

    explicit = fare_table.get(origin, destination)
    if explicit:
        return explicit

    route_line = route_line or default_route_line()
    origin_idx = route_line.index_of(origin)
    destination_idx = route_line.index_of(destination)
    if origin_idx == NOT_FOUND or destination_idx == NOT_FOUND:
        return None

    policy = policy or default_fare_policy()
    return policy.base_fare + policy.step_fare * abs(destination_idx - origin_idx)


def trip_fare(
    origin: str,
    destination: str,
    seats: int,
    route_line: Optional[RouteLine] = None,
    fare_table: Optional[FareTable] = None,
    policy: Optional[FarePolicy] = None,
) -> Optional[int]:
    """
    Total fare for a booking of `seats` seats. None if the route is unpriceable.
    """
    if seats < 1:
        raise ValueError("seats must be >= 1")

    price = calculate_price(origin, destination, route_line, fare_table, policy)
    if price is None:
        return None
    return price * seats
