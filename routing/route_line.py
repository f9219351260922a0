"""
Purpose: The Route Index.
What it does:
Holds the fixed, ordered list of serviceable stops (the "route line") and
answers position lookups. Every direction/distance question in the engine
goes through index_of(); nothing compares stop names directly.

Rule: Static configuration only. Loaded once, never mutated.
"""

from __future__ import annotations

import os
from enum import Enum
from functools import lru_cache
from typing import Iterable, Optional, Tuple

from dotenv import load_dotenv

NOT_FOUND = -1

# South terminus first, north terminus last.
MOZ_ROUTES: Tuple[str, ...] = (
    "MAPUTO",
    "MACIA",
    "XAI-XAI",
    "CHÓKWÈ",
    "CHIBUTO",
    "MANJACAZE",
    "ZAVALA",
    "INHARRIME",
    "MAXIXE",
    "HOMOÍNE",
    "PANDA",
    "MASSINGA",
    "VILANCULOS",
)


class Direction(str, Enum):
    """
    Travel direction along the line's index order (not true geography).
    """
    NORTHBOUND = "northbound"
    SOUTHBOUND = "southbound"


class RouteLine:
    """
    A linear, totally ordered sequence of stops.
    """

    def __init__(self, stops: Iterable[str]):
        stops = tuple(stops)
        if not stops:
            raise ValueError("A route line needs at least one stop.")

        positions = {}
        for idx, name in enumerate(stops):
            if not name:
                raise ValueError(f"Empty stop name at position {idx}.")
            if name in positions:
                raise ValueError(f"Duplicate stop on route line: {name}")
            positions[name] = idx

        self._stops = stops
        self._positions = positions

    @property
    def stops(self) -> Tuple[str, ...]:
        return self._stops

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self):
        return iter(self._stops)

    def __repr__(self) -> str:
        return f"RouteLine({self._stops[0]} .. {self._stops[-1]}, {len(self._stops)} stops)"

    def index_of(self, name: Optional[str]) -> int:
        """Zero-based position of `name`, or NOT_FOUND."""
        if name is None:
            return NOT_FOUND
        return self._positions.get(name, NOT_FOUND)

    def contains(self, name: Optional[str]) -> bool:
        return self.index_of(name) != NOT_FOUND

    def direction(self, origin: Optional[str], destination: Optional[str]) -> Optional[Direction]:
        """
        NORTHBOUND if origin sits before destination on the line, SOUTHBOUND if after.
        None when either end is unknown or both are the same stop.
        """
        origin_idx = self.index_of(origin)
        destination_idx = self.index_of(destination)

        if origin_idx == NOT_FOUND or destination_idx == NOT_FOUND:
            return None
        if origin_idx == destination_idx:
            return None

        return Direction.NORTHBOUND if origin_idx < destination_idx else Direction.SOUTHBOUND

    def hops(self, origin: Optional[str], destination: Optional[str]) -> Optional[int]:
        """Number of stops between the two ends, or None if either is unknown."""
        origin_idx = self.index_of(origin)
        destination_idx = self.index_of(destination)
        if origin_idx == NOT_FOUND or destination_idx == NOT_FOUND:
            return None
        return abs(destination_idx - origin_idx)


@lru_cache(maxsize=None)
def default_route_line() -> RouteLine:
    """
    The Maputo -> Vilanculos line, unless ROUTE_LINE is set in the environment
    (comma-separated stop names, south to north).
    Resolved once per process; the same instance is returned afterwards.
    """
    load_dotenv()
    override = os.getenv("ROUTE_LINE")
    if override:
        return RouteLine(stop.strip() for stop in override.split(",") if stop.strip())
    return RouteLine(MOZ_ROUTES)
