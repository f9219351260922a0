"""
Purpose: Core data models for the drivers domain.
What it does:
Defines the structure of a Driver and the route segments they declare,
without relying on any storage layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional, Sequence, Tuple, Union


@dataclass(frozen=True)
class DriverSegment:
    """
    A directed stretch of the route line a driver covers (start -> end).
    Direction is derived from the route line, never stored.
    """
    start: str
    end: str
    time: Optional[str] = None

    @classmethod
    def from_value(cls, value: Union[DriverSegment, Mapping[str, str], None]) -> Optional[DriverSegment]:
        """
        Accepts a segment or a raw record like {"start": ..., "end": ..., "time": ...}.
        Records missing either endpoint give None.
        """
        if value is None or isinstance(value, DriverSegment):
            return value

        start = value.get("start")
        end = value.get("end")
        if not start or not end:
            return None
        return cls(start=start, end=end, time=value.get("time"))


@dataclass(frozen=True)
class Driver:
    """
    A read-only snapshot of a driver as the matcher sees it.

    A driver declares either:
    - day_routes: one segment per date (YYYY-MM-DD), or
    - route_start/route_end: a single segment used on every available date.
    """
    id: str
    name: str = ""
    is_approved: bool = False
    is_priority: bool = False

    available_dates: Tuple[str, ...] = ()
    day_routes: Mapping[str, DriverSegment] = field(default_factory=dict, hash=False)

    # Legacy single-route profile.
    route_start: Optional[str] = None
    route_end: Optional[str] = None

    available_seats: Optional[int] = None

    @classmethod
    def new(
        cls,
        driver_id: str,
        name: str = "",
        is_approved: bool = False,
        is_priority: bool = False,
        available_dates: Optional[Sequence[str]] = None,
        day_routes: Optional[Mapping[str, Union[DriverSegment, Mapping[str, str]]]] = None,
        route_start: Optional[str] = None,
        route_end: Optional[str] = None,
        available_seats: Optional[int] = None,
    ) -> Driver:
        segments = {}
        for date, raw in (day_routes or {}).items():
            segment = DriverSegment.from_value(raw)
            if segment is not None:
                segments[date] = segment

        return cls(
            id=driver_id,
            name=name,
            is_approved=is_approved,
            is_priority=is_priority,
            available_dates=tuple(available_dates or ()),
            day_routes=segments,
            route_start=route_start or None,
            route_end=route_end or None,
            available_seats=available_seats,
        )

    @property
    def legacy_segment(self) -> Optional[DriverSegment]:
        if self.route_start and self.route_end:
            return DriverSegment(self.route_start, self.route_end)
        return None

    def is_available_on(self, date: str) -> bool:
        return date in self.available_dates

    def segment_for(self, date: str) -> Optional[DriverSegment]:
        """
        The segment this driver runs on `date`, or None.
        The legacy pair only applies to drivers with no per-day routes at all.
        """
        if not self.is_available_on(date):
            return None
        if self.day_routes:
            return self.day_routes.get(date)
        return self.legacy_segment

    def segments(self) -> Iterator[DriverSegment]:
        """Every segment declared for one of the driver's available dates."""
        for date in self.available_dates:
            segment = self.segment_for(date)
            if segment is not None:
                yield segment
