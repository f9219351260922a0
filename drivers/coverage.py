"""
Purpose: The Route-Coverage Predicate.
What it does:
Decides whether a driver's declared segment can carry a request from
origin to destination: same direction, and the request's interval lies
inside the driver's interval.

Rule: Pure function. Unknown stops mean "not covered", never an exception.
"""

from __future__ import annotations

from typing import Optional

from routing.route_line import NOT_FOUND, RouteLine, default_route_line
from .models import DriverSegment


def covers(
    segment: Optional[DriverSegment],
    origin: str,
    destination: str,
    route_line: Optional[RouteLine] = None,
) -> bool:
    """
    True if a driver running `segment` passes through origin and then destination.

    Northbound (start before end):  start <= origin < destination <= end
    Southbound (start after end):   start >= origin > destination >= end

    Zero-length segments and zero-length requests are never covered.
    """
    if segment is None:
        return False

    route_line = route_line or default_route_line()

    driver_start_idx = route_line.index_of(segment.start)
    driver_end_idx = route_line.index_of(segment.end)
    if driver_start_idx == NOT_FOUND or driver_end_idx == NOT_FOUND:
        return False

    request_origin_idx = route_line.index_of(origin)
    request_destination_idx = route_line.index_of(destination)
    if request_origin_idx == NOT_FOUND or request_destination_idx == NOT_FOUND:
        return False

    if driver_start_idx == driver_end_idx or request_origin_idx == request_destination_idx:
        return False

    driver_northbound = driver_start_idx < driver_end_idx
    request_northbound = request_origin_idx < request_destination_idx
    if driver_northbound != request_northbound:
        return False

    if driver_northbound:
        return request_origin_idx >= driver_start_idx and request_destination_idx <= driver_end_idx

    return request_origin_idx <= driver_start_idx and request_destination_idx >= driver_end_idx
