"""
Purpose: Business rules for choosing which drivers can take a request.
What it does:
Accepts a trip or package request and the driver roster, filters out
ineligible drivers, keeps those whose route covers the request, and
ranks the survivors with priority drivers first.
"""

import logging
from typing import List, Optional

from orders.models import PackageRequest, TripRequest
from routing.route_line import RouteLine, default_route_line
from .coverage import covers
from .models import Driver

logger = logging.getLogger(__name__)


def filter_eligible_drivers(drivers: List[Driver]) -> List[Driver]:
    """
    Returns only drivers the operator has approved.
    """
    eligible = []

    for driver in drivers:
        if not driver.is_approved:
            continue

        eligible.append(driver)

    return eligible


def match_for_trip(
    drivers: List[Driver],
    trip: TripRequest,
    route_line: Optional[RouteLine] = None,
) -> List[Driver]:
    """
    Approved drivers who work on the trip's date and whose route for that
    day covers origin -> destination. Input order is kept; no ranking.
    """
    route_line = route_line or default_route_line()

    matched = []
    for driver in filter_eligible_drivers(drivers):
        # segment_for() is None when the date is not in the driver's agenda.
        segment = driver.segment_for(trip.date)
        if covers(segment, trip.origin, trip.destination, route_line):
            matched.append(driver)

    logger.debug(
        "Trip %s %s->%s on %s: %d/%d drivers match",
        trip.id, trip.origin, trip.destination, trip.date, len(matched), len(drivers),
    )
    return matched


def match_for_package(
    drivers: List[Driver],
    package: PackageRequest,
    route_line: Optional[RouteLine] = None,
) -> List[Driver]:
    """
    Approved drivers with at least one declared day-route covering
    origin -> destination, whatever the date.
    """
    route_line = route_line or default_route_line()

    matched = []
    for driver in filter_eligible_drivers(drivers):
        if any(covers(segment, package.origin, package.destination, route_line)
               for segment in driver.segments()):
            matched.append(driver)

    logger.debug(
        "Package %s %s->%s: %d/%d drivers match",
        package.id, package.origin, package.destination, len(matched), len(drivers),
    )
    return matched


def rank_by_priority(drivers: List[Driver]) -> List[Driver]:
    """
    Priority drivers first. Otherwise the input order is kept (stable partition).
    """
    return sorted(drivers, key=lambda driver: not driver.is_priority)


def compatible_drivers_for_trip(
    drivers: List[Driver],
    trip: TripRequest,
    route_line: Optional[RouteLine] = None,
) -> List[Driver]:
    return rank_by_priority(match_for_trip(drivers, trip, route_line))


def compatible_drivers_for_package(
    drivers: List[Driver],
    package: PackageRequest,
    route_line: Optional[RouteLine] = None,
) -> List[Driver]:
    return rank_by_priority(match_for_package(drivers, package, route_line))
