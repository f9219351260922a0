"""
Purpose: Orchestrator for the operator's assignment screen (the "glue").
What it does:
Ranks the compatible drivers for a paid trip or a requested package and,
once the operator picks one, binds that driver to the request.
The write itself is delegated to an injected request store.
"""

import logging
from dataclasses import replace
from typing import List, Optional

from drivers.models import Driver
from drivers.selection import compatible_drivers_for_package, compatible_drivers_for_trip
from orders.models import PackageRequest, PackageStatus, TripRequest, TripStatus
from routing.route_line import RouteLine, default_route_line

logger = logging.getLogger(__name__)


class AssignmentError(Exception):
    """Raised when the operator picks a driver who cannot take the request."""


class Dispatcher:
    """
    Coordinates binding a driver to a TripRequest or PackageRequest.
    """
    def __init__(self, request_store=None, route_line: Optional[RouteLine] = None):
        self.request_store = request_store
        self.route_line = route_line or default_route_line()

    def candidates_for_trip(self, trip: TripRequest, drivers: List[Driver]) -> List[Driver]:
        return compatible_drivers_for_trip(drivers, trip, self.route_line)

    def candidates_for_package(self, package: PackageRequest, drivers: List[Driver]) -> List[Driver]:
        return compatible_drivers_for_package(drivers, package, self.route_line)

    def assign_trip(self, trip: TripRequest, driver_id: str, drivers: List[Driver]) -> TripRequest:
        """
        Binds `driver_id` to the trip. The driver must be one of the trip's
        candidates against the current roster snapshot.
        """
        if trip.status == TripStatus.CANCELLED:
            raise AssignmentError(f"Trip {trip.id} is cancelled.")

        candidate_ids = [driver.id for driver in self.candidates_for_trip(trip, drivers)]
        if driver_id not in candidate_ids:
            logger.warning("Rejected driver %s for trip %s: not a compatible driver", driver_id, trip.id)
            raise AssignmentError(f"Driver {driver_id} cannot serve trip {trip.id}.")

        assigned = replace(trip, driver_id=driver_id, status=TripStatus.ASSIGNED)

        if self.request_store:
            self.request_store.save_trip(assigned)

        logger.info("Trip %s assigned to driver %s", trip.id, driver_id)
        return assigned

    def quote_package(self, package: PackageRequest, driver_id: str, price: int,
                      drivers: List[Driver]) -> PackageRequest:
        """
        Attaches the operator's quote and chosen driver to a package.
        """
        if price <= 0:
            raise AssignmentError(f"Quote for package {package.id} must be > 0.")

        if package.status in (PackageStatus.PAID, PackageStatus.IN_TRANSIT, PackageStatus.DELIVERED):
            raise AssignmentError(f"Package {package.id} is already {package.status.value}.")

        candidate_ids = [driver.id for driver in self.candidates_for_package(package, drivers)]
        if driver_id not in candidate_ids:
            logger.warning("Rejected driver %s for package %s: not a compatible driver", driver_id, package.id)
            raise AssignmentError(f"Driver {driver_id} cannot carry package {package.id}.")

        quoted = replace(package, driver_id=driver_id, price=price, status=PackageStatus.QUOTED)

        if self.request_store:
            self.request_store.save_package(quoted)

        logger.info("Package %s quoted at %d MZN with driver %s", package.id, price, driver_id)
        return quoted
