"""
Drivers domain package.

Public API:
- Domain models: Driver, DriverSegment
- Coverage predicate: covers
- Matching + ranking: match_for_trip, match_for_package, rank_by_priority,
  compatible_drivers_for_trip, compatible_drivers_for_package
"""
from .models import Driver, DriverSegment
from .coverage import covers
from .selection import (
    compatible_drivers_for_package,
    compatible_drivers_for_trip,
    filter_eligible_drivers,
    match_for_package,
    match_for_trip,
    rank_by_priority,
)

__all__ = ["Driver",
           "DriverSegment",
             "covers",
               "filter_eligible_drivers",
               "match_for_trip",
               "match_for_package",
               "rank_by_priority",
               "compatible_drivers_for_trip",
               "compatible_drivers_for_package",
               ]
