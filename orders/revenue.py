"""
Purpose: Monthly revenue summary for the operator.
What it does:
Adds up confirmed trip payments for a month plus paid packages, and
splits off the platform's share according to the fare policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from pricing.policy import FarePolicy, default_fare_policy
from .models import PackageRequest, PackageStatus, TripRequest


@dataclass(frozen=True)
class RevenueSummary:
    month: str
    trip_revenue: int
    package_revenue: int
    platform_share_percent: int

    @property
    def gross(self) -> int:
        return self.trip_revenue + self.package_revenue

    @property
    def platform_profit(self) -> float:
        return self.gross * self.platform_share_percent / 100


def monthly_revenue(
    trips: Iterable[TripRequest],
    packages: Iterable[PackageRequest],
    month: str,
    policy: Optional[FarePolicy] = None,
) -> RevenueSummary:
    """
    `month` is YYYY-MM. Trips count when their travel date falls in the month
    and payment is confirmed. Packages carry no date, so every PAID package counts.
    """
    policy = policy or default_fare_policy()

    trip_revenue = sum(
        trip.price for trip in trips
        if trip.date.startswith(month) and trip.payment_confirmed
    )
    package_revenue = sum(
        package.price for package in packages
        if package.status == PackageStatus.PAID
    )

    return RevenueSummary(
        month=month,
        trip_revenue=trip_revenue,
        package_revenue=package_revenue,
        platform_share_percent=policy.platform_share_percent,
    )
