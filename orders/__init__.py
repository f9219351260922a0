"""
Orders domain package.

Public API:
- Domain models: TripRequest, PackageRequest, TripStatus, PackageStatus,
  PackageSize, PaymentMethod
- Reporting: monthly_revenue, RevenueSummary
"""
from .models import (
    PackageRequest,
    PackageSize,
    PackageStatus,
    PaymentMethod,
    TripRequest,
    TripStatus,
)
from .revenue import RevenueSummary, monthly_revenue

__all__ = ["TripRequest",
           "PackageRequest",
             "TripStatus",
               "PackageStatus",
               "PackageSize",
               "PaymentMethod",
               "RevenueSummary",
               "monthly_revenue",
               ]
