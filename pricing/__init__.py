"""
Pricing domain package.

Public API:
- Price calculator: calculate_price, trip_fare
- Fare data: FareTable, default_fare_table
- Configuration: FarePolicy, default_fare_policy
"""
from .fares import FareTable, calculate_price, default_fare_table, trip_fare
from .policy import FarePolicy, default_fare_policy

__all__ = ["FareTable",
           "calculate_price",
             "default_fare_table",
               "trip_fare",
               "FarePolicy",
               "default_fare_policy",
               ]
