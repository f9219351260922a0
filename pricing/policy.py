"""
Purpose: Central configuration for fares (single source of truth).
What it does:

Stores the tunable numbers of the fare schedule:

BASE_FARE = 300 (MZN)

STEP_FARE = 75 (MZN per stop travelled)

PLATFORM_SHARE_PERCENT = 15

Values can be overridden from the environment / .env file.

Rule: No logic here—just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


@dataclass(frozen=True)
class FarePolicy:
    """
    Central configuration for the proportional fare fallback.

    fallback fare = base_fare + step_fare * stops_travelled
    """

    # --- Proportional fallback ---
    base_fare: int = 300
    step_fare: int = 75

    # --- Reporting ---
    # Share of gross revenue the platform keeps.
    platform_share_percent: int = 15

    def validate(self) -> None:
        """
        Basic sanity checks.
        """
        if self.base_fare < 0:
            raise ValueError("base_fare must be >= 0")

        if self.step_fare < 0:
            raise ValueError("step_fare must be >= 0")

        if not 0 <= self.platform_share_percent <= 100:
            raise ValueError("platform_share_percent must be between 0 and 100")


@lru_cache(maxsize=None)
def default_fare_policy() -> FarePolicy:
    """
    Convenience factory for the default policy.
    Reads BASE_FARE, STEP_FARE and PLATFORM_SHARE_PERCENT overrides if set.
    """
    load_dotenv()
    p = FarePolicy(
        base_fare=int(os.getenv("BASE_FARE", FarePolicy.base_fare)),
        step_fare=int(os.getenv("STEP_FARE", FarePolicy.step_fare)),
        platform_share_percent=int(
            os.getenv("PLATFORM_SHARE_PERCENT", FarePolicy.platform_share_percent)
        ),
    )
    p.validate()
    return p
