"""
Purpose: Turn a flat roster snapshot (CSV / DataFrame) into Driver objects.
What it does:
Each row is one driver-day:

driver_id, name, is_approved, is_priority, date, route_start, route_end, departure_time

Rows are grouped per driver into available_dates + day_routes.
A row with an empty date is a legacy profile row (route_start/route_end
without a per-day agenda).
"""

from __future__ import annotations

from typing import List

import pandas as pd

from .models import Driver, DriverSegment

ROSTER_COLUMNS = [
    "driver_id", "name", "is_approved", "is_priority",
    "date", "route_start", "route_end", "departure_time",
]


def _text(value) -> str:
    if pd.isna(value):
        return ""
    return str(value).strip()


def _flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes")
    if pd.isna(value):
        return False
    return bool(value)


def roster_from_frame(frame: pd.DataFrame) -> List[Driver]:
    """
    Builds one Driver per driver_id, in first-seen order.
    """
    missing = [column for column in ROSTER_COLUMNS if column not in frame.columns]
    if missing:
        raise ValueError(f"Roster is missing columns: {missing}")

    drivers = []
    for driver_id, rows in frame.groupby("driver_id", sort=False):
        first = rows.iloc[0]

        dates = []
        day_routes = {}
        route_start = route_end = None

        for _, row in rows.iterrows():
            date = _text(row["date"])
            start = _text(row["route_start"])
            end = _text(row["route_end"])

            if not date:
                route_start, route_end = start or None, end or None
                continue

            if date not in dates:
                dates.append(date)
            if start and end:
                day_routes[date] = DriverSegment(start, end, _text(row["departure_time"]) or None)

        drivers.append(
            Driver.new(
                driver_id=str(driver_id),
                name=_text(first["name"]),
                is_approved=_flag(first["is_approved"]),
                is_priority=_flag(first["is_priority"]),
                available_dates=dates,
                day_routes=day_routes,
                route_start=route_start,
                route_end=route_end,
            )
        )
    return drivers


def load_roster(filepath: str) -> List[Driver]:
    frame = pd.read_csv(filepath, dtype=str, keep_default_na=True)
    return roster_from_frame(frame)
